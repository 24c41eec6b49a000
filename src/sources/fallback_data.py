from query.records import Record

RURAL = "Kırsal Alan"
NOT_RURAL = "Kırsal Alan Değil"

# Served when the configured data source cannot be loaded.
FALLBACK_RECORDS = (
    Record("Adana", "Aladağ", "Aladağ Belediyesi", "Akpınar Mahallesi", RURAL),
    Record("Adana", "Seyhan", "Adana Büyükşehir Belediyesi", "Reşatbey Mahallesi", NOT_RURAL),
    Record("Ankara", "Çubuk", "Çubuk Belediyesi", "Esenboğa Mahallesi", RURAL),
    Record("Ankara", "Çankaya", "Çankaya Belediyesi", "Kızılay Mahallesi", NOT_RURAL),
    Record("Bolu", "Göynük", "Göynük Belediyesi", "Çamlık Mahallesi", RURAL),
    Record("Çanakkale", "Ayvacık", "Ayvacık Belediyesi", "Behramkale Köyü", RURAL),
    Record("Erzurum", "İspir", "İspir Belediyesi", "Ağaçlı Mahallesi", RURAL),
    Record("Iğdır", "Aralık", "Aralık Belediyesi", "Gödekli Mahallesi", RURAL),
    Record("İstanbul", "Şile", "Şile Belediyesi", "Ağva Mahallesi", RURAL),
    Record("İstanbul", "Kadıköy", "Kadıköy Belediyesi", "Moda Mahallesi", NOT_RURAL),
    Record("İzmir", "Çeşme", "Çeşme Belediyesi", "Ovacık Mahallesi", RURAL),
    Record("İzmir", "Konak", "Konak Belediyesi", "Alsancak Mahallesi", NOT_RURAL),
    Record("Muğla", "Ula", "Ula Belediyesi", "Gökova Mahallesi", RURAL),
    Record("Şanlıurfa", "Halfeti", "Halfeti Belediyesi", "Rumkale Mahallesi", RURAL),
    Record("Trabzon", "Çaykara", "Çaykara Belediyesi", "Uzungöl Mahallesi", RURAL),
    Record("Uşak", "Ulubey", "Ulubey Belediyesi", "Akbulak Mahallesi", RURAL),
)
