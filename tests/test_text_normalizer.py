"""Tests for Turkish text normalization and collation."""
import pytest

from query.text_normalizer import normalize_turkish, turkish_lower, turkish_sort_key


def test_dotted_and_dotless_i_variants_are_equal():
    assert normalize_turkish("İstanbul") == normalize_turkish("istanbul") == normalize_turkish("İSTANBUL")
    assert normalize_turkish("İstanbul") == "istanbul"


def test_uppercase_ascii_i_folds_to_i():
    assert normalize_turkish("IĞDIR") == "igdir"
    assert normalize_turkish("Iğdır") == "igdir"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Çeşme", "cesme"),
        ("ÇEŞME", "cesme"),
        ("Gökova Üzümlü", "gokova uzumlu"),
        ("Ağva", "agva"),
        ("Kırsal Alan", "kirsal alan"),
    ],
)
def test_folding_table(text, expected):
    assert normalize_turkish(text) == expected


@pytest.mark.parametrize("empty", ["", None])
def test_empty_input_returns_empty_string(empty):
    assert normalize_turkish(empty) == ""


@pytest.mark.parametrize("text", ["İSTANBUL", "Iğdır", "Şanlıurfa", "Kırsal Alan Değil", "plain ascii"])
def test_normalize_is_idempotent(text):
    once = normalize_turkish(text)
    assert normalize_turkish(once) == once


def test_turkish_lower_does_not_leave_combining_dot():
    assert turkish_lower("İzmir") == "izmir"
    assert turkish_lower("ISPARTA") == "ısparta"


def test_sort_key_follows_turkish_alphabet():
    names = ["Zonguldak", "Ünye", "Uşak", "İzmir", "Iğdır", "Çubuk", "Cide", "Ödemiş", "Ordu", "Ankara"]
    assert sorted(names, key=turkish_sort_key) == [
        "Ankara", "Cide", "Çubuk", "Iğdır", "İzmir", "Ordu", "Ödemiş", "Uşak", "Ünye", "Zonguldak",
    ]


def test_sort_key_is_case_insensitive_with_lowercase_first():
    assert sorted(["Beta", "alfa", "Alfa"], key=turkish_sort_key) == ["alfa", "Alfa", "Beta"]


def test_sort_key_orders_digits_before_letters():
    assert sorted(["Mahalle", "1. Bölge", " Ada"], key=turkish_sort_key) == [" Ada", "1. Bölge", "Mahalle"]


def test_capital_i_with_combining_dot_lowercases_to_i():
    assert turkish_lower("I\u0307zmir") == "izmir"
    assert normalize_turkish("I\u0307ZMI\u0307R") == normalize_turkish("\u0130zmir") == "izmir"


def test_accented_letters_sort_with_their_base_letter():
    assert sorted(["Cafz", "Café"], key=turkish_sort_key) == ["Café", "Cafz"]
    assert sorted(["Zeytin", "Ñandú", "Mersin"], key=turkish_sort_key) == ["Mersin", "Ñandú", "Zeytin"]


def test_turkish_letters_stay_distinct_from_their_base():
    assert sorted(["Çz", "Cz", "Ca"], key=turkish_sort_key) == ["Ca", "Cz", "Çz"]


def test_accent_difference_outranks_case_difference():
    assert sorted(["âb", "Ab"], key=turkish_sort_key) == ["Ab", "âb"]
    assert sorted(["Kâr", "kar", "Kar"], key=turkish_sort_key) == ["kar", "Kar", "Kâr"]
