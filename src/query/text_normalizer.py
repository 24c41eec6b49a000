import unicodedata
from typing import Optional, Tuple

# Folded after Turkish lowercasing; dotless ı joins i so I/İ/ı/i compare equal.
_FOLD_TABLE = str.maketrans({
    "ğ": "g",
    "ü": "u",
    "ş": "s",
    "ı": "i",
    "ö": "o",
    "ç": "c",
})

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"
_LETTER_RANK = {ch: i for i, ch in enumerate(TURKISH_ALPHABET)}

def turkish_lower(text: str) -> str:
    """
    Lowercase using Turkish rules: İ (or I + combining dot) -> i and I -> ı.
    str.lower() alone turns İ into 'i' + combining dot and I into 'i'.
    """
    if not text:
        return ""
    return text.replace("I\u0307", "i").replace("İ", "i").replace("I", "ı").lower()

def normalize_turkish(text: str) -> str:
    """
    Normalize Turkish text for case- and diacritic-insensitive comparison.

    I,İ,ı,i -> i   U,Ü,u,ü -> u   O,Ö,o,ö -> o
    C,Ç,c,ç -> c   G,Ğ,g,ğ -> g   S,Ş,s,ş -> s
    """
    if not text:
        return ""
    return turkish_lower(text).translate(_FOLD_TABLE)

def _char_weights(ch: str) -> Tuple[Optional[Tuple[int, int]], int]:
    """(primary weight or None for a bare combining mark, accent weight)."""
    rank = _LETTER_RANK.get(ch)
    if rank is not None:
        return (2, rank), 0
    if unicodedata.combining(ch):
        return None, unicodedata.combining(ch)
    if ch.isdigit():
        return (1, int(ch) if ch.isascii() else ord(ch)), 0
    if ch.isspace() or not ch.isalnum():
        return (0, ord(ch)), 0
    # é, â, ñ ... collate as their base letter with an accent difference
    decomposed = unicodedata.normalize("NFD", ch)
    base_rank = _LETTER_RANK.get(decomposed[0])
    if base_rank is not None and len(decomposed) > 1:
        return (2, base_rank), sum(unicodedata.combining(m) for m in decomposed[1:])
    return (3, ord(ch)), 0

def turkish_sort_key(text: str) -> Tuple:
    """
    Sort key approximating Turkish collation (``localeCompare(.., 'tr')``).
    Primary: Turkish alphabet order, ignoring case and accents on letters
    outside the alphabet. Ties: unaccented first, then lowercase first, then
    the raw string.
    """
    text = text or ""
    lowered = turkish_lower(text)
    primary = []
    accents = []
    for ch in lowered:
        weight, accent = _char_weights(ch)
        if weight is not None:
            primary.append(weight)
        accents.append(accent)
    case = tuple(0 if turkish_lower(ch) == ch else 1 for ch in text)
    return (tuple(primary), tuple(accents), case, text)
