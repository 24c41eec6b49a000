from dataclasses import dataclass, asdict, fields, replace
from typing import Dict, Mapping, Optional

from query.text_normalizer import normalize_turkish

RECORD_FIELDS = ("region", "subregion", "authority", "locality", "status")
# Dropdown columns; locality is free text and gets no option list.
FACET_FIELDS = ("region", "subregion", "authority", "status")
SUBSTRING_FIELDS = ("locality",)

# Column names used by the published Turkish lists.
FIELD_ALIASES = {
    "il": "region",
    "ilce": "subregion",
    "belediye": "authority",
    "mahalle": "locality",
    "durum": "status",
}

@dataclass(frozen=True)
class Record:
    region: str = ""
    subregion: str = ""
    authority: str = ""
    locality: str = ""
    status: str = ""

    def get(self, name: str) -> str:
        return getattr(self, name)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

@dataclass(frozen=True)
class FilterState:
    """One constraint per column; an empty string means no constraint."""

    region: str = ""
    subregion: str = ""
    authority: str = ""
    locality: str = ""
    status: str = ""

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, str]]) -> "FilterState":
        if not values:
            return cls()
        unknown = set(values) - set(RECORD_FIELDS)
        if unknown:
            raise ValueError(f"Unknown filter field(s): {', '.join(sorted(unknown))}")
        return cls(**{k: (v if isinstance(v, str) else "") for k, v in values.items()})

    def get(self, name: str) -> str:
        return getattr(self, name)

    def without(self, name: str) -> "FilterState":
        return replace(self, **{name: ""})

    def with_value(self, name: str, value: str) -> "FilterState":
        if name not in RECORD_FIELDS:
            raise ValueError(f"Unknown filter field: {name}")
        return replace(self, **{name: value or ""})

    def active(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    def is_empty(self) -> bool:
        return not self.active()

def canonical_field(key: str) -> Optional[str]:
    """Map a source column name (English or Turkish, any case) to a record field."""
    k = normalize_turkish(key.strip()) if isinstance(key, str) else ""
    if k in RECORD_FIELDS:
        return k
    return FIELD_ALIASES.get(k)
