from typing import Iterable, List, Mapping, Sequence, Union

from query.records import RECORD_FIELDS, SUBSTRING_FIELDS, FilterState, Record
from query.text_normalizer import normalize_turkish

Filters = Union[FilterState, Mapping[str, str], None]

def as_filter_state(filters: Filters) -> FilterState:
    if isinstance(filters, FilterState):
        return filters
    return FilterState.from_mapping(filters)

def search(records: Sequence[Record], query: str) -> Sequence[Record]:
    """
    Keep records where any field, normalized, contains the normalized query.
    An empty query returns the input unchanged.
    """
    if not query:
        return records
    needle = normalize_turkish(query)
    return [
        r for r in records
        if any(needle in normalize_turkish(r.get(name)) for name in RECORD_FIELDS)
    ]

def _matcher(filters: FilterState):
    active = filters.active()
    exact = [(k, v) for k, v in active.items() if k not in SUBSTRING_FIELDS]
    partial = [(k, normalize_turkish(v)) for k, v in active.items() if k in SUBSTRING_FIELDS]

    def matches(r: Record) -> bool:
        for k, v in exact:
            if r.get(k) != v:
                return False
        for k, v in partial:
            if v not in normalize_turkish(r.get(k)):
                return False
        return True

    return matches

def apply_filters(records: Iterable[Record], filters: Filters) -> List[Record]:
    """Exact match on dropdown columns, normalized substring on locality; AND across columns."""
    state = as_filter_state(filters)
    if state.is_empty():
        return list(records)
    matches = _matcher(state)
    return [r for r in records if matches(r)]
