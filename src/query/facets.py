from typing import Dict, Iterable, List

from query.filters import Filters, as_filter_state, apply_filters
from query.records import FACET_FIELDS, Record
from query.text_normalizer import turkish_sort_key

def facet_options(base_records: Iterable[Record], filters: Filters, target_field: str) -> List[str]:
    """
    Distinct values of ``target_field`` left after every *other* active filter,
    sorted in Turkish collation order. The field's own constraint is ignored so
    its dropdown keeps offering the alternatives.
    """
    if target_field not in FACET_FIELDS:
        raise ValueError(f"Not a facet field: {target_field}")
    others = as_filter_state(filters).without(target_field)
    values = {
        r.get(target_field)
        for r in apply_filters(base_records, others)
    }
    return sorted((v for v in values if isinstance(v, str) and v), key=turkish_sort_key)

def all_facets(base_records: Iterable[Record], filters: Filters) -> Dict[str, List[str]]:
    base = list(base_records)
    state = as_filter_state(filters)
    return {name: facet_options(base, state, name) for name in FACET_FIELDS}
