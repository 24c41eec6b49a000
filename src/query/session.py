import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from query.facets import facet_options
from query.filters import apply_filters, search
from query.paginator import DEFAULT_PAGE_SIZE, PageState, page_window, paginate, total_pages
from query.records import FACET_FIELDS, RECORD_FIELDS, FilterState, Record

logger = logging.getLogger("settlement_lookup.session")

@dataclass
class QueryView:
    rows: List[Record]
    total_count: int
    total_pages: int
    current_page: int
    facets: Dict[str, List[str]] = field(default_factory=dict)
    page_window: List[Union[int, str]] = field(default_factory=list)

class QuerySession:
    """
    Search term, column filters and current page over a read-only record list.

    Derived views are recomputed on demand. The searched set and each facet
    list are cached on the inputs they depend on; a facet's cache key leaves
    out the facet's own filter, so selecting a value does not recompute that
    column's options.
    """

    def __init__(
        self,
        records: Sequence[Record],
        page_size: int = DEFAULT_PAGE_SIZE,
        memoize: bool = True,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.records = tuple(records)
        self.page_size = page_size
        self.memoize = memoize
        self.search_term = ""
        self.filters = FilterState()
        self._page = PageState()
        self._searched_key: Optional[str] = None
        self._searched: Sequence[Record] = self.records
        self._facet_cache: Dict[str, Tuple[tuple, Tuple[str, ...]]] = {}

    @property
    def page(self) -> int:
        return self._page.page

    def set_search(self, term: str) -> None:
        self.search_term = term or ""
        self._page.reset()

    def set_filter(self, name: str, value: str) -> None:
        self.filters = self.filters.with_value(name, value)
        self._page.reset()

    def set_filters(self, values: Dict[str, str]) -> None:
        self.filters = FilterState.from_mapping(values)
        self._page.reset()

    def reset(self) -> None:
        self.search_term = ""
        self.filters = FilterState()
        self._page.reset()

    def next_page(self) -> int:
        return self._page.next(self.total_pages())

    def previous_page(self) -> int:
        return self._page.previous(self.total_pages())

    def go_to_page(self, page: int) -> int:
        return self._page.go_to(page, self.total_pages())

    def searched(self) -> Sequence[Record]:
        if not self.memoize:
            return search(self.records, self.search_term)
        if self._searched_key != self.search_term:
            self._searched = tuple(search(self.records, self.search_term))
            self._searched_key = self.search_term
            logger.debug("Search %r matched %d records", self.search_term, len(self._searched))
        return self._searched

    def filtered(self) -> List[Record]:
        return apply_filters(self.searched(), self.filters)

    def total_pages(self) -> int:
        return total_pages(len(self.filtered()), self.page_size)

    def facet(self, name: str) -> List[str]:
        if not self.memoize:
            return facet_options(self.searched(), self.filters, name)
        key = (self.search_term,) + tuple(
            self.filters.get(other) for other in RECORD_FIELDS if other != name
        )
        cached = self._facet_cache.get(name)
        if cached is not None and cached[0] == key:
            return list(cached[1])
        options = facet_options(self.searched(), self.filters, name)
        self._facet_cache[name] = (key, tuple(options))
        return options

    def facets(self) -> Dict[str, List[str]]:
        return {name: self.facet(name) for name in FACET_FIELDS}

    def view(self) -> QueryView:
        filtered = self.filtered()
        pages = total_pages(len(filtered), self.page_size)
        current = self._page.page
        return QueryView(
            rows=paginate(filtered, self.page_size, current),
            total_count=len(filtered),
            total_pages=pages,
            current_page=current,
            facets=self.facets(),
            page_window=page_window(current, pages),
        )
