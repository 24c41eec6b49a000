import math
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
ELLIPSIS = "..."

def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(0, math.ceil(count / page_size))

def paginate(records: Sequence[T], page_size: int, page: int) -> List[T]:
    """
    Return the 1-based ``page`` of ``records``. Pages past the end (or below 1)
    are empty rather than an error.
    """
    pages = total_pages(len(records), page_size)
    if page < 1 or page > pages:
        return []
    start = (page - 1) * page_size
    return list(records[start:start + page_size])

def page_window(current: int, total: int, max_visible: int = 5) -> List[Union[int, str]]:
    """
    Page-control entries: all pages when they fit, otherwise first, a window
    around ``current``, last, with ``"..."`` where pages are skipped.
    Nothing is shown for a single page.
    """
    if total <= 1:
        return []
    if total <= max_visible:
        return list(range(1, total + 1))

    start = max(2, current - 1)
    end = min(total - 1, current + 1)
    if current <= 3:
        end = 4
    elif current >= total - 2:
        start = total - 3

    entries: List[Union[int, str]] = [1]
    if start > 2:
        entries.append(ELLIPSIS)
    entries.extend(range(start, end + 1))
    if end < total - 1:
        entries.append(ELLIPSIS)
    entries.append(total)
    return entries

class PageState:
    """Current page number, clamped to [1, total_pages]."""

    def __init__(self) -> None:
        self.page = 1

    def reset(self) -> None:
        self.page = 1

    def go_to(self, page: int, pages: int) -> int:
        if pages <= 1:
            return self.page
        self.page = min(max(1, int(page)), pages)
        return self.page

    def next(self, pages: int) -> int:
        return self.go_to(self.page + 1, pages)

    def previous(self, pages: int) -> int:
        return self.go_to(self.page - 1, pages)
