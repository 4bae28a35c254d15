# pagekit/pagination/schemas.py
from typing import Generic, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pagekit.logger import get_logger
from .constants import (
    DEFAULT_PAGE_SIZE,
    DESCENDING_PREFIX,
    MAX_PAGE_SIZE,
    SORT_SPEC_PATTERN,
    SORT_SPEC_SEPARATOR,
    SortOrder,
)

T = TypeVar("T")

logger = get_logger(__name__)


class Sort(BaseModel):
    column: str = ""
    order: SortOrder | None = None

    def __str__(self) -> str:
        if not self.column:
            return ""
        order = self.order or SortOrder.ASC
        return f"{self.column} {order.value}"

    @classmethod
    def parse(cls, spec: str) -> "Sort | None":
        sort, ok = new_sort(spec)
        return sort if ok else None


def new_sort(spec: str) -> tuple[Sort, bool]:
    """
    Parses a shorthand sort spec such as "name" or "-created".

    A leading "-" selects descending order. The spec is accepted as long as it
    contains an alphanumeric run anywhere, so "name desc" parses to a column
    named "name desc".
    """
    if not spec or not SORT_SPEC_PATTERN.search(spec):
        return Sort(), False

    if spec.startswith(DESCENDING_PREFIX):
        return Sort(column=spec[1:], order=SortOrder.DESC), True
    return Sort(column=spec, order=SortOrder.ASC), True


def _parse_specs(specs: Iterable[str]) -> list[Sort]:
    sorts = []
    for spec in specs:
        sort, ok = new_sort(spec)
        if ok:
            sorts.append(sort)
        else:
            logger.debug("sort_spec_ignored", spec=spec)
    return sorts


class Page(BaseModel):
    size: int = Field(0, ge=0)
    page: int = Field(0, ge=0)
    more: bool = False
    column: str = ""
    order: list[Sort] = Field(default_factory=list, alias="sort")

    model_config = ConfigDict(populate_by_name=True)

    def resolve_order(self, *default_sort: str) -> list[Sort]:
        return resolve_order(self, *default_sort)

    def limit(self) -> int:
        return page_limit(self)

    def offset(self) -> int:
        return page_offset(self)


def new_page(size: int = 0, page: int = 0, *sort: Sort) -> Page:
    if size == 0:
        size = DEFAULT_PAGE_SIZE
    if page == 0:
        page = 1
    return Page(size=size, page=page, order=list(sort))


def resolve_order(page: Page | None, *default_sort: str) -> list[Sort]:
    """
    Picks the ordering for a page.

    An explicit `order` list wins, then the comma separated `column` spec, then
    `default_sort`. Specs that fail to parse are dropped.
    """
    if page is not None and page.order:
        return page.order

    if page is None or not page.column:
        return _parse_specs(default_sort)

    return _parse_specs(page.column.split(SORT_SPEC_SEPARATOR))


def page_limit(page: Page | None) -> int:
    n = DEFAULT_PAGE_SIZE
    if page is not None and page.size != 0:
        n = page.size
    return min(n, MAX_PAGE_SIZE)


def page_offset(page: Page | None) -> int:
    n = 1
    if page is not None and page.page != 0:
        n = page.page
    n = max(n, 1)
    return (n - 1) * page_limit(page)


def next_page_number(offset: int, limit: int) -> int:
    return 1 + offset // limit


class PagedResponse(BaseModel, Generic[T]):
    items: list[T]
    page: Page

    @classmethod
    def create(cls, items: list[T], page: Page) -> "PagedResponse[T]":
        return cls(items=items, page=page)
