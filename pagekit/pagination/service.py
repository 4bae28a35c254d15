# pagekit/pagination/service.py
from typing import Callable, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from sqlalchemy import Select, text

from pagekit.exception import PaginationConfigError
from pagekit.logger import get_logger
from .config import PaginationSettings, pagination_settings
from .constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .schemas import Page, next_page_number, page_limit, page_offset, resolve_order

T = TypeVar("T")

logger = get_logger(__name__)

_FALLBACK_SIZES = {"default_size": DEFAULT_PAGE_SIZE, "max_size": MAX_PAGE_SIZE}


class PaginatorConfig(BaseModel):
    """
    Settings a Paginator is built from.

    default_size: applied when a page asks for size 0 (default 10).
    max_size: hard ceiling on the page size (default 50).
    default_sort: shorthand sort specs used when the page has no ordering.
    column_func: maps a column name to the name emitted in ORDER BY.
    """

    default_size: int = DEFAULT_PAGE_SIZE
    max_size: int = MAX_PAGE_SIZE
    default_sort: tuple[str, ...] = ()
    column_func: Optional[Callable[[str], str]] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("default_size", "max_size")
    @classmethod
    def validate_size(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise PaginationConfigError(info.field_name, v)
        # A zero size would make every page empty.
        return v or _FALLBACK_SIZES[info.field_name]

    @field_validator("column_func", mode="before")
    @classmethod
    def validate_column_func(cls, v):
        if v is not None and not callable(v):
            raise PaginationConfigError("column_func", v)
        return v


class PaginatorBuilder:
    def __init__(self):
        self._options: dict = {}

    @classmethod
    def from_settings(cls, settings: PaginationSettings | None = None) -> "PaginatorBuilder":
        if settings is None:
            settings = pagination_settings
        return (
            cls()
            .with_default_size(settings.PAGINATION_DEFAULT_SIZE)
            .with_max_size(settings.PAGINATION_MAX_SIZE)
            .with_sort(*settings.default_sort)
        )

    def with_default_size(self, size: int) -> "PaginatorBuilder":
        self._options["default_size"] = size
        return self

    def with_max_size(self, size: int) -> "PaginatorBuilder":
        self._options["max_size"] = size
        return self

    def with_sort(self, *sort: str) -> "PaginatorBuilder":
        self._options["default_sort"] = tuple(sort)
        return self

    def with_column_func(self, func: Callable[[str], str]) -> "PaginatorBuilder":
        self._options["column_func"] = func
        return self

    def build(self) -> "Paginator":
        return Paginator(PaginatorConfig(**self._options))


def new_paginator(
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
    sort: Sequence[str] = (),
    column_func: Optional[Callable[[str], str]] = None,
) -> "Paginator":
    builder = PaginatorBuilder().with_default_size(default_size).with_max_size(max_size).with_sort(*sort)
    if column_func is not None:
        builder = builder.with_column_func(column_func)
    return builder.build()


class Paginator(Generic[T]):
    """
    Adds limit/offset/order-by to a select and trims the fetched rows.

    The select is asked for one row more than the page size; when that extra
    row comes back, `Page.more` is set and the row is dropped.
    """

    def __init__(self, config: PaginatorConfig | None = None):
        self._config = config or PaginatorConfig()

    @property
    def config(self) -> PaginatorConfig:
        return self._config

    def resolve_order_strings(self, page: Page | None) -> list[str]:
        column_func = self._config.column_func
        order = []
        for sort in resolve_order(page, *self._config.default_sort):
            if column_func is not None:
                # Copy so the caller's page.order keeps its original column names.
                sort = sort.model_copy(update={"column": column_func(sort.column)})
            order.append(str(sort))
        return order

    def prepare_query(self, query: Select, page: Page | None) -> tuple[list[T], Select]:
        if page is not None:
            if page.size == 0:
                page.size = self._config.default_size
            if page.size > self._config.max_size:
                page.size = self._config.max_size

        limit = page_limit(page)
        offset = page_offset(page)
        order = self.resolve_order_strings(page)

        query = query.limit(limit + 1).offset(offset)
        if order:
            query = query.order_by(*[text(clause) for clause in order])

        logger.debug("pagination_query_prepared", limit=limit, offset=offset, order_by=order)
        return [], query

    def prepare_result(self, rows: Sequence[T], page: Page | None) -> list[T]:
        if page is None:
            page = Page()

        limit = page_limit(page)
        offset = page_offset(page)

        page.more = len(rows) > limit
        result = list(rows[:limit]) if page.more else list(rows)

        page.size = limit
        page.page = next_page_number(offset, limit)

        logger.debug("pagination_result_prepared", rows=len(result), page=page.page, more=page.more)
        return result
