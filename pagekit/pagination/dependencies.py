# pagekit/pagination/dependencies.py
from fastapi import Query

from .schemas import Page


def page_params(
    page: int = Query(1, ge=1),
    size: int = Query(0, ge=0),
    sort: str = Query("", description='Comma separated columns, "-" prefix for descending'),
) -> Page:
    # Oversized pages are clamped by the paginator rather than rejected here.
    return Page(page=page, size=size, column=sort)
