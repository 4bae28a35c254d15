# tests/conftest.py
import os
import sys
from typing import AsyncGenerator

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import literal_column, select, table

from pagekit.logger import configure_logging
from pagekit.pagination.dependencies import page_params
from pagekit.pagination.schemas import Page, PagedResponse
from pagekit.pagination.service import new_paginator

configure_logging(debug=False)

ROWS = [f"row-{i}" for i in range(1, 8)]


@pytest.fixture
def render_sql():
    """Compiles a select with inlined parameters and collapsed whitespace."""

    def _render(query) -> str:
        compiled = query.compile(compile_kwargs={"literal_binds": True})
        return " ".join(str(compiled).split())

    return _render


@pytest.fixture
def base_query():
    return select(literal_column("*")).select_from(table("t"))


@pytest.fixture
def paginator():
    """Paginator configured like a small listing endpoint."""
    return new_paginator(default_size=2, max_size=5, sort=["ID"], column_func=str.lower)


@pytest.fixture
def app(paginator) -> FastAPI:
    """FastAPI app listing ROWS through the page dependency."""
    app = FastAPI()

    @app.get("/rows", response_model=PagedResponse[str])
    async def list_rows(page: Page = Depends(page_params)):
        _, query = paginator.prepare_query(select(literal_column("*")).select_from(table("t")), page)
        # Stand-in for executing the query.
        offset, limit = page.offset(), page.limit()
        fetched = ROWS[offset:offset + limit + 1]
        items = paginator.prepare_result(fetched, page)
        return PagedResponse.create(items, page)

    return app


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
