from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from boxplot_stats.api.main import app


@pytest_asyncio.fixture()
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        yield async_client


@pytest.fixture()
def single_sample() -> list[float]:
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 100]


@pytest.fixture()
def grouped_values() -> list[float]:
    return [1, 1, 1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 22, 23, 8, 8, 8, 12, 13, 14, 15, 30, 31]


@pytest.fixture()
def grouped_ids() -> list[str]:
    return ["b1"] * 15 + ["b2"] * 9
