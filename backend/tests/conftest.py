"""pytest configuration and fixtures.

This module provides shared fixtures: an async HTTP client over the ASGI
app, and factories building nodes and edges in the workflow editor's
shape (plain mappings, as the canvas sends them).
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.types import ASGIApp

from flowcheck.main import app

NodeFactory = Callable[..., dict[str, Any]]
EdgeFactory = Callable[..., dict[str, Any]]

# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )


# =============================================================================
# HTTP CLIENT
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing API endpoints.

    Uses ASGI transport to test the FastAPI app without running a server.

    Example:
        async def test_health(async_client):
            response = await async_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=cast("ASGIApp", app))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# =============================================================================
# GRAPH FACTORIES
# =============================================================================


@pytest.fixture
def node_factory() -> NodeFactory:
    """Factory for creating editor-shaped node mappings.

    Example:
        def test_trigger(node_factory):
            node = node_factory("t1", "trigger")
            assert node["data"]["label"] == "t1 trigger"
    """

    def _create(
        node_id: str,
        category: str = "action",
        label: str | None = "",
        **data: Any,
    ) -> dict[str, Any]:
        payload = dict(data)
        if label == "":
            label = f"{node_id} {category}"
        if label is not None:
            payload["label"] = label
        return {"id": node_id, "type": category, "data": payload}

    return _create


@pytest.fixture
def edge_factory() -> EdgeFactory:
    """Factory for creating editor-shaped edge mappings.

    The edge id defaults to ``e-<source>-<target>``.
    """

    def _create(
        source: str,
        target: str,
        edge_id: str | None = None,
        **extra: Any,
    ) -> dict[str, Any]:
        return {
            "id": edge_id or f"e-{source}-{target}",
            "source": source,
            "target": target,
            **extra,
        }

    return _create
