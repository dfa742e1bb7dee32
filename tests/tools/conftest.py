"""
Shared pytest fixtures for formula testing.

Provides a mock fetch capability and a ToolExecutionContext wired to it.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from avwx_pack.tools.context import ToolExecutionContext
from avwx_pack.tools.http.fetcher import FetchResponse
from avwx_pack.tools.registry import tool_registry


@pytest.fixture
def make_fetcher():
    """
    Factory for a mock fetcher returning one canned response.

    Usage:
        fetcher = make_fetcher(200, {"icao": "KJFK"})
        ...
        fetcher.fetch.assert_awaited_once_with(method="GET", url=...)
    """
    def _make(status=200, body=None, headers=None):
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(
            return_value=FetchResponse(status=status, body=body, headers=headers or {})
        )
        return fetcher

    return _make


@pytest.fixture
def make_context():
    """Factory for a ToolExecutionContext around a given fetcher."""
    def _make(fetcher):
        return ToolExecutionContext(fetcher=fetcher, invocation_id="test_invocation_123")

    return _make


@pytest.fixture
def requested_url():
    """Return the URL of the single GET a formula issued."""
    def _url(fetcher) -> str:
        fetcher.fetch.assert_awaited_once()
        kwargs = fetcher.fetch.await_args.kwargs
        assert kwargs["method"] == "GET"
        return kwargs["url"]

    return _url


@pytest.fixture
def registry():
    """The global registry with the six formulas, emptied again afterwards."""
    tool_registry.clear()
    tool_registry.initialize_default_tools()
    yield tool_registry
    tool_registry.clear()
