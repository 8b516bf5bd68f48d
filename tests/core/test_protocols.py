"""Tests for the transport protocol."""

from collections.abc import Mapping

import httpx
import pytest

from polymarket_gamma.clients.gamma._executor import GammaRequestExecutor
from polymarket_gamma.core.protocols import Fetch


class LoggingFetch:
    """A wrapper that structurally satisfies Fetch and records each call."""

    def __init__(self) -> None:
        """Start with an empty call log."""
        self.calls: list[tuple[str, str]] = []

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],  # noqa: ARG002
        content: bytes | None = None,  # noqa: ARG002
    ) -> httpx.Response:
        """Record the call and answer with an empty list."""
        self.calls.append((method, url))
        return httpx.Response(200, json=[])


class TestFetch:
    """Tests for the Fetch protocol."""

    def test_structural_match(self) -> None:
        """Test that LoggingFetch satisfies Fetch."""
        assert isinstance(LoggingFetch(), Fetch)

    def test_httpx_client_request_matches(self) -> None:
        """Test the bound httpx request method satisfies Fetch."""
        assert isinstance(httpx.AsyncClient().request, Fetch)

    def test_non_callable_mismatch(self) -> None:
        """Test that a plain object does not satisfy Fetch."""
        assert not isinstance(object(), Fetch)

    @pytest.mark.asyncio
    async def test_wrapper_used_by_executor(self) -> None:
        """Test a caller-supplied wrapper sees every request."""
        fetch = LoggingFetch()
        executor = GammaRequestExecutor(base_url="https://gamma.test", fetch=fetch)
        await executor.get("/teams", {"limit": 1})
        assert fetch.calls == [("GET", "https://gamma.test/teams?limit=1")]
