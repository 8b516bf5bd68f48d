"""Async request executor for the Polymarket Gamma API.

Shape every request the same way: build the URL and query string, attach
the JSON content header plus any default headers, bound the call with a
timeout, and classify the outcome.  The network call itself goes through
an injectable ``Fetch`` callable so callers can layer retries, caching or
rate limiting on top without changing this module.
"""

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, cast

import httpx

from polymarket_gamma.clients.gamma._constants import (
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT_MS,
    GAMMA_URL,
    HTTP_MULTIPLE_CHOICES,
    HTTP_OK,
)
from polymarket_gamma.clients.gamma.exceptions import (
    GammaAPIError,
    GammaDecodeError,
    GammaTimeoutError,
)
from polymarket_gamma.core.protocols import Fetch

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES = ("http://", "https://")


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ordered query pairs.

    ``None`` and empty-string values are dropped.  Lists and tuples expand
    into one pair per element under the same key, keeping their order.
    Booleans are rendered in their JSON spelling (``true``/``false``).

    Args:
        params: Parameter names mapped to scalar or sequence values.

    Returns:
        List of ``(key, value)`` string pairs ready for URL encoding.

    """
    if not params:
        return []
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if _is_absent(value):
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend(
                (key, _to_query_value(item))
                for item in cast("Sequence[Any]", value)
                if not _is_absent(item)
            )
        else:
            pairs.append((key, _to_query_value(value)))
    return pairs


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class GammaRequestExecutor:
    """Issue timeout-bounded JSON requests against the Gamma API.

    Args:
        base_url: Base URL that relative paths are joined to.
        timeout_ms: Per-request timeout in milliseconds.
        headers: Default headers merged over the JSON content header.
        fetch: Transport callable; defaults to ``http_client.request``.
        http_client: ``httpx.AsyncClient`` to send requests with.  When
            neither ``fetch`` nor ``http_client`` is given the executor
            creates and owns one.

    """

    def __init__(
        self,
        base_url: str = GAMMA_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        headers: Mapping[str, str] | None = None,
        fetch: Fetch | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the request executor.

        Args:
            base_url: Base URL that relative paths are joined to.
            timeout_ms: Per-request timeout in milliseconds.
            headers: Default headers merged over the JSON content header.
            fetch: Transport callable; defaults to ``http_client.request``.
            http_client: ``httpx.AsyncClient`` to send requests with.

        """
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.headers: dict[str, str] = {**DEFAULT_HEADERS, **(headers or {})}
        self._owns_http_client = fetch is None and http_client is None
        if self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=timeout_ms / 1000)
        self._http_client = http_client
        self._fetch: Fetch = fetch if fetch is not None else cast("Fetch", self._send)

    def url_for(self, path: str) -> str:
        """Resolve ``path`` against the base URL.

        Absolute ``http(s)://`` addresses are returned unchanged.

        Args:
            path: Request path relative to base_url, or an absolute URL.

        Returns:
            Absolute request URL without a query string.

        """
        if path.startswith(_ABSOLUTE_PREFIXES):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            path: Request path relative to base_url, or an absolute URL.
            params: Query parameters; see ``build_query``. They are appended
                after any query already present in ``path``.

        Returns:
            Parsed JSON response.

        Raises:
            GammaAPIError: When the API returns a non-2xx status.
            GammaTimeoutError: When the call exceeds the timeout.
            GammaDecodeError: When the body is not valid JSON.

        """
        base = httpx.URL(self.url_for(path))
        pairs = [*base.params.multi_items(), *build_query(params)]
        url = str(httpx.URL(base, params=pairs))
        return await self._request("GET", url)

    async def post(self, path: str, body: Mapping[str, Any]) -> Any:
        """Send a POST request with a JSON body and return the decoded response.

        Args:
            path: Request path relative to base_url, or an absolute URL.
            body: JSON-serialisable request body.

        Returns:
            Parsed JSON response.

        Raises:
            GammaAPIError: When the API returns a non-2xx status.
            GammaTimeoutError: When the call exceeds the timeout.
            GammaDecodeError: When the body is not valid JSON.

        """
        content = json.dumps(body).encode()
        return await self._request("POST", self.url_for(path), content=content)

    async def _request(self, method: str, url: str, content: bytes | None = None) -> Any:
        logger.debug("%s %s", method, url)
        try:
            response = await asyncio.wait_for(
                self._fetch(method, url, headers=dict(self.headers), content=content),
                timeout=self.timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.debug("%s %s timed out after %dms", method, url, self.timeout_ms)
            raise GammaTimeoutError(url, self.timeout_ms) from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not HTTP_OK <= response.status_code < HTTP_MULTIPLE_CHOICES:
            raise GammaAPIError(response.status_code, response.reason_phrase)

        try:
            result: Any = response.json()
        except ValueError as exc:
            raise GammaDecodeError(url, response.status_code) from exc
        return result

    async def _send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> httpx.Response:
        """Default transport: send through the wrapped ``httpx.AsyncClient``."""
        client = cast("httpx.AsyncClient", self._http_client)
        return await client.request(method, url, headers=headers, content=content)

    async def close(self) -> None:
        """Close the underlying HTTP client if this executor created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
