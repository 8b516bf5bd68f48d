"""Structural protocol for the pluggable HTTP transport.

Define the ``Fetch`` interface that decouples the Gamma request executor
from the network call itself.  Any async callable with this shape can be
injected, which lets callers wrap requests with logging, retries, caching
or rate limiting without touching the executor.  The bound
``httpx.AsyncClient.request`` method satisfies it as is.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Fetch(Protocol):
    """Async callable that performs one HTTP request.

    Implementors send ``method`` to ``url`` with the given headers and
    optional raw body, and return the ``httpx.Response`` without raising
    for error status codes.
    """

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> httpx.Response:
        """Send the request and return the response."""
        ...
