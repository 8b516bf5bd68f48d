r"""Typed async client for the Polymarket Gamma API.

The Gamma API (``https://gamma-api.polymarket.com``) serves market and
event metadata, tags, series, sports and comments.  Each public method
maps to exactly one endpoint: the request executor issues the call and
the field normaliser converts JSON-encoded string fields such as
``outcomePrices`` (``"[\"0.72\",\"0.28\"]"``) into lists before the
result is returned.

Note:
    Methods that accept an ``id_or_slug`` treat any value containing a
    hyphen as a slug and route it to the ``/slug/`` endpoint.  Numeric
    ids never contain hyphens; identifiers that do (UUIDs, for example)
    are routed as slugs.

"""

from collections.abc import Mapping
from typing import Any, cast

import httpx

from polymarket_gamma.clients.gamma._constants import (
    DEFAULT_TIMEOUT_MS,
    GAMMA_URL,
    GROK_URL,
)
from polymarket_gamma.clients.gamma._executor import GammaRequestExecutor
from polymarket_gamma.clients.gamma._normalize import parse_json_fields
from polymarket_gamma.clients.gamma.exceptions import GammaDecodeError
from polymarket_gamma.clients.gamma.models import (
    Comment,
    Event,
    GammaMarket,
    OrderBy,
    PaginatedEvents,
    SearchResults,
    Series,
    Sport,
    Tag,
    Team,
)
from polymarket_gamma.core.config import get_config
from polymarket_gamma.core.protocols import Fetch


def resource_path(collection: str, id_or_slug: str, suffix: str = "") -> str:
    """Build the path for a record addressed by id or slug.

    Args:
        collection: Collection path segment (e.g. ``markets``).
        id_or_slug: Record id, or a slug when it contains a hyphen.
        suffix: Optional trailing path (e.g. ``/related-tags``).

    Returns:
        ``/<collection>/slug/<value><suffix>`` for slugs, otherwise
        ``/<collection>/<value><suffix>``.

    """
    if "-" in id_or_slug:
        return f"/{collection}/slug/{id_or_slug}{suffix}"
    return f"/{collection}/{id_or_slug}{suffix}"


class GammaClient:
    """Async client for Polymarket Gamma API market metadata.

    Provide typed accessors for markets, events, tags, teams, sports,
    series and comments, plus the two Grok text endpoints.

    Args:
        base_url: Base URL for the Gamma API.
        timeout_ms: Request timeout in milliseconds.
        headers: Headers added to every request.
        fetch: Transport callable used instead of the default HTTP client.
        http_client: ``httpx.AsyncClient`` used to send requests.

    """

    BASE_URL = GAMMA_URL
    GROK_URL = GROK_URL

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        headers: Mapping[str, str] | None = None,
        fetch: Fetch | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gamma API client.

        Args:
            base_url: Base URL for the Gamma API.
            timeout_ms: Request timeout in milliseconds.
            headers: Headers added to every request.
            fetch: Transport callable used instead of the default HTTP client.
            http_client: ``httpx.AsyncClient`` used to send requests.

        """
        self._executor = GammaRequestExecutor(
            base_url=base_url,
            timeout_ms=timeout_ms,
            headers=headers,
            fetch=fetch,
            http_client=http_client,
        )

    @classmethod
    def from_config(cls, fetch: Fetch | None = None) -> "GammaClient":
        """Create a client from the ``gamma`` section of the settings.

        Args:
            fetch: Optional transport callable.

        Returns:
            Configured GammaClient instance.

        """
        settings = get_config().get_gamma_config()
        return cls(
            base_url=settings.get("base_url", GAMMA_URL),
            timeout_ms=int(settings.get("timeout_ms", DEFAULT_TIMEOUT_MS)),
            headers=settings.get("headers") or None,
            fetch=fetch,
        )

    @property
    def base_url(self) -> str:
        """Return the base URL requests are sent to."""
        return self._executor.base_url

    @property
    def timeout_ms(self) -> int:
        """Return the per-request timeout in milliseconds."""
        return self._executor.timeout_ms

    @property
    def headers(self) -> dict[str, str]:
        """Return a copy of the headers sent with every request."""
        return dict(self._executor.headers)

    # Search

    async def search(
        self,
        query: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> SearchResults:
        """Search across events, tags and profiles.

        Args:
            query: Free-text search query.
            limit: Maximum number of results per section.
            offset: Pagination offset.
            **extra: Additional query parameters passed through verbatim.

        Returns:
            Search results grouped by record type.

        """
        params = {"query": query, "limit": limit, "offset": offset, **extra}
        return cast("SearchResults", await self._get("/public-search", params))

    # Markets

    async def get_market(self, id_or_slug: str) -> GammaMarket:
        """Fetch a single market by id or slug.

        Args:
            id_or_slug: Market id, or a slug when it contains a hyphen.

        Returns:
            Market record with outcome fields parsed into lists.

        Raises:
            GammaAPIError: When the API returns an error response.

        """
        return cast("GammaMarket", await self._get(resource_path("markets", id_or_slug)))

    async def get_markets(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        active: bool | None = None,
        closed: bool | None = None,
        archived: bool | None = None,
        featured: bool | None = None,
        restricted: bool | None = None,
        tags: list[str] | None = None,
        category: str | None = None,
        event_id: str | None = None,
        order_by: OrderBy | None = None,
        ascending: bool | None = None,
        **extra: Any,
    ) -> list[GammaMarket]:
        """Fetch a filtered, paginated list of markets.

        Unset filters are left out of the query entirely.

        Args:
            limit: Maximum number of markets to return.
            offset: Pagination offset.
            active: Filter on whether markets are open.
            closed: Filter on whether markets are resolved.
            archived: Filter on archived markets.
            featured: Filter on featured markets.
            restricted: Filter on restricted markets.
            tags: Tag slugs; each is sent as a repeated ``tags`` parameter.
            category: Category slug.
            event_id: Restrict to markets of one event.
            order_by: Sort field.
            ascending: Sort direction.
            **extra: Additional query parameters passed through verbatim.

        Returns:
            List of market records.

        """
        params = {
            "limit": limit,
            "offset": offset,
            "active": active,
            "closed": closed,
            "archived": archived,
            "featured": featured,
            "restricted": restricted,
            "tags": tags,
            "category": category,
            "event_id": event_id,
            "order_by": order_by,
            "ascending": ascending,
            **extra,
        }
        return cast("list[GammaMarket]", await self._get("/markets", params))

    async def get_market_tags(self, market_id: str) -> list[Tag]:
        """Fetch the tags attached to a market.

        Args:
            market_id: Market id.

        Returns:
            List of tag records.

        """
        return cast("list[Tag]", await self._get(f"/markets/{market_id}/tags"))

    # Events

    async def get_event(self, id_or_slug: str) -> Event:
        """Fetch a single event by id or slug.

        Args:
            id_or_slug: Event id, or a slug when it contains a hyphen.

        Returns:
            Event record including its nested markets.

        Raises:
            GammaAPIError: When the API returns an error response.

        """
        return cast("Event", await self._get(resource_path("events", id_or_slug)))

    async def get_events(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        active: bool | None = None,
        closed: bool | None = None,
        archived: bool | None = None,
        restricted: bool | None = None,
        tags: list[str] | None = None,
        category: str | None = None,
        series_id: str | None = None,
        order_by: OrderBy | None = None,
        ascending: bool | None = None,
        **extra: Any,
    ) -> list[Event]:
        """Fetch a filtered, paginated list of events.

        Args:
            limit: Maximum number of events to return.
            offset: Pagination offset.
            active: Filter on whether events are open.
            closed: Filter on whether events are resolved.
            archived: Filter on archived events.
            restricted: Filter on restricted events.
            tags: Tag slugs; each is sent as a repeated ``tags`` parameter.
            category: Category slug.
            series_id: Restrict to events of one series.
            order_by: Sort field.
            ascending: Sort direction.
            **extra: Additional query parameters passed through verbatim.

        Returns:
            List of event records.

        """
        params = self._event_params(
            limit=limit,
            offset=offset,
            active=active,
            closed=closed,
            archived=archived,
            restricted=restricted,
            tags=tags,
            category=category,
            series_id=series_id,
            order_by=order_by,
            ascending=ascending,
            extra=extra,
        )
        return cast("list[Event]", await self._get("/events", params))

    async def get_events_paginated(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        active: bool | None = None,
        closed: bool | None = None,
        archived: bool | None = None,
        restricted: bool | None = None,
        tags: list[str] | None = None,
        category: str | None = None,
        series_id: str | None = None,
        order_by: OrderBy | None = None,
        ascending: bool | None = None,
        **extra: Any,
    ) -> PaginatedEvents:
        """Fetch one page of events together with pagination metadata.

        Accept the same filters as ``get_events``.

        Returns:
            Envelope with ``data`` (the events) and ``pagination``
            (``hasMore`` and ``totalResults``).

        """
        params = self._event_params(
            limit=limit,
            offset=offset,
            active=active,
            closed=closed,
            archived=archived,
            restricted=restricted,
            tags=tags,
            category=category,
            series_id=series_id,
            order_by=order_by,
            ascending=ascending,
            extra=extra,
        )
        return cast("PaginatedEvents", await self._get("/events/pagination", params))

    async def get_event_tags(self, event_id: str) -> list[Tag]:
        """Fetch the tags attached to an event.

        Args:
            event_id: Event id.

        Returns:
            List of tag records.

        """
        return cast("list[Tag]", await self._get(f"/events/{event_id}/tags"))

    # Tags

    async def get_tags(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Tag]:
        """Fetch all tags."""
        return cast("list[Tag]", await self._get("/tags", _page(limit, offset, extra)))

    async def get_tag(self, id_or_slug: str) -> Tag:
        """Fetch a tag by id or slug.

        The ``/tags/{value}`` endpoint accepts either form, so no slug
        routing is applied here.
        """
        return cast("Tag", await self._get(f"/tags/{id_or_slug}"))

    async def get_related_tags(self, id_or_slug: str) -> list[Tag]:
        """Fetch the relationships of a tag to other tags.

        Args:
            id_or_slug: Tag id, or a slug when it contains a hyphen.

        Returns:
            List of related tag records.

        """
        path = resource_path("tags", id_or_slug, "/related-tags")
        return cast("list[Tag]", await self._get(path))

    async def get_related_tags_tags(self, id_or_slug: str) -> list[Tag]:
        """Fetch the tag records related to a tag.

        Args:
            id_or_slug: Tag id, or a slug when it contains a hyphen.

        Returns:
            List of tag records.

        """
        path = resource_path("tags", id_or_slug, "/related-tags/tags")
        return cast("list[Tag]", await self._get(path))

    # Teams and sports

    async def get_teams(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Team]:
        """Fetch sports teams."""
        return cast("list[Team]", await self._get("/teams", _page(limit, offset, extra)))

    async def get_sports(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Sport]:
        """Fetch sports."""
        return cast("list[Sport]", await self._get("/sports", _page(limit, offset, extra)))

    # Series

    async def get_series(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Series]:
        """Fetch series of related events."""
        return cast("list[Series]", await self._get("/series", _page(limit, offset, extra)))

    async def get_series_by_id(self, series_id: str) -> Series:
        """Fetch a single series by id."""
        return cast("Series", await self._get(f"/series/{series_id}"))

    # Comments

    async def get_comments(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Comment]:
        """Fetch comments, filtered by any extra query parameters.

        Args:
            limit: Maximum number of comments to return.
            offset: Pagination offset.
            **extra: Filters such as ``parent_entity_type`` and
                ``parent_entity_id``, passed through verbatim.

        Returns:
            List of comment records.

        """
        return cast("list[Comment]", await self._get("/comments", _page(limit, offset, extra)))

    async def get_comment(self, comment_id: str) -> Comment:
        """Fetch a single comment by id."""
        return cast("Comment", await self._get(f"/comments/{comment_id}"))

    async def get_comments_by_user(
        self,
        user_address: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        **extra: Any,
    ) -> list[Comment]:
        """Fetch comments written by one user.

        Args:
            user_address: The user's wallet address.
            limit: Maximum number of comments to return.
            offset: Pagination offset.
            **extra: Additional query parameters passed through verbatim.

        Returns:
            List of comment records.

        """
        path = f"/comments/user_address/{user_address}"
        return cast("list[Comment]", await self._get(path, _page(limit, offset, extra)))

    # Grok

    async def grok_event_summary(self, event_slug: str) -> str:
        """Fetch the Grok-generated summary of an event.

        Args:
            event_slug: Event slug.

        Returns:
            Summary text.

        Raises:
            GammaDecodeError: If the body carries no string ``summary``.

        """
        url = f"{self.GROK_URL}/event-summary"
        response = await self._executor.post(url, {"event_slug": event_slug})
        return _text_field(response, "summary", url)

    async def grok_election_market_explanation(self, market_slug: str) -> str:
        """Fetch the Grok-generated explanation of an election market.

        Args:
            market_slug: Market slug.

        Returns:
            Explanation text.

        Raises:
            GammaDecodeError: If the body carries no string ``explanation``.

        """
        url = f"{self.GROK_URL}/election-market-explanation"
        response = await self._executor.post(url, {"market_slug": market_slug})
        return _text_field(response, "explanation", url)

    async def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """Send a GET request and normalise the decoded body."""
        return parse_json_fields(await self._executor.get(path, params))

    @staticmethod
    def _event_params(
        *,
        limit: int | None,
        offset: int | None,
        active: bool | None,
        closed: bool | None,
        archived: bool | None,
        restricted: bool | None,
        tags: list[str] | None,
        category: str | None,
        series_id: str | None,
        order_by: OrderBy | None,
        ascending: bool | None,
        extra: dict[str, Any],
    ) -> dict[str, Any]:
        return {
            "limit": limit,
            "offset": offset,
            "active": active,
            "closed": closed,
            "archived": archived,
            "restricted": restricted,
            "tags": tags,
            "category": category,
            "series_id": series_id,
            "order_by": order_by,
            "ascending": ascending,
            **extra,
        }

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._executor.close()

    async def __aenter__(self) -> "GammaClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()


def _page(limit: int | None, offset: int | None, extra: dict[str, Any]) -> dict[str, Any]:
    return {"limit": limit, "offset": offset, **extra}


def _text_field(response: Any, key: str, url: str) -> str:
    """Return ``response[key]`` when the body is an object holding a string there."""
    value = response.get(key) if isinstance(response, dict) else None
    if not isinstance(value, str):
        msg = f"expected an object with a string {key!r}"
        raise GammaDecodeError(url, detail=msg)
    return value
