"""Polymarket Gamma API client for market and event metadata."""

from polymarket_gamma.clients.gamma._normalize import JSON_STRING_FIELDS, parse_json_fields
from polymarket_gamma.clients.gamma.client import GammaClient, resource_path
from polymarket_gamma.clients.gamma.exceptions import (
    GammaAPIError,
    GammaDecodeError,
    GammaError,
    GammaTimeoutError,
)
from polymarket_gamma.clients.gamma.models import (
    Comment,
    Event,
    GammaMarket,
    PaginatedEvents,
    SearchResults,
    Series,
    Sport,
    Tag,
    Team,
)

__all__ = [
    "JSON_STRING_FIELDS",
    "Comment",
    "Event",
    "GammaAPIError",
    "GammaClient",
    "GammaDecodeError",
    "GammaError",
    "GammaMarket",
    "GammaTimeoutError",
    "PaginatedEvents",
    "SearchResults",
    "Series",
    "Sport",
    "Tag",
    "Team",
    "parse_json_fields",
    "resource_path",
]
