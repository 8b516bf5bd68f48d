"""Shared helpers for Gamma CLI commands.

Centralise client construction, error reporting, logging setup and the
output formatters reused across the command modules.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx
import typer

from polymarket_gamma.clients.gamma.client import GammaClient
from polymarket_gamma.clients.gamma.exceptions import GammaError
from polymarket_gamma.core.config import ConfigError

T = TypeVar("T")

_MAX_TITLE_LEN = 58


def configure_verbose_logging() -> None:
    """Enable DEBUG-level logging so each request line is printed."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(message)s",
        datefmt="%H:%M:%S",
    )


def run_query(query: Callable[[GammaClient], Awaitable[T]]) -> T:
    """Run one client call to completion and return its result.

    Build a client from the settings, await ``query`` with it, and close
    the client afterwards.  Client, transport and configuration errors
    are reported on stderr and abort the command with exit code 1.

    Args:
        query: Coroutine function receiving the open client.

    Returns:
        Whatever ``query`` returned.

    """

    async def _run() -> T:
        async with GammaClient.from_config() as client:
            return await query(client)

    try:
        return asyncio.run(_run())
    except (GammaError, httpx.HTTPError, ConfigError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def echo_json(data: Any) -> None:
    """Print ``data`` as indented JSON."""
    typer.echo(json.dumps(data, indent=2, sort_keys=True))


def field(record: Any, *names: str, default: Any = "") -> Any:
    """Return the first present field of ``record`` among ``names``.

    The API spells some keys in camelCase and others in snake_case
    depending on the endpoint, so callers pass both spellings.
    """
    for name in names:
        value = record.get(name)
        if value is not None:
            return value
    return default


def truncate(text: str, width: int = _MAX_TITLE_LEN) -> str:
    """Clip ``text`` to ``width`` characters."""
    return text[:width] if len(text) > width else text


def format_outcomes(market: Any) -> str:
    """Render a market's outcomes with their prices, e.g. ``Yes 0.72 / No 0.28``."""
    outcomes = field(market, "outcomes", default=[])
    prices = field(market, "outcomePrices", "outcome_prices", default=[])
    if not isinstance(outcomes, list) or not isinstance(prices, list):
        return ""
    parts: list[str] = []
    for index, outcome in enumerate(outcomes):
        price = prices[index] if index < len(prices) else ""
        try:
            parts.append(f"{outcome} {float(price):.2f}")
        except (TypeError, ValueError):
            parts.append(str(outcome))
    return " / ".join(parts)


def print_markets(markets: list[Any]) -> None:
    """Print markets as a table of question, outcomes and volume."""
    typer.echo(f"\n{'Question':<60} {'Outcomes':<28} {'Volume':>12} {'End Date':>12}")
    typer.echo("-" * 116)
    for market in markets:
        question = truncate(str(field(market, "question")))
        volume = field(market, "volume", default="0")
        try:
            volume_text = f"{float(volume):>12.0f}"
        except (TypeError, ValueError):
            volume_text = f"{volume!s:>12}"
        end_date = str(field(market, "endDate", "end_date", default="N/A"))[:10]
        typer.echo(f"{question:<60} {format_outcomes(market):<28} {volume_text} {end_date:>12}")


def print_events(events: list[Any]) -> None:
    """Print events as a table of title, slug and market count."""
    typer.echo(f"\n{'Title':<60} {'Slug':<40} {'Markets':>8}")
    typer.echo("-" * 110)
    for event in events:
        title = truncate(str(field(event, "title")))
        slug = truncate(str(field(event, "slug")), 40)
        markets = field(event, "markets", default=[])
        typer.echo(f"{title:<60} {slug:<40} {len(markets):>8}")


def print_labelled(records: list[Any], label_fields: tuple[str, ...] = ("label", "name")) -> None:
    """Print id, label and slug columns for tags, teams, sports or series."""
    typer.echo(f"\n{'ID':<12} {'Label':<40} {'Slug':<40}")
    typer.echo("-" * 94)
    for record in records:
        record_id = str(field(record, "id"))
        label = truncate(str(field(record, *label_fields)), 40)
        slug = truncate(str(field(record, "slug")), 40)
        typer.echo(f"{record_id:<12} {label:<40} {slug:<40}")
