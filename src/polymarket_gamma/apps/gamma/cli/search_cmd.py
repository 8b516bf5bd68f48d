"""CLI command for free-text search across events, tags and profiles."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import (
    echo_json,
    print_events,
    print_labelled,
    run_query,
)

_DEFAULT_LIMIT = 10


def search(
    query: Annotated[str, typer.Argument(help="Free-text search query")],
    limit: Annotated[int, typer.Option(help="Maximum results per section")] = _DEFAULT_LIMIT,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """Search events, tags and profiles matching a query."""
    results = run_query(lambda client: client.search(query, limit=limit))
    if as_json:
        echo_json(results)
        return

    events = results.get("events") or []
    tags = results.get("tags") or []
    if not events and not tags:
        typer.echo(f"No results found for '{query}'")
        return
    if events:
        print_events(events)
    if tags:
        print_labelled(tags)
