"""CLI commands for listing and inspecting events."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import (
    echo_json,
    field,
    print_events,
    print_labelled,
    print_markets,
    run_query,
)

_DEFAULT_LIMIT = 20


def events(
    limit: Annotated[int, typer.Option(help="Maximum number of events")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    active: Annotated[
        bool | None,
        typer.Option("--active/--inactive", help="Filter on open events"),
    ] = None,
    closed: Annotated[
        bool | None,
        typer.Option("--closed/--open", help="Filter on resolved events"),
    ] = None,
    tag: Annotated[list[str] | None, typer.Option(help="Tag slug; repeat for several")] = None,
    series_id: Annotated[str | None, typer.Option(help="Restrict to one series")] = None,
    paginated: Annotated[bool, typer.Option(help="Also report pagination metadata")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List events."""
    filters = {
        "limit": limit,
        "offset": offset,
        "active": active,
        "closed": closed,
        "tags": tag,
        "series_id": series_id,
    }
    if paginated:
        page = run_query(lambda client: client.get_events_paginated(**filters))
        if as_json:
            echo_json(page)
            return
        records = page.get("data") or []
        pagination = page.get("pagination") or {}
        print_events(records)
        typer.echo(
            f"\nTotal: {pagination.get('totalResults', 'N/A')}"
            f"  More: {'yes' if pagination.get('hasMore') else 'no'}"
        )
        return

    results = run_query(lambda client: client.get_events(**filters))
    if as_json:
        echo_json(results)
        return
    if not results:
        typer.echo("No events found")
        return
    print_events(results)


def event(
    id_or_slug: Annotated[str, typer.Argument(help="Event id or slug")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """Show a single event and its markets."""
    result = run_query(lambda client: client.get_event(id_or_slug))
    if as_json:
        echo_json(result)
        return
    typer.echo(f"Title:     {field(result, 'title')}")
    typer.echo(f"Slug:      {field(result, 'slug')}")
    typer.echo(f"End Date:  {field(result, 'endDate', 'end_date', default='N/A')}")
    nested = field(result, "markets", default=[])
    if nested:
        print_markets(nested)


def event_tags(
    event_id: Annotated[str, typer.Argument(help="Event id")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List the tags attached to an event."""
    results = run_query(lambda client: client.get_event_tags(event_id))
    if as_json:
        echo_json(results)
        return
    print_labelled(results)
