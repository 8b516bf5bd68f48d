"""CLI commands for listing and inspecting prediction markets."""

from typing import Annotated, cast

import typer

from polymarket_gamma.apps.gamma.cli._helpers import (
    echo_json,
    field,
    format_outcomes,
    print_labelled,
    print_markets,
    run_query,
)
from polymarket_gamma.clients.gamma.models import OrderBy

_DEFAULT_LIMIT = 20
_ORDER_FIELDS = ("liquidity", "volume", "created_at", "end_date")


def _validate_order_by(value: str | None) -> str | None:
    """Reject sort fields the API does not support."""
    if value is not None and value not in _ORDER_FIELDS:
        raise typer.BadParameter(f"Must be one of: {', '.join(_ORDER_FIELDS)}")
    return value


def markets(
    limit: Annotated[int, typer.Option(help="Maximum number of markets")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    active: Annotated[
        bool | None,
        typer.Option("--active/--inactive", help="Filter on open markets"),
    ] = None,
    closed: Annotated[
        bool | None,
        typer.Option("--closed/--open", help="Filter on resolved markets"),
    ] = None,
    tag: Annotated[list[str] | None, typer.Option(help="Tag slug; repeat for several")] = None,
    order_by: Annotated[
        str | None,
        typer.Option(help="Sort field", callback=_validate_order_by),
    ] = None,
    ascending: Annotated[
        bool | None,
        typer.Option("--ascending/--descending", help="Sort direction"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List prediction markets with outcome prices and volume."""
    results = run_query(
        lambda client: client.get_markets(
            limit=limit,
            offset=offset,
            active=active,
            closed=closed,
            tags=tag,
            order_by=cast("OrderBy | None", order_by),
            ascending=ascending,
        )
    )
    if as_json:
        echo_json(results)
        return
    if not results:
        typer.echo("No markets found")
        return
    print_markets(results)


def market(
    id_or_slug: Annotated[str, typer.Argument(help="Market id or slug")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """Show a single market."""
    result = run_query(lambda client: client.get_market(id_or_slug))
    if as_json:
        echo_json(result)
        return
    typer.echo(f"Question:  {field(result, 'question')}")
    typer.echo(f"Slug:      {field(result, 'slug')}")
    typer.echo(f"Outcomes:  {format_outcomes(result)}")
    typer.echo(f"Volume:    {field(result, 'volume')}")
    typer.echo(f"End Date:  {field(result, 'endDate', 'end_date', default='N/A')}")
    token_ids = field(result, "clobTokenIds", "clob_token_ids", default=[])
    if isinstance(token_ids, list):
        for token_id in token_ids:
            typer.echo(f"Token:     {token_id}")
    else:
        typer.echo(f"Tokens:    {token_ids}")


def market_tags(
    market_id: Annotated[str, typer.Argument(help="Market id")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List the tags attached to a market."""
    results = run_query(lambda client: client.get_market_tags(market_id))
    if as_json:
        echo_json(results)
        return
    print_labelled(results)
