"""CLI commands for the sports and series catalogues."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import echo_json, print_labelled, run_query

_DEFAULT_LIMIT = 50


def teams(
    limit: Annotated[int, typer.Option(help="Maximum number of teams")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List sports teams."""
    results = run_query(lambda client: client.get_teams(limit=limit, offset=offset))
    if as_json:
        echo_json(results)
        return
    print_labelled(results, ("name", "abbreviation"))


def sports(
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List sports."""
    results = run_query(lambda client: client.get_sports())
    if as_json:
        echo_json(results)
        return
    print_labelled(results, ("name",))


def series(
    series_id: Annotated[str | None, typer.Argument(help="Series id; omit to list all")] = None,
    limit: Annotated[int, typer.Option(help="Maximum number of series")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List series, or show one series as JSON."""
    if series_id is not None:
        echo_json(run_query(lambda client: client.get_series_by_id(series_id)))
        return
    results = run_query(lambda client: client.get_series(limit=limit, offset=offset))
    if as_json:
        echo_json(results)
        return
    print_labelled(results, ("title",))
