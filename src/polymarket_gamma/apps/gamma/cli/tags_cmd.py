"""CLI commands for browsing tags and tag relationships."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import echo_json, print_labelled, run_query

_DEFAULT_LIMIT = 50


def tags(
    limit: Annotated[int, typer.Option(help="Maximum number of tags")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List tags."""
    results = run_query(lambda client: client.get_tags(limit=limit, offset=offset))
    if as_json:
        echo_json(results)
        return
    print_labelled(results)


def tag(
    id_or_slug: Annotated[str, typer.Argument(help="Tag id or slug")],
) -> None:
    """Show a single tag as JSON."""
    echo_json(run_query(lambda client: client.get_tag(id_or_slug)))


def related_tags(
    id_or_slug: Annotated[str, typer.Argument(help="Tag id or slug")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List the tags related to a tag."""
    results = run_query(lambda client: client.get_related_tags_tags(id_or_slug))
    if as_json:
        echo_json(results)
        return
    print_labelled(results)
