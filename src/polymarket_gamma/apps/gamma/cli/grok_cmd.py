"""CLI commands for the Grok-generated event summaries and market explanations."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import run_query


def summary(
    event_slug: Annotated[str, typer.Argument(help="Event slug")],
) -> None:
    """Print the AI summary of an event."""
    typer.echo(run_query(lambda client: client.grok_event_summary(event_slug)))


def explain(
    market_slug: Annotated[str, typer.Argument(help="Election market slug")],
) -> None:
    """Print the AI explanation of an election market."""
    typer.echo(run_query(lambda client: client.grok_election_market_explanation(market_slug)))
