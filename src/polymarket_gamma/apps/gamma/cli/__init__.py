"""CLI subpackage for the Polymarket Gamma app.

Create the Typer application and register all command modules.
"""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import configure_verbose_logging
from polymarket_gamma.apps.gamma.cli.catalog_cmd import series, sports, teams
from polymarket_gamma.apps.gamma.cli.comments_cmd import comments
from polymarket_gamma.apps.gamma.cli.events_cmd import event, event_tags, events
from polymarket_gamma.apps.gamma.cli.grok_cmd import explain, summary
from polymarket_gamma.apps.gamma.cli.markets_cmd import market, market_tags, markets
from polymarket_gamma.apps.gamma.cli.search_cmd import search
from polymarket_gamma.apps.gamma.cli.tags_cmd import related_tags, tag, tags

app = typer.Typer(help="Polymarket Gamma API market metadata")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each request")] = False,
) -> None:
    """Query markets, events and tags from the Polymarket Gamma API."""
    if verbose:
        configure_verbose_logging()


app.command()(search)
app.command()(markets)
app.command()(market)
app.command(name="market-tags")(market_tags)
app.command()(events)
app.command()(event)
app.command(name="event-tags")(event_tags)
app.command()(tags)
app.command()(tag)
app.command(name="related-tags")(related_tags)
app.command()(teams)
app.command()(sports)
app.command()(series)
app.command()(comments)
app.command()(summary)
app.command()(explain)

__all__ = ["app"]
