"""CLI command for reading comments."""

from typing import Annotated

import typer

from polymarket_gamma.apps.gamma.cli._helpers import echo_json, field, run_query, truncate

_DEFAULT_LIMIT = 20
_MAX_CONTENT_LEN = 80


def comments(
    user: Annotated[str | None, typer.Option(help="Only comments by this wallet address")] = None,
    comment_id: Annotated[str | None, typer.Option("--id", help="Show a single comment")] = None,
    limit: Annotated[int, typer.Option(help="Maximum number of comments")] = _DEFAULT_LIMIT,
    offset: Annotated[int, typer.Option(help="Pagination offset")] = 0,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """List comments, optionally for one user."""
    if comment_id is not None:
        echo_json(run_query(lambda client: client.get_comment(comment_id)))
        return
    if user is not None:
        results = run_query(
            lambda client: client.get_comments_by_user(user, limit=limit, offset=offset)
        )
    else:
        results = run_query(lambda client: client.get_comments(limit=limit, offset=offset))

    if as_json:
        echo_json(results)
        return
    if not results:
        typer.echo("No comments found")
        return
    for comment in results:
        created = str(field(comment, "createdAt", "created_at"))[:19]
        body = truncate(str(field(comment, "body", "content")), _MAX_CONTENT_LEN)
        typer.echo(f"{created:<20} {body}")
