"""CLI entry point for the Polymarket Gamma app.

Expose the Typer app and the console-script entry point.  All command
logic lives in the cli subpackage.
"""

from polymarket_gamma.apps.gamma.cli import app

__all__ = ["app", "main"]


def main() -> None:
    """Run the Polymarket Gamma CLI application."""
    app()


if __name__ == "__main__":
    main()
