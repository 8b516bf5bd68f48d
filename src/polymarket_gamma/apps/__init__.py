"""Command-line applications built on the API clients."""
