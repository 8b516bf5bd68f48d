"""Command-line access to the Polymarket Gamma API."""
