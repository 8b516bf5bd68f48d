"""Typed async client for the Polymarket Gamma API."""

__version__ = "0.1.0"
