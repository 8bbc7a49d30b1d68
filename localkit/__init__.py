"""Utility toolkit: ANSI styling, diagnostics, strings, containers, .env loading and HTTP parsing."""

__version__ = "0.1.0"