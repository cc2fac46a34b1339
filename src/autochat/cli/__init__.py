"""Command line interface for autochat."""

from .app import app, main

__all__ = ["app", "main"]
