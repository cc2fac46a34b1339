"""Inline markup module for autochat."""

from .render import render_message
from .transformer import MARKUP_RULES, escape_html, transform

__all__ = [
    "MARKUP_RULES",
    "escape_html",
    "render_message",
    "transform",
]
