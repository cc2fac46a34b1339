"""Inline markup to HTML conversion.

Hides the details of how the restricted markdown subset used in replies
becomes safe HTML. Only a handful of inline constructs are recognized:

- **bold** and __bold__ -> <strong>
- `code` -> <code>
- *italic* and _italic_ -> <em>
- newline -> <br />

Rules are applied as sequential global substitutions rather than parsed,
so overlapping constructs resolve by rule order. Once a code span exists,
later rules leave its content alone, though they may still wrap the span
as a whole. Escaping runs first and
is not idempotent: transforming already-transformed output escapes it again.
"""

import re

# HTML-significant characters; "&" must be escaped before the others
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)

# Order matters: double markers before single ones, code before italics
MARKUP_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"__(.+?)__"), r"<strong>\1</strong>"),
    (re.compile(r"`([^`]+?)`"), r"<code>\1</code>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"\b_(.+?)_\b"), r"<em>\1</em>"),
    (re.compile(r"\n"), "<br />"),
)

# Only ever matches spans produced by the code rule, since input "<" is escaped
_CODE_SPAN = re.compile(r"(<code>.*?</code>)", re.DOTALL)


def escape_html(text: str) -> str:
    """Entity-escape &, < and > in text."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def transform(raw: str) -> str:
    """Convert inline markup in raw text to safe HTML.

    Args:
        raw: Untrusted text from the user or the model

    Returns:
        HTML in which every "<" and "&" was produced by this function
    """
    if not raw:
        return ""

    html = escape_html(raw)
    for pattern, replacement in MARKUP_RULES:
        html = _sub_outside_code(pattern, replacement, html)
    return html


def _sub_outside_code(pattern: re.Pattern[str], replacement: str, html: str) -> str:
    """Apply one rule everywhere except inside finished code spans.

    A match may enclose a whole code span (``*a `b` c*``), but a match
    that starts or ends inside one is left as it was.
    """
    spans = [m.span() for m in _CODE_SPAN.finditer(html)]
    if not spans:
        return pattern.sub(replacement, html)

    def replace(match: re.Match[str]) -> str:
        start, end = match.span()
        for span_start, span_end in spans:
            overlaps = start < span_end and span_start < end
            encloses = start <= span_start and span_end <= end
            if overlaps and not encloses:
                return match.group(0)
        return match.expand(replacement)

    return pattern.sub(replace, html)
