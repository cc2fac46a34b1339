"""Per-message HTML as the widget displays it."""

from ..conversation.models import Message, Role
from .transformer import escape_html, transform


def render_message(message: Message, render_markdown: bool = True) -> str:
    """Render one message to HTML.

    The placeholder renders empty (the presentation layer draws a thinking
    indicator instead). Markup is only interpreted in assistant replies;
    everything else is shown as escaped plain text.
    """
    if message.pending:
        return ""
    if render_markdown and message.role is Role.ASSISTANT:
        return transform(message.content)
    return escape_html(message.content)
