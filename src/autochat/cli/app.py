"""Main CLI application using Typer."""
import asyncio
import sys
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.live import Live
from rich.markdown import Markdown
from rich.spinner import Spinner
from rich.text import Text

from ..client import ChatClient
from ..config import Settings, get_settings
from ..conversation import Message, Role
from ..logging_config import configure_logging
from ..markup import render_message, transform
from ..session import ChatSession, SessionIdStore

# Create Typer app
app = typer.Typer(
    name="autochat",
    help="Terminal client for an autochat-compatible chat endpoint",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _reply_view(message: Message) -> Spinner | Text:
    """Live view of the reply being received."""
    if message.pending:
        return Spinner("dots", text=Text("thinking...", style="dim"))
    return Text(message.content, overflow="fold")


@app.command()
def chat(
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Server base URL (default: AUTOCHAT_BASE_URL)"
    ),
    api_path: str | None = typer.Option(
        None,
        "--api-path",
        "-p",
        help="Chat endpoint path (default: AUTOCHAT_API_PATH)"
    ),
    no_markdown: bool = typer.Option(
        False,
        "--no-markdown",
        help="Show replies as plain text"
    ),
    html: bool = typer.Option(
        False,
        "--html",
        help="Print each reply as the HTML the widget would render"
    ),
):
    """Interactive chat with the configured endpoint."""
    settings = get_settings()
    overrides = {k: v for k, v in {"base_url": base_url, "api_path": api_path}.items() if v}
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})
    render_markdown = settings.render_markdown and not no_markdown
    configure_logging(settings.log_level)

    async def _chat():
        session_id = SessionIdStore(settings.session_file).load_or_create()
        live: Live | None = None

        def on_update(messages: Sequence[Message]) -> None:
            if live is not None and messages and messages[-1].role is Role.ASSISTANT:
                live.update(_reply_view(messages[-1]))

        async with ChatClient.from_settings(settings) as client:
            session = ChatSession(client, session_id=session_id, on_update=on_update)

            console.print("[bold cyan]autochat[/bold cyan]")
            console.print(f"[dim]Endpoint: {settings.endpoint}[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")

                    if not user_input.strip():
                        continue

                    if user_input.strip().lower() in ('exit', 'quit', 'q'):
                        console.print("[dim]Goodbye![/dim]")
                        break

                    with Live(console=console, refresh_per_second=20, transient=True) as live:
                        await session.send_message(user_input)
                    live = None

                    reply = session.messages[-1]
                    if session.error:
                        console.print(f"[red]{session.error}[/red]")
                    if html:
                        console.print(render_message(reply, render_markdown), markup=False)
                    elif render_markdown:
                        console.print("[bold green]Assistant:[/bold green]")
                        console.print(Markdown(reply.content))
                    else:
                        console.print("[bold green]Assistant:[/bold green] ", end="")
                        console.print(reply.content, markup=False)
                    console.print()

                except KeyboardInterrupt:
                    console.print("\n[dim]Goodbye![/dim]")
                    break
                except EOFError:
                    console.print("\n[dim]Goodbye![/dim]")
                    break

    asyncio.run(_chat())


@app.command()
def render(
    text: str | None = typer.Argument(
        None,
        help="Text to convert (reads stdin when omitted)"
    )
):
    """Convert inline markup to safe HTML."""
    raw = text if text is not None else sys.stdin.read()
    console.print(transform(raw), markup=False, highlight=False, soft_wrap=True)


@app.command()
def session(
    reset: bool = typer.Option(
        False,
        "--reset",
        "-r",
        help="Replace the stored session id with a new one"
    )
):
    """Show the persisted session id."""
    store = SessionIdStore(get_settings().session_file)
    session_id = store.reset() if reset else store.load_or_create()
    console.print(session_id, markup=False, highlight=False)
    console.print(f"[dim]{store.path}[/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
