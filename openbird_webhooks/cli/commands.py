"""CLI commands for the webhook receiver."""

import json
from typing import Any, Optional

import typer
from rich.console import Console

from openbird_webhooks import __version__
from openbird_webhooks.core.config import get_settings
from openbird_webhooks.server import create_server

app = typer.Typer(name="openbird-webhooks", help="Receive and handle OpenBird webhook events")
console = Console()


def print_event(event: Any) -> None:
    """Print a received event to the console."""
    event_type = event.get("type", "") if isinstance(event, dict) else ""
    console.print(f"[bold cyan]{event_type or '<untyped>'}[/bold cyan]")
    console.print_json(json.dumps(event, ensure_ascii=False, default=str))


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"[bold green]openbird-webhooks v{__version__}[/bold green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind (default WEBHOOK_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port to bind (default WEBHOOK_PORT)"),
    path: Optional[str] = typer.Option(None, help="URL path to accept webhooks on"),
    log_events: bool = typer.Option(True, help="Print every received event"),
) -> None:
    """Start the webhook receiver.

    Args:
        host: Host to bind
        port: Port to bind
        path: URL path to accept webhooks on
        log_events: Print every received event
    """
    settings = get_settings()
    server = create_server(
        port=port,
        host=host,
        path=path,
        on_event=print_event if log_events else None,
        settings=settings,
    )
    if server.port is None:
        console.print("[red]Port is required. Use --port or set WEBHOOK_PORT.[/red]")
        raise typer.Exit(code=1)

    console.print(f"[yellow]Starting receiver on {server.host}:{server.port}{server.path}[/yellow]")
    server.run()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
