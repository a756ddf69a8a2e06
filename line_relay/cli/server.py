"""CLI commands for running the relay and checking keyword routing."""

from __future__ import annotations

import typer
import uvicorn
from rich.console import Console

from line_relay.core.config import config
from line_relay.core.intents import classify, is_control

console = Console()


def serve(
    host: str = typer.Option(config.HOST, "--host", help="Interface to bind"),
    port: int = typer.Option(config.PORT, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the relay API under uvicorn."""
    console.print(f"[green]Server running on port {port}[/green]")
    uvicorn.run(
        "line_relay.api_factory:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def classify_text(text: str = typer.Argument(..., help="Message text to classify")) -> None:
    """Print the intent a message would be classified as."""
    intent = classify(text)
    kind = "control" if is_control(intent) else "conversational"
    console.print(f"[bold]{intent.value}[/bold] ({kind})")


__all__ = ["serve", "classify_text"]
