"""Command-line interface for the LINE relay."""

import typer

from .server import classify_text, serve

main_app = typer.Typer(
    name="line-relay",
    help="LINE command relay",
    no_args_is_help=True,
)
main_app.command("serve")(serve)
main_app.command("classify")(classify_text)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
