"""Command line tools: feedbind resolve and feedbind convert."""

import sys
from importlib import metadata

import typer

from feedbind.cli.resolve import convert_command, resolve_command

app = typer.Typer(
    name="feedbind",
    help="feedbind: resolve change feed trigger bindings.",
    no_args_is_help=True,
)


def _print_version_and_exit() -> None:
    """Print installed package version and exit."""
    try:
        version = metadata.version("feedbind")
    except metadata.PackageNotFoundError:
        version = "unknown"
    print(f"feedbind {version}")
    raise SystemExit(0)


@app.command("resolve")
def resolve(
    config: str = typer.Option("", "--config", help="Optional config file path"),
    trigger: str = typer.Option("", "--trigger", help="Resolve only the named trigger"),
) -> None:
    """Resolve declared triggers and print monitored/lease locations."""
    resolve_command(config=config or None, trigger=trigger or None)


@app.command("convert")
def convert(
    payload: str = typer.Argument(..., help="JSON array of documents"),
    value_type: str = typer.Option("document_list", "--value-type", help="document_list or generic_array"),
) -> None:
    """Normalize a change feed payload into the declared value shape."""
    convert_command(payload=payload, value_type=value_type)


def main() -> None:
    """CLI entry point."""
    if "--version" in sys.argv or "-V" in sys.argv:
        _print_version_and_exit()
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)
