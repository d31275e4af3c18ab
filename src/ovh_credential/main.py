import json
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme

from .constants import DEFAULT_CONFIG_PATH, DEFAULT_HOST
from .endpoints import is_known, known_endpoints, resolve
from .exceptions import CredentialError
from .models.credential import Credential

# Custom Rich Theme
ovh_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "host": "bold blue",
    }
)

console = Console(theme=ovh_theme)
app = typer.Typer(
    help="Inspect OVH API credentials stored in a TOML config file",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def version_callback(value: bool):
    if value:
        try:
            pkg_version = version("ovh-credential")
            console.print(f"ovh-credential: [host]{pkg_version}[/host]")
        except PackageNotFoundError:
            console.print("ovh-credential: [warning]unknown[/warning]")
        raise typer.Exit()


def print_json(data: Any):
    """Print JSON with syntax highlighting."""
    json_str = json.dumps(data, indent=2, ensure_ascii=False)
    syntax = Syntax(json_str, "json", theme="monokai", background_color="default")
    console.print(syntax)


def enable_debug_logging():
    logger = logging.getLogger("ovh_credential")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Inspect OVH API credentials stored in a TOML config file
    """
    if verbose:
        enable_debug_logging()


# --- CLI Commands ---


@app.command()
def show(
    config: Path | None = typer.Option(None, "--config", "-c", help=f"Config file (default: {DEFAULT_CONFIG_PATH})"),
    reveal: bool = typer.Option(False, "--reveal", help="Show secrets unmasked"),
):
    """Load credentials from a config file and print them."""
    try:
        credential = Credential.from_file(config) if config else Credential.from_default_file()
    except CredentialError as e:
        console.print(f"[error]Error:[/error] {escape(str(e))}")
        raise typer.Exit(1)

    if reveal:
        print_json(credential.model_dump(mode="json", exclude={"raw_config"}))
    else:
        print_json(credential.masked())
    console.print(f"[success]✓ Loaded from {escape(str(credential.source_path))}[/success]")


@app.command()
def endpoints():
    """List known endpoints and their API hosts."""
    table = Table(title="Endpoints")
    table.add_column("Endpoint", style="info")
    table.add_column("Host", style="host")
    for endpoint, host in known_endpoints():
        table.add_row(endpoint, host)
    table.add_row("[dim](other)[/dim]", DEFAULT_HOST)
    console.print(table)


@app.command()
def host(endpoint: str = typer.Argument(..., help="Endpoint id, e.g. ovh-eu")):
    """Print the API host for an endpoint."""
    if not is_known(endpoint):
        console.print(f"[warning]Unknown endpoint '{escape(endpoint)}', using default host[/warning]")
    console.print(resolve(endpoint), style="host")


if __name__ == "__main__":
    app()
