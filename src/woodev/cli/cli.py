"""Woodev CLI - run named developer workflow operations."""

import logging
from pathlib import Path
from typing import Dict, Optional, Set

import typer
from dotenv import load_dotenv

from woodev import __version__
from woodev.core.errors import ConfigError, SelectionError
from woodev.core.operations import OperationRegistry, execute_operations, get_default_registry
from woodev.core.prompts import PrepareContext
from woodev.core.utils import setup_logger

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Woodev CLI - clone, build, link, and test plugin checkouts",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"Woodev CLI version {__version__}")
        raise typer.Exit()


FLAG_LETTERS: Dict[str, str] = {
    "checkout": "c",
    "install": "i",
    "build": "b",
    "watch": "w",
    "link": "l",
    "mount": "m",
    "start": "s",
    "provision": "p",
    "test": "t",
    "failing": "f",
    "open_site": "o",
}


def collect_flags(**enabled: bool) -> Set[str]:
    """Translate enabled boolean options into their short flag letters."""
    return {FLAG_LETTERS[name] for name, on in enabled.items() if on}


def list_registry(registry: OperationRegistry) -> None:
    typer.echo("Available operations:\n")
    for op in registry:
        flags = " ".join(f"-{flag}" for flag in sorted(op.trigger_flags))
        line = f"  {op.name}"
        if flags:
            line += f" [{flags}]"
        typer.echo(line)
        if op.description:
            typer.echo(f"    {op.description}")


@app.command()
def main(
    operation: Optional[str] = typer.Argument(None, help="Operation to run by name"),
    checkout: bool = typer.Option(False, "-c", "--checkout", help="Check out a branch"),
    install: bool = typer.Option(False, "-i", "--install", help="Install dependencies"),
    build: bool = typer.Option(False, "-b", "--build", help="Build the target package"),
    watch: bool = typer.Option(False, "-w", "--watch", help="Rebuild on change"),
    link: bool = typer.Option(False, "-l", "--link", help="Link the plugin into a Local site"),
    mount: bool = typer.Option(False, "-m", "--mount", help="Mount the plugin into ddev"),
    start: bool = typer.Option(False, "-s", "--start", help="Restart the ddev project"),
    provision: bool = typer.Option(
        False, "-p", "--provision", help="Link, mount, and restart in one go"
    ),
    test: bool = typer.Option(False, "-t", "--test", help="Run PHP unit tests"),
    failing: bool = typer.Option(False, "-f", "--failing", help="Re-run failing PHP tests"),
    open_site: bool = typer.Option(False, "-o", "--open", help="Open the site when done"),
    branch: Optional[str] = typer.Option(None, "--branch", help="Branch to clone or check out"),
    site: Optional[str] = typer.Option(None, "--site", help="Local site name"),
    target: Optional[str] = typer.Option(None, "--target", help="Package to install or build"),
    path: Optional[Path] = typer.Option(None, "--path", help="ddev project directory"),
    test_filter: Optional[str] = typer.Option(None, "--filter", help="PHPUnit filter"),
    list_operations: bool = typer.Option(False, "--list", help="List operations and exit"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress console logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Woodev CLI - run an operation by name and/or every operation selected by flags.

    Example:
        woo clone -ib --branch fix/cart
        woo -p --site shop --path ~/sites/shop
    """
    registry = get_default_registry()

    if list_operations:
        list_registry(registry)
        return

    setup_logger(quiet=quiet)

    flags = collect_flags(
        checkout=checkout,
        install=install,
        build=build,
        watch=watch,
        link=link,
        mount=mount,
        start=start,
        provision=provision,
        test=test,
        failing=failing,
        open_site=open_site,
    )
    context = PrepareContext(
        options={
            "branch": branch,
            "site": site,
            "target": target,
            "path": path,
            "test_filter": test_filter,
        }
    )

    try:
        success = execute_operations(registry, operation, flags, context)
    except (SelectionError, ConfigError) as e:
        logger.warning(str(e))
        raise typer.Exit(1)

    if not success:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
