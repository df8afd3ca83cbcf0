"""ISLBridge CLI - Command-line tools for English to ISL translation.

Usage:
    islbridge <command> [options]

Commands:
    translate   Translate English to ISL glosses with coverage and playback
    glosses     Print bare glosses for scripting
    check       Check whether a gloss has a sign
    suggest     Suggest alternative signs for a gloss
    signs       List signs in the catalog
"""

import typer

from islbridge.core.config import LogLevel
from islbridge.core.log import configure_logging

from . import __version__
from .commands.signs import check, list_signs, suggest
from .commands.translate import translate, glosses
from .utils.display import console

# Create the main app
app = typer.Typer(
    name="islbridge",
    help="ISLBridge CLI - English to Indian Sign Language gloss tools",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"ISLBridge CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log pipeline stages"
    ),
) -> None:
    """ISLBridge CLI - Command-line tools for English to ISL translation."""
    configure_logging(LogLevel.DEBUG if verbose else LogLevel.WARNING)


# Register commands
app.command("translate")(translate)
app.command("glosses")(glosses)
app.command("check")(check)
app.command("suggest")(suggest)
app.command("signs")(list_signs)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
