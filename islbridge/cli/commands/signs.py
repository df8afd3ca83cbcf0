"""Check, suggest and list catalog signs."""

import typer

from islbridge.core.utils import normalize_gloss

from ..utils.config import get_catalog
from ..utils.display import console, print_sign_table


def check(
    token: str = typer.Argument(..., help="Gloss to look up"),
) -> None:
    """Check whether a gloss has a sign animation.

    Exits with status 1 and prints suggestions when it doesn't.

    Example:
        islbridge check eat
        islbridge check mango
    """
    catalog = get_catalog()
    gloss = normalize_gloss(token)

    if catalog.has_sign(gloss):
        console.print(f"[green]✓[/] {gloss} is available", highlight=False)
        return

    console.print(f"[red]✗[/] {gloss or token} is not available", highlight=False)
    alternatives = catalog.suggest_alternatives(gloss)
    if alternatives:
        console.print(f"[dim]Try:[/] {', '.join(alternatives)}", highlight=False)
    raise typer.Exit(1)


def suggest(
    token: str = typer.Argument(..., help="Gloss with no sign"),
) -> None:
    """Suggest up to three catalog signs for a gloss.

    Example:
        islbridge suggest zebra
    """
    alternatives = get_catalog().suggest_alternatives(token)

    if not alternatives:
        console.print("[dim]No suggestions[/]")
        return

    for gloss in alternatives:
        console.print(gloss, highlight=False)


def list_signs(
    prefix: str = typer.Option(
        "", "--prefix", "-p", help="Only list glosses starting with this prefix"
    ),
) -> None:
    """List signs in the catalog.

    Example:
        islbridge signs
        islbridge signs --prefix br
    """
    print_sign_table(get_catalog().search(prefix))
