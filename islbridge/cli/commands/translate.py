"""Translate English text to ISL glosses."""

from typing import Optional

import typer

from islbridge.core.errors import PlaybackError
from islbridge.translation import GlossConverter, build_playback_plan
from islbridge.translation import translate as translate_text

from ..utils.config import get_catalog, get_settings
from ..utils.display import console, print_playback_table, print_translation


def translate(
    text: str = typer.Argument(..., help="English text to translate"),
    speed: Optional[float] = typer.Option(
        None, "--speed", "-s", help="Playback speed, 0.5-2.0 (default: ISLBRIDGE_PLAYBACK_SPEED)"
    ),
    available_only: bool = typer.Option(
        False, "--available-only", "-a", help="Drop glosses that have no sign animation"
    ),
    plan: bool = typer.Option(
        True, "--plan/--no-plan", help="Show the playback timeline"
    ),
) -> None:
    """Translate English text to ISL glosses.

    Shows the gloss sequence, how much of it the sign catalog covers,
    suggestions for missing signs and the playback timeline.

    Example:
        islbridge translate "I eat rice"
        islbridge translate "See you tomorrow" --speed 1.5 --no-plan
    """
    settings = get_settings()
    catalog = get_catalog()

    result = GlossConverter(catalog=catalog, available_only=available_only).translate(text)
    print_translation(result)

    if not plan:
        return

    try:
        playback = build_playback_plan(
            result.glosses,
            speed=settings.playback_speed if speed is None else speed,
            clip_catalog=catalog,
            idle_clip=settings.idle_clip,
        )
    except PlaybackError as e:
        console.print(f"[red]Error:[/] {e.message}")
        raise typer.Exit(1)

    print_playback_table(playback)


def glosses(
    text: str = typer.Argument(..., help="English text to translate"),
) -> None:
    """Translate English to ISL glosses only.

    Prints the bare space-separated glosses, for scripting.

    Example:
        islbridge glosses "How are you?"
        # Output: you
    """
    typer.echo(" ".join(translate_text(text)))
