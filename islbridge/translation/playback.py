"""Playback planning: gloss sequence to timed animation clips.

The avatar plays one clip per gloss for a fixed base duration scaled by the
playback speed. Glosses without a clip fall back to the idle animation so
the timeline keeps its shape.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Optional

from islbridge.core.config import (
    DEFAULT_IDLE_CLIP,
    DEFAULT_PLAYBACK_SPEED,
    MAX_PLAYBACK_SPEED,
    MIN_PLAYBACK_SPEED,
)
from islbridge.core.errors import PlaybackError
from islbridge.core.protocols import ClipCatalog

from .catalog import DEFAULT_CATALOG

BASE_SIGN_DURATION_MS = 1500


@dataclass(frozen=True)
class PlaybackStep:
    """One clip in the playback timeline."""
    index: int
    gloss: str
    clip: str
    start_ms: int
    duration_ms: int
    is_fallback: bool = False

    @property
    def end_ms(self) -> int:
        return self.start_ms + self.duration_ms

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "gloss": self.gloss,
            "clip": self.clip,
            "start_ms": self.start_ms,
            "duration_ms": self.duration_ms,
            "is_fallback": self.is_fallback,
        }


@dataclass
class PlaybackPlan:
    """Ordered playback steps for a gloss sequence."""
    steps: list[PlaybackStep] = field(default_factory=list)
    speed: float = DEFAULT_PLAYBACK_SPEED

    @property
    def total_ms(self) -> int:
        return sum(step.duration_ms for step in self.steps)

    @property
    def clips(self) -> list[str]:
        """Clip names in play order."""
        return [step.clip for step in self.steps]

    @property
    def fallback_glosses(self) -> list[str]:
        """Glosses that will be shown as the idle clip."""
        return [step.gloss for step in self.steps if step.is_fallback]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "speed": self.speed,
            "total_ms": self.total_ms,
            "steps": [step.to_dict() for step in self.steps],
        }


def sign_duration_ms(speed: Any = DEFAULT_PLAYBACK_SPEED) -> int:
    """Duration of a single sign at the given speed.

    Args:
        speed: Playback speed multiplier (0.5-2.0)

    Returns:
        Duration in whole milliseconds

    Raises:
        PlaybackError: If speed is not a number in range
    """
    if isinstance(speed, bool) or not isinstance(speed, Real):
        raise PlaybackError("speed must be a number", speed=speed)
    if not MIN_PLAYBACK_SPEED <= speed <= MAX_PLAYBACK_SPEED:
        raise PlaybackError(
            f"speed must be between {MIN_PLAYBACK_SPEED} and {MAX_PLAYBACK_SPEED}",
            speed=speed,
        )
    return round(BASE_SIGN_DURATION_MS / speed)


def build_playback_plan(
    glosses: list[str],
    speed: Any = DEFAULT_PLAYBACK_SPEED,
    clip_catalog: Optional[ClipCatalog] = None,
    idle_clip: str = DEFAULT_IDLE_CLIP,
) -> PlaybackPlan:
    """Build a contiguous playback timeline for a gloss sequence.

    Args:
        glosses: Gloss sequence in play order
        speed: Playback speed multiplier (0.5-2.0)
        clip_catalog: Clips the renderer can play. Defaults to the sign catalog.
        idle_clip: Clip used for glosses the renderer has no clip for

    Returns:
        PlaybackPlan; empty when there are no glosses

    Raises:
        PlaybackError: If speed is not a number in range
    """
    duration = sign_duration_ms(speed)
    catalog = clip_catalog if clip_catalog is not None else DEFAULT_CATALOG

    steps = []
    start = 0
    for index, gloss in enumerate(glosses):
        has_clip = catalog.has_sign(gloss)
        steps.append(PlaybackStep(
            index=index,
            gloss=gloss,
            clip=gloss if has_clip else idle_clip,
            start_ms=start,
            duration_ms=duration,
            is_fallback=not has_clip,
        ))
        start += duration

    return PlaybackPlan(steps=steps, speed=float(speed))
