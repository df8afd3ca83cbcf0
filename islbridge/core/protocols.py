"""Protocol definitions for ISLBridge interfaces.

Protocols define interfaces for duck typing, allowing packages to
depend on behaviors rather than concrete implementations.

Usage:
    from islbridge.core import ClipCatalog

    def plan(glosses: list[str], clips: ClipCatalog) -> list[str]:
        return [g if clips.has_sign(g) else "idle" for g in glosses]
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClipCatalog(Protocol):
    """Protocol for anything that knows which glosses have an animation clip.

    The built-in SignCatalog satisfies it. A rendering collaborator can
    pass its own object (for example one backed by the clip names of a
    loaded 3D model) to the playback planner.

    Example:
        class ModelClips:
            def __init__(self, names):
                self.names = set(names)

            def has_sign(self, gloss: str) -> bool:
                return gloss in self.names

        plan = build_playback_plan(["i", "eat"], clip_catalog=ModelClips(names))
    """

    def has_sign(self, gloss: str) -> bool:
        """Check whether a clip exists for the gloss.

        Args:
            gloss: Gloss token (case-insensitive)

        Returns:
            True if an animation clip is available
        """
        ...

