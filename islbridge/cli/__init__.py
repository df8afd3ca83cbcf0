"""ISLBridge CLI package."""

from islbridge import __version__

__all__ = ["__version__"]
