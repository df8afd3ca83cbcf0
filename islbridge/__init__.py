"""ISLBridge - English to Indian Sign Language gloss translation."""

__version__ = "1.0.0"
