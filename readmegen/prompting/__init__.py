"""README templating."""

from .builder import ReadmeBuilder

__all__ = ["ReadmeBuilder"]
