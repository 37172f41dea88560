"""Generate README documents from a project's manifest, layout and sources."""

__version__ = "0.2.0"
