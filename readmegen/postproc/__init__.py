"""Post-processing helpers for rendered README text."""
