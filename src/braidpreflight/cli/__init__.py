"""Command-line tools for braid preflight."""
