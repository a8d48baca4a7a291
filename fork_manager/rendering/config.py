"""Template engine settings for the generated update script."""

from __future__ import annotations

from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_TEMPLATE = "update.sh"

# delimiters chosen so template sources still read as shell to shellcheck
BLOCK_DELIMITERS = ("#{", "}#")
VARIABLE_DELIMITERS = ("'{", "}'")
COMMENT_DELIMITERS = ("#/*", "#*/")

__all__ = [
    "TEMPLATE_DIR",
    "DEFAULT_TEMPLATE",
    "BLOCK_DELIMITERS",
    "VARIABLE_DELIMITERS",
    "COMMENT_DELIMITERS",
]
