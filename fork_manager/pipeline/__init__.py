"""End-to-end fork manager pipeline."""

from .runner import generate, main

__all__ = ["generate", "main"]
