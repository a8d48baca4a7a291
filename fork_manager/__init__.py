"""Resolve fork definitions into git remote/branch update scripts."""

__version__ = "0.1.0"
