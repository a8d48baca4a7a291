"""Render a resolved fork configuration into a shell script."""

from .renderer import ScriptRenderer, build_environment, one_line, remote_name, remote_ref

__all__ = ["ScriptRenderer", "build_environment", "one_line", "remote_name", "remote_ref"]
