"""Entry point wiring settings, pull request resolution and script rendering."""

from __future__ import annotations

import sys
from typing import List, Optional

from ..errors import ForkManagerError
from ..model import Config, dump_config, load_config
from ..rendering import ScriptRenderer, build_environment
from ..resolution import GithubClient, collect_remotes, update_config
from .config import RunSettings, parse_args, resolve_settings


def generate(config: Config, settings: RunSettings) -> str:
    """Return the text to print for an already resolved configuration."""
    if settings.dry_run:
        return dump_config(config)
    renderer = ScriptRenderer(build_environment(), settings.template)
    return renderer.render(config, collect_remotes(config), push=settings.push)


def run(settings: RunSettings) -> str:
    config = load_config(settings.config_file)
    client = GithubClient(token=settings.github_token)
    if not client.authenticated:
        print("[warn] no GitHub token configured; using anonymous API access", file=sys.stderr)
    update_config(config, client)
    return generate(config, settings)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""

    settings = resolve_settings(parse_args(argv))
    try:
        output = run(settings)
    except ForkManagerError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    print(output.rstrip("\n"))
    return 0


__all__ = ["generate", "run", "main"]
