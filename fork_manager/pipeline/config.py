"""Command-line and credential settings for a fork manager run."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..rendering.config import DEFAULT_TEMPLATE
from ..resolution.config import TOKEN_ENV_VAR
from ..secrets import github_token_from_secrets, load_local_secrets


@dataclass(frozen=True)
class RunSettings:
    """Resolved runtime settings for one generation run."""

    config_file: Path
    push: bool
    dry_run: bool
    template: str
    github_token: Optional[str]


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the fork manager entry point."""

    parser = argparse.ArgumentParser(
        prog="fork-manager",
        description="Generate a git update script from a YAML description of forks.",
    )
    parser.add_argument("config_file", help="YAML file listing the forks to manage")
    parser.add_argument("--push", action="store_true", help="push every rebuilt fork to its target")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the resolved configuration instead of the script",
    )
    parser.add_argument("--template", default=DEFAULT_TEMPLATE)
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_github_token() -> Optional[str]:
    """Environment token first, then the local secrets file; None means anonymous."""

    token = os.getenv(TOKEN_ENV_VAR)
    if token:
        return token
    return github_token_from_secrets(load_local_secrets())


def resolve_settings(args: argparse.Namespace) -> RunSettings:
    return RunSettings(
        config_file=Path(args.config_file),
        push=bool(args.push),
        dry_run=bool(args.dry_run),
        template=args.template,
        github_token=resolve_github_token(),
    )


__all__ = [
    "RunSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_github_token",
    "resolve_settings",
]
