"""Gather the git remotes a resolved configuration refers to."""

from __future__ import annotations

from typing import Set

from ..model import Change, Config


def collect_remotes(config: Config) -> Set[str]:
    """Every target, upstream and change URL in `config`, once each."""
    remotes: Set[str] = set()
    for fork in config.forks:
        remotes.add(fork.target.url)
        remotes.add(fork.upstream.url)
        for change in fork.changes:
            if isinstance(change, Change):
                remotes.add(change.url)
    return remotes


__all__ = ["collect_remotes"]
