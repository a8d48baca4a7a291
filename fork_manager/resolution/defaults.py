"""Infer omitted optional fields from sibling data once a fork is resolved."""

from __future__ import annotations

from ..model import Change, Fork


def fill_fork(fork: Fork) -> None:
    # upstream follows the target branch when it names none itself
    if fork.upstream.branch is None and fork.target.branch is not None:
        fork.upstream.branch = fork.target.branch

    for change in fork.changes:
        if isinstance(change, Change) and change.title is None:
            change.title = change.branch


__all__ = ["fill_fork"]
