"""Turn pull request numbers into concrete changes using the GitHub API."""

from __future__ import annotations

import re
import sys
from typing import Tuple

from ..errors import GithubParseError, UrlParseError
from ..model import PR, Change, Config, Fork
from .defaults import fill_fork
from .http_client import GithubClient

GITHUB_REPO_RE = re.compile(r"github\.com[/:](?P<owner>[^/]+)/(?P<repo>[^/]+)")


def _strip_git_suffix(value: str) -> str:
    return value[: -len(".git")] if value.endswith(".git") else value


def parse_github(url: str) -> Tuple[str, str]:
    """Return `(owner, repo)` for an HTTPS or SSH GitHub URL."""
    match = GITHUB_REPO_RE.search(url)
    if not match:
        raise UrlParseError(url)
    return match.group("owner"), _strip_git_suffix(match.group("repo"))


def pr_to_change(client: GithubClient, pr: PR, owner: str, repo: str) -> Change:
    """Fetch pull request `pr` from `owner/repo` and describe its head branch."""
    # TODO: closed pull requests resolve like open ones; they could be dismissed instead
    data = client.get_pull_request(owner, repo, pr.pr)
    head = data.get("head") or {}

    head_repo = head.get("repo")
    if not head_repo:
        raise GithubParseError("Missing repo head")
    url = head_repo.get("ssh_url")
    if not url:
        raise GithubParseError("Missing repo html url")
    url = _strip_git_suffix(url)

    branch = head.get("ref")
    if not branch:
        raise GithubParseError("Missing head ref")
    title = data.get("title") or branch
    return Change(url=url, branch=branch, title=title)


def resolve_fork(fork: Fork, client: GithubClient) -> None:
    """Replace every pull request reference of `fork` in place."""
    if not any(isinstance(item, PR) for item in fork.changes):
        return

    owner, repo = parse_github(fork.upstream.url)
    for index, item in enumerate(fork.changes):
        if isinstance(item, PR):
            print(f"[resolve] {fork.name}: {owner}/{repo}#{item.pr}", file=sys.stderr)
            fork.changes[index] = pr_to_change(client, item, owner, repo)


def update_config(config: Config, client: GithubClient) -> None:
    """Resolve and fill every fork, in order; the first failure aborts."""
    for fork in config.forks:
        resolve_fork(fork, client)
        fill_fork(fork)


__all__ = ["GITHUB_REPO_RE", "parse_github", "pr_to_change", "resolve_fork", "update_config"]
