"""Pull request resolution, default filling and remote collection."""

from .collectors import collect_remotes
from .defaults import fill_fork
from .http_client import GithubClient
from .resolver import parse_github, pr_to_change, resolve_fork, update_config

__all__ = [
    "GithubClient",
    "collect_remotes",
    "fill_fork",
    "parse_github",
    "pr_to_change",
    "resolve_fork",
    "update_config",
]
