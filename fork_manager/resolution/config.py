"""Central configuration constants for talking to the GitHub REST API."""

from __future__ import annotations

import os

BASE_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
USER_AGENT = "fork-manager/0.1"
ACCEPT = "application/vnd.github+json"
REQUEST_TIMEOUT = int(os.getenv("GITHUB_REQUEST_TIMEOUT", "30"))
TOKEN_ENV_VAR = "GITHUB_TOKEN"

__all__ = [
    "BASE_URL",
    "USER_AGENT",
    "ACCEPT",
    "REQUEST_TIMEOUT",
    "TOKEN_ENV_VAR",
]
