"""Thin GitHub REST session used to look up pull requests."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional

import requests

from ..errors import GithubApiError
from .config import ACCEPT, BASE_URL, REQUEST_TIMEOUT, USER_AGENT


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}", file=sys.stderr)


class GithubClient:
    """GitHub API access; authenticated when a token is supplied, anonymous otherwise."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout: int = REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": ACCEPT, "User-Agent": USER_AGENT})
        if token:
            self.session.headers["Authorization"] = f"token {token}"

    @property
    def authenticated(self) -> bool:
        return "Authorization" in self.session.headers

    def _url(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    def get_json(self, path: str) -> Dict[str, Any]:
        """GET a single resource; any transport failure or non-2xx status is fatal."""
        url = self._url(path)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise GithubApiError(f"Request to {url} failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            log_http_error(resp, url)
            raise GithubApiError(f"HTTP {resp.status_code} for {url}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise GithubApiError(f"Invalid JSON from {url}") from exc
        if not isinstance(data, dict):
            raise GithubApiError(f"Unexpected payload from {url}: expected an object")
        return data

    def get_pull_request(self, owner: str, repo: str, number: int) -> Dict[str, Any]:
        return self.get_json(f"/repos/{owner}/{repo}/pulls/{number}")


__all__ = ["GithubClient", "log_http_error"]
