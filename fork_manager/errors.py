"""Error kinds raised by the fork manager; every one of them aborts the run."""

from __future__ import annotations


class ForkManagerError(RuntimeError):
    """Base class for failures reported to the user with a non-zero exit."""


class ConfigReadError(ForkManagerError):
    """The fork configuration cannot be opened or deserialized."""


class UrlParseError(ForkManagerError):
    """A repository URL does not point at a GitHub project."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Cannot parse GitHub owner/repo from {url!r}")
        self.url = url


class GithubApiError(ForkManagerError):
    """The GitHub API call failed (network, auth or not-found)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GithubParseError(ForkManagerError):
    """The GitHub API answered but a required field is absent."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TemplateConfigError(ForkManagerError):
    """The template engine rejected its delimiter configuration or template source."""


class TemplateLookupError(ForkManagerError):
    """The requested template is not registered with the loader."""


class TemplateRenderError(ForkManagerError):
    """The template referenced a variable or filter that is not available."""


__all__ = [
    "ForkManagerError",
    "ConfigReadError",
    "UrlParseError",
    "GithubApiError",
    "GithubParseError",
    "TemplateConfigError",
    "TemplateLookupError",
    "TemplateRenderError",
]
