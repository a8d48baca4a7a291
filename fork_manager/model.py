"""Dataclasses describing forks, their upstreams and the changes layered on top."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import ConfigReadError


def _require_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigReadError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _require_str(data: Dict[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ConfigReadError(f"{what}.{key} must be a string")
    return value


def _optional_str(data: Dict[str, Any], key: str, what: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigReadError(f"{what}.{key} must be a string when set")
    return value


@dataclass
class Repo:
    """A git remote, optionally pinned to a branch."""

    url: str
    branch: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, what: str = "repo") -> "Repo":
        data = _require_mapping(data, what)
        return cls(url=_require_str(data, "url", what), branch=_optional_str(data, "branch", what))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"url": self.url}
        if self.branch is not None:
            out["branch"] = self.branch
        return out


@dataclass
class Change:
    """A fetchable change: a remote URL and the branch to merge from it."""

    url: str
    branch: str
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, what: str = "change") -> "Change":
        data = _require_mapping(data, what)
        return cls(
            url=_require_str(data, "url", what),
            branch=_require_str(data, "branch", what),
            title=_optional_str(data, "title", what),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.title is not None:
            out["title"] = self.title
        out["url"] = self.url
        out["branch"] = self.branch
        return out


@dataclass
class PR:
    """A pull request number in the fork's upstream project, pending resolution."""

    pr: int

    @classmethod
    def from_dict(cls, data: Any, what: str = "change") -> "PR":
        data = _require_mapping(data, what)
        number = data.get("pr")
        # bool is an int subclass; YAML `pr: yes` is not a pull request number
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ConfigReadError(f"{what}.pr must be a non-negative integer")
        return cls(pr=number)

    def to_dict(self) -> Dict[str, Any]:
        return {"pr": self.pr}


ChangeRef = Union[Change, PR]


def parse_change(data: Any, what: str = "change") -> ChangeRef:
    """Decode a change entry, trying the resolved shape before a bare PR number."""

    try:
        return Change.from_dict(data, what)
    except ConfigReadError as change_exc:
        try:
            return PR.from_dict(data, what)
        except ConfigReadError:
            raise ConfigReadError(
                f"{what} is neither a change (url + branch) nor a pull request ({change_exc})"
            ) from None


@dataclass
class Fork:
    """A target repository tracking an upstream, with changes merged on top."""

    name: str
    target: Repo
    upstream: Repo
    changes: List[ChangeRef] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, what: str = "fork") -> "Fork":
        data = _require_mapping(data, what)
        name = _require_str(data, "name", what)
        changes = data.get("changes")
        if not isinstance(changes, list):
            raise ConfigReadError(f"{what}.changes must be a list")
        return cls(
            name=name,
            target=Repo.from_dict(data.get("target"), f"{what}.target"),
            upstream=Repo.from_dict(data.get("upstream"), f"{what}.upstream"),
            changes=[parse_change(item, f"{what}.changes[{i}]") for i, item in enumerate(changes)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "target": self.target.to_dict(),
            "upstream": self.upstream.to_dict(),
            "changes": [change.to_dict() for change in self.changes],
        }


@dataclass
class Config:
    """Top-level document: the optional config repo plus every fork."""

    forks: List[Fork] = field(default_factory=list)
    config: Optional[Repo] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        data = _require_mapping(data, "config file")
        forks = data.get("forks")
        if not isinstance(forks, list):
            raise ConfigReadError("forks must be a list")
        raw_config = data.get("config")
        return cls(
            forks=[Fork.from_dict(item, f"forks[{i}]") for i, item in enumerate(forks)],
            config=Repo.from_dict(raw_config, "config") if raw_config is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.config is not None:
            out["config"] = self.config.to_dict()
        out["forks"] = [fork.to_dict() for fork in self.forks]
        return out


def load_config(path: str | Path) -> Config:
    """Read and decode a YAML fork configuration."""
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigReadError(f"Cannot open {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigReadError(f"{path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigReadError(f"Invalid YAML in {path}: {exc}") from exc
    return Config.from_dict(data)


def dump_config(config: Config) -> str:
    """Serialize the model back to YAML, keeping field order readable."""
    return yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)


__all__ = [
    "Repo",
    "Change",
    "PR",
    "ChangeRef",
    "parse_change",
    "Fork",
    "Config",
    "load_config",
    "dump_config",
]
