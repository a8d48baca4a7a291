"""Jinja2 rendering of the resolved model into the update script."""

from __future__ import annotations

import shlex
from typing import Iterable, Optional

import jinja2

from ..errors import TemplateConfigError, TemplateLookupError, TemplateRenderError
from ..model import Config
from .config import (
    BLOCK_DELIMITERS,
    COMMENT_DELIMITERS,
    DEFAULT_TEMPLATE,
    TEMPLATE_DIR,
    VARIABLE_DELIMITERS,
)


def remote_name(value: str) -> str:
    """Short git remote name for a URL: `git@github.com:a/b` -> `github.com/a/b`."""
    return value.replace("https://", "").replace("git@", "").replace(":", "/")


def remote_ref(url: str, branch: str) -> str:
    """Shell-quoted `<remote>/<branch>` for the remote registered for `url`."""
    return shlex.quote(f"{remote_name(url)}/{branch}")


def one_line(value: str) -> str:
    """First line of a free-text value, for use inside shell comments."""
    if not value:
        return ""
    return value.splitlines()[0].strip()


def build_environment(loader: Optional[jinja2.BaseLoader] = None) -> jinja2.Environment:
    """Return a Jinja2 environment using the shell-friendly delimiters."""
    # jinja2 asserts on conflicting or empty delimiters
    try:
        env = jinja2.Environment(
            loader=loader or jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            block_start_string=BLOCK_DELIMITERS[0],
            block_end_string=BLOCK_DELIMITERS[1],
            variable_start_string=VARIABLE_DELIMITERS[0],
            variable_end_string=VARIABLE_DELIMITERS[1],
            comment_start_string=COMMENT_DELIMITERS[0],
            comment_end_string=COMMENT_DELIMITERS[1],
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
            autoescape=False,
        )
    except AssertionError as exc:
        raise TemplateConfigError(f"Invalid template engine settings: {exc}") from exc
    env.filters["remote_name"] = remote_name
    env.filters["remote_ref"] = remote_ref
    env.filters["shell_quote"] = shlex.quote
    env.filters["one_line"] = one_line
    return env


class ScriptRenderer:
    """Render one named template from an explicitly supplied environment."""

    def __init__(self, env: jinja2.Environment, template_name: str = DEFAULT_TEMPLATE) -> None:
        self.env = env
        self.template_name = template_name

    def _template(self) -> jinja2.Template:
        try:
            return self.env.get_template(self.template_name)
        except jinja2.TemplateNotFound as exc:
            raise TemplateLookupError(f"Template {self.template_name!r} is not registered") from exc
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateConfigError(
                f"Template {self.template_name!r} does not parse (line {exc.lineno}): {exc.message}"
            ) from exc

    def render(self, config: Config, remotes: Iterable[str], push: bool = False) -> str:
        template = self._template()
        # sorted so the output does not depend on set iteration order
        joined = " ".join(sorted(remotes))
        try:
            return template.render(
                config=config.config,
                forks=config.forks,
                remotes=joined,
                push=push,
            )
        except jinja2.TemplateError as exc:
            raise TemplateRenderError(f"Cannot render {self.template_name!r}: {exc}") from exc


__all__ = ["ScriptRenderer", "build_environment", "one_line", "remote_name", "remote_ref"]
