"""Tests for fork_manager.pipeline.config covering CLI parsing and token lookup.

Run with coverage:
    pytest tests/test_pipeline_config.py --maxfail=1 -v --cov=fork_manager.pipeline.config --cov-report=term-missing
"""

import json
from pathlib import Path

import pytest

from fork_manager.pipeline import config


@pytest.fixture(autouse=True)
def _isolated_credentials(monkeypatch, tmp_path):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(tmp_path / "missing_secrets.json"))


def test_defaults_from_cli():
    settings = config.resolve_settings(config.parse_args(["forks.yml"]))
    assert settings.config_file == Path("forks.yml")
    assert settings.push is False
    assert settings.dry_run is False
    assert settings.template == "update.sh"
    assert settings.github_token is None


def test_flags_from_cli(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    args = config.parse_args(["forks.yml", "--push", "--dry-run", "--template", "other.sh"])
    settings = config.resolve_settings(args)
    assert settings.push is True
    assert settings.dry_run is True
    assert settings.template == "other.sh"
    assert settings.github_token == "env-token"


def test_token_falls_back_to_local_secrets(monkeypatch, tmp_path):
    secrets = tmp_path / "local_secrets.json"
    secrets.write_text(json.dumps({"github_tokens": ["first", "second"]}), encoding="utf-8")
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(secrets))
    assert config.resolve_github_token() == "first"


def test_environment_token_wins_over_secrets(monkeypatch, tmp_path):
    secrets = tmp_path / "local_secrets.json"
    secrets.write_text(json.dumps({"github_token": "file-token"}), encoding="utf-8")
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(secrets))
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    assert config.resolve_github_token() == "env-token"


def test_unreadable_secrets_mean_anonymous(monkeypatch, tmp_path):
    secrets = tmp_path / "local_secrets.json"
    secrets.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(secrets))
    assert config.resolve_github_token() is None


def test_config_file_is_required():
    with pytest.raises(SystemExit):
        config.parse_args([])
