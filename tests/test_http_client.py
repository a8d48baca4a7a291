"""Tests for fork_manager.resolution.http_client covering auth and failure handling.

Run with coverage:
    pytest tests/test_http_client.py --maxfail=1 -v --cov=fork_manager.resolution.http_client --cov-report=term-missing
"""

from typing import Any, Dict
from unittest.mock import MagicMock, patch

import pytest
import requests

from fork_manager.errors import GithubApiError
from fork_manager.resolution import http_client
from fork_manager.resolution.http_client import GithubClient


def _make_resp(status: int = 200, payload: Any = None):
    resp = MagicMock()
    resp.status_code = status
    if payload is None:
        payload = {}
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


def _session(mock_session_cls) -> MagicMock:
    session = MagicMock()
    session.headers = {}
    mock_session_cls.return_value = session
    return session


@patch("fork_manager.resolution.http_client.requests.Session")
def test_token_sets_authorization_header(mock_session_cls):
    session = _session(mock_session_cls)
    client = GithubClient(token="abc123")
    assert session.headers["Authorization"] == "token abc123"
    assert session.headers["User-Agent"].startswith("fork-manager")
    assert client.authenticated is True


@patch("fork_manager.resolution.http_client.requests.Session")
def test_missing_token_is_anonymous(mock_session_cls):
    session = _session(mock_session_cls)
    client = GithubClient(token=None)
    assert "Authorization" not in session.headers
    assert client.authenticated is False


@patch("fork_manager.resolution.http_client.requests.Session")
def test_get_pull_request_hits_pulls_endpoint(mock_session_cls):
    session = _session(mock_session_cls)
    payload: Dict[str, Any] = {"number": 42, "head": {"ref": "feat-x"}}
    session.get.return_value = _make_resp(200, payload)

    client = GithubClient(base_url="https://api.github.com/", timeout=5)
    assert client.get_pull_request("acme", "widgets", 42) == payload
    session.get.assert_called_once_with("https://api.github.com/repos/acme/widgets/pulls/42", timeout=5)


@patch("fork_manager.resolution.http_client.requests.Session")
def test_http_error_raises_and_logs(mock_session_cls, capsys):
    session = _session(mock_session_cls)
    session.get.return_value = _make_resp(404, {"message": "Not Found"})

    with pytest.raises(GithubApiError) as excinfo:
        GithubClient().get_pull_request("acme", "widgets", 1)

    assert excinfo.value.status_code == 404
    assert "Not Found" in capsys.readouterr().err


@patch("fork_manager.resolution.http_client.requests.Session")
def test_transport_error_is_not_retried(mock_session_cls):
    session = _session(mock_session_cls)
    session.get.side_effect = requests.ConnectionError("boom")

    with pytest.raises(GithubApiError):
        GithubClient().get_pull_request("acme", "widgets", 1)
    assert session.get.call_count == 1


@patch("fork_manager.resolution.http_client.requests.Session")
def test_non_object_payload_is_rejected(mock_session_cls):
    session = _session(mock_session_cls)
    session.get.return_value = _make_resp(200, [1, 2])
    with pytest.raises(GithubApiError):
        GithubClient().get_json("/repos/acme/widgets/pulls/1")


def test_log_http_error_handles_json_and_text(capsys):
    resp = _make_resp(403, {"message": "bad credentials"})
    http_client.log_http_error(resp, "url")
    assert "bad credentials" in capsys.readouterr().err

    resp = _make_resp(502)
    resp.json.side_effect = ValueError()
    resp.text = "plain"
    http_client.log_http_error(resp, "url")
    assert "plain" in capsys.readouterr().err
