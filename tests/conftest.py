"""Shared fixtures: isolated environment, canned responses and a stubbed session."""

import os
from unittest.mock import Mock

import pytest
import requests

from createsend_client.auth import AuthManager
from createsend_client.config import AppSettings
from createsend_client.http import HttpClient

ENV_VARS = (
    "CREATESEND_BASE_URL",
    "CREATESEND_OAUTH_BASE_URL",
    "CREATESEND_TIMEOUT_SECONDS",
    "CREATESEND_API_KEY",
    "CREATESEND_ACCESS_TOKEN",
    "CREATESEND_REFRESH_TOKEN",
    "CREATESEND_LOG_LEVEL",
    "CREATESEND_ENV_FILE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # .env loading writes straight into os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def make_response():
    def _make(status_code=200, body=b"", content_type="application/json; charset=utf-8"):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8") if isinstance(body, str) else body
        if content_type:
            response.headers["Content-Type"] = content_type
        return response

    return _make


@pytest.fixture
def settings():
    return AppSettings(
        base_url="https://api.example.test/api/v3",
        oauth_base_url="https://api.example.test",
        timeout_seconds=12,
    )


@pytest.fixture
def session(make_response):
    session = requests.Session()
    session.request = Mock(return_value=make_response(200, b"{}"))
    return session


@pytest.fixture
def auth_manager():
    return AuthManager()


@pytest.fixture
def http_client(settings, auth_manager, session):
    return HttpClient(settings, auth_manager, session=session)
