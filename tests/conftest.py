"""Pytest fixtures for dive-mcp."""

from unittest.mock import MagicMock

import pytest
import requests

from dive_mcp.config import ServerConfig
from dive_mcp.http_client import HttpClient
from dive_mcp.service import DiveDefaultService


def make_response(status=200, content=b"", headers=None, reason="OK"):
    """Build a requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = content
    response.headers.update(headers or {})
    return response


@pytest.fixture
def http_client():
    """HttpClient whose session.request is a MagicMock."""
    client = HttpClient(timeout=5, user_agent="dive-mcp/test")
    client.session.request = MagicMock(return_value=make_response(content=b"ok"))
    yield client
    client.close()


@pytest.fixture
def service(http_client):
    """Fully composed service using the mocked HTTP client."""
    svc = DiveDefaultService(ServerConfig(fetch_timeout=5), http_client=http_client)
    yield svc
    svc.close()
