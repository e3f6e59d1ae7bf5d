"""
Integration Test Fixtures.

A fake API behind httpx.MockTransport records every request and answers
with a configurable response, so the full argument → request → response
→ directives path runs without a network.
"""

from collections.abc import Generator
from unittest.mock import patch

import httpx
import pytest

from anything_cli.cli.client import APIClient


class FakeAPI:
    """Recording stand-in for the configured API."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._kwargs: dict = {"text": ""}
        self.error: Exception | None = None

    def respond(self, status: int = 200, **kwargs) -> None:
        """Set the next response, using httpx.Response keyword arguments."""
        self._status = status
        self._kwargs = kwargs

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self._status, **self._kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture(autouse=True)
def _entry_point_isolation() -> Generator[None, None, None]:
    """Fixed executable name, no git context, no logging reconfiguration."""
    with patch("anything_cli.main.setup_logging"), \
         patch("anything_cli.main.get_executable_name", return_value="anything-cli"), \
         patch("anything_cli.main.get_git_repo_info", return_value=None):
        yield


@pytest.fixture
def api_client_factory(api: FakeAPI, monkeypatch: pytest.MonkeyPatch) -> FakeAPI:
    """Route APIClient instances created by the entry point to the fake API."""

    def _factory(base_url, timeout=None, transport=None):
        return APIClient(base_url, timeout=timeout, transport=api.transport)

    monkeypatch.setattr("anything_cli.main.APIClient", _factory)
    return api
