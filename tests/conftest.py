import pathlib

import pytest
import requests

import services.relay as relay_module

FIXTURES = pathlib.Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def load_fixture():
    def _load(name):
        return (FIXTURES / name).read_text(encoding="utf-8")
    return _load


class FakeResponse:
    """Stand-in for ``requests.Response`` with just what the relay reads."""

    def __init__(self, text="", status_code=200, content_type="text/html; charset=UTF-8"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type} if content_type else {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


class FakePost:
    """Records outbound calls and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_post(monkeypatch):
    """Patch ``requests.post`` as seen by the relay service."""
    def _install(response=None, error=None):
        fake = FakePost(response=response, error=error)
        monkeypatch.setattr(relay_module.requests, "post", fake)
        return fake
    return _install


@pytest.fixture
def fake_response():
    return FakeResponse
