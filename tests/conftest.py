"""Pytest shared fixtures for the Beeswax provider tests."""
import json
import pathlib
import sys
from http import HTTPStatus
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests
from requests.cookies import RequestsCookieJar

from beeswax_provider.core.beeswax import BeeswaxClient, RoleService, UserService


BASE_URL = "https://buzz.example.com"


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_live_http(monkeypatch):
    """Prevent every test from hitting a live Beeswax API."""
    def _refuse(self, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests.Session, "request", _refuse)


# ─────────────────────────────────────────────────────────────────────────────
# Fake session
# ─────────────────────────────────────────────────────────────────────────────
class StubResponse:
    def __init__(self, status_code: int = 200, body: bytes = b"", url: str = "", reason: Optional[str] = None):
        self.status_code = status_code
        self.content = body
        self.url = url
        if reason is None:
            try:
                reason = HTTPStatus(status_code).phrase
            except ValueError:
                reason = ""
        self.reason = reason

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class FakeSession:
    """Records requests and replays queued responses in order.

    A 200 login response drops a session cookie into ``cookies`` the way the
    real server would.
    """

    def __init__(self):
        self.calls = []
        self._queue = []
        self.cookies = RequestsCookieJar()
        self.closed = False

    def queue(self, status: int = 200, body=b"", reason: Optional[str] = None) -> "FakeSession":
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._queue.append(("response", status, body, reason))
        return self

    def queue_error(self, exc: BaseException) -> "FakeSession":
        self._queue.append(("error", exc, None, None))
        return self

    def request(self, method, url, data=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "path": url[len(BASE_URL):] if url.startswith(BASE_URL) else url,
                "data": data,
                "body": json.loads(data) if data else None,
                "headers": dict(headers or {}),
                "timeout": timeout,
                "cookies": dict(self.cookies),
            }
        )
        if not self._queue:
            raise AssertionError(f"No response queued for {method} {url}")
        kind, first, body, reason = self._queue.pop(0)
        if kind == "error":
            raise first
        if url.endswith("/rest/v2/authenticate") and first == 200:
            self.cookies.set("bx_session", "cookie-value")
        return StubResponse(first, body, url, reason)

    def close(self):
        self.closed = True


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def client(fake_session):
    """Authenticated Beeswax client backed by the fake session."""
    fake_session.queue(200, {"success": True})
    bx = BeeswaxClient(BASE_URL, "ops@example.com", "s3cret", session=fake_session)
    bx.authenticate()
    fake_session.calls.clear()
    return bx


@pytest.fixture()
def users(client):
    return UserService(client)


@pytest.fixture()
def roles(client):
    return RoleService(client)
