"""Low-level HTTP client for the Beeswax REST API.

Handles the cookie-based login and the JSON request primitive that every
gateway goes through.
"""
from __future__ import annotations
import json
import logging
import re
from typing import Any, Optional

import requests

from .exceptions import (
    AuthenticationError,
    BeeswaxAPIError,
    EncodingError,
    InvalidRequestError,
    TransportError,
)

logger = logging.getLogger(__name__)

LOGIN_PATH = "/rest/v2/authenticate"
JSON_HEADERS = {"Content-Type": "application/json"}

# Sentinel accepted by send() for "no request body" (GET/DELETE)
NO_BODY = ""

_METHOD_RE = re.compile(r"^[A-Za-z]+$")
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
    requests.exceptions.URLRequired,
)


class BeeswaxClient:
    """HTTP client for the Beeswax REST API with a cookie-backed session.

    A single ``requests.Session`` holds the authentication cookie for the
    lifetime of the client. ``authenticate()`` must succeed once before any
    entity request; the session is not refreshed afterwards.

    Usage:
        client = BeeswaxClient("https://buzz.example.com", "ops@example.com", "secret")
        client.authenticate()
        raw = client.get("/rest/v2/roles/5")
    """

    def __init__(
        self,
        base_url: str,
        email: str,
        password: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize Beeswax client.

        Args:
            base_url: Beeswax API base URL
            email: Login email
            password: Login password
            session: Pre-built session (tests inject a fake one)
            timeout: Per-request timeout in seconds; None keeps the transport default
        """
        self.base_url = base_url.rstrip("/")
        self._email = email
        self._password = password
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout
        self._authenticated = False

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    def authenticate(self) -> None:
        """Log in and keep the session cookie for every later request.

        Raises:
            AuthenticationError: If the login call does not return HTTP 200
        """
        if self._authenticated:
            logger.debug("[auth] Session already authenticated; skipping login")
            return

        url = f"{self.base_url}{LOGIN_PATH}"
        payload = json.dumps({"email": self._email, "password": self._password})
        try:
            resp = self._session.request(
                "POST", url, data=payload, headers=dict(JSON_HEADERS), timeout=self.timeout
            )
        except _REQUEST_BUILD_ERRORS as exc:
            raise AuthenticationError(f"login failed: invalid API URL {url}: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise AuthenticationError(f"login failed: {TransportError(url, exc)}") from exc

        if resp.status_code != 200:
            body = resp.content.decode("utf-8", errors="replace")
            raise AuthenticationError(f"login failed: response {_status_line(resp)}. API response: {body}")

        self._authenticated = True
        logger.info("[auth] Logged in to %s", self.base_url)

    def send(self, method: str, path: str, body: Any = NO_BODY) -> bytes:
        """Send a JSON request and return the raw response body.

        Args:
            method: HTTP verb
            path: API path relative to the base URL (e.g. "/rest/v2/users/3")
            body: JSON-serializable payload; "" or None sends no body

        Returns:
            Raw response bytes

        Raises:
            AuthenticationError: If authenticate() has not succeeded
            EncodingError: If body cannot be serialized
            InvalidRequestError: If the request cannot be built
            TransportError: On network failure
            BeeswaxAPIError: On non-2xx response (carries the raw body)
        """
        if not self._authenticated:
            raise AuthenticationError("Not authenticated - call authenticate() first")

        data = None
        if body is not None and body != NO_BODY:
            try:
                data = json.dumps(body, allow_nan=False)
            except (TypeError, ValueError) as exc:
                raise EncodingError(f"can't marshal request body for {method} {path}: {exc}") from exc

        if not isinstance(method, str) or not _METHOD_RE.match(method):
            raise InvalidRequestError(f"request creation failed: invalid method {method!r}")

        url = f"{self.base_url}{path}"
        try:
            resp = self._session.request(
                method.upper(), url, data=data, headers=dict(JSON_HEADERS), timeout=self.timeout
            )
        except _REQUEST_BUILD_ERRORS as exc:
            raise InvalidRequestError(f"request creation failed: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(url, exc) from exc

        logger.debug("[http] %s %s -> %s", method.upper(), path, resp.status_code)
        self._handle_error(resp, path)
        return resp.content

    def get(self, path: str) -> bytes:
        return self.send("GET", path)

    def post(self, path: str, body: Any = NO_BODY) -> bytes:
        return self.send("POST", path, body)

    def put(self, path: str, body: Any = NO_BODY) -> bytes:
        return self.send("PUT", path, body)

    def delete(self, path: str) -> bytes:
        return self.send("DELETE", path)

    def close(self) -> None:
        self._session.close()

    def _handle_error(self, resp: requests.Response, path: str) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            BeeswaxAPIError: If response status is outside 2xx
        """
        if not 200 <= resp.status_code < 300:
            raise BeeswaxAPIError(resp.status_code, _status_line(resp), resp.content, path)


def _status_line(resp: requests.Response) -> str:
    return f"{resp.status_code} {resp.reason or ''}".strip()
