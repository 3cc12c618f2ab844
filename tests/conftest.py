"""Shared fixtures for the dolbyio_rest_apis test suite.

WHY: Almost every test needs a fake Dolby.io server that replays canned
responses and records the requests the SDK sent.

HOW: FakeServer wraps httpx.MockTransport. Tests queue responses (or
exceptions) in order, pass ``server.transport`` to the SDK call, and then
inspect ``server.requests``. Coroutines are driven with asyncio.run().

RULES:
- The real network is never used
- Hostname/credential environment variables are cleared before each test
- A request with no queued response fails the test immediately
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

import httpx
import pytest

from dolbyio_rest_apis.models import JwtToken

_ENV_VARS = (
    "DOLBYIO_AUTH_HOSTNAME",
    "DOLBYIO_COMMS_HOSTNAME",
    "DOLBYIO_RTS_DIRECTOR_HOSTNAME",
    "DOLBYIO_APP_KEY",
    "DOLBYIO_APP_SECRET",
)


class FakeServer:
    """Replays queued responses and records incoming requests."""

    def __init__(self) -> None:
        self._responses: List[Union[httpx.Response, Exception]] = []
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def queue(self, *responses: Union[httpx.Response, Exception]) -> FakeServer:
        self._responses.extend(responses)
        return self

    def queue_json(self, *bodies: Any, status_code: int = 200) -> FakeServer:
        for body in bodies:
            self._responses.append(httpx.Response(status_code, json=body))
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError("Unexpected request: {} {}".format(request.method, request.url))
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def recording_dict(rec_id: str, conf_id: str = "conf-1", **extra: Any) -> Dict[str, Any]:
    """Build a recording JSON object as the monitor API returns it."""
    data = {
        "id": rec_id,
        "confId": conf_id,
        "confAlias": "standup",
        "region": "us",
        "mediaType": "audio/mpeg",
        "startTime": 1700000000000,
        "duration": 62.5,
        "size": 1048576,
        "url": "https://s3.example.com/{}.mp3".format(rec_id),
    }
    data.update(extra)
    return data


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env from redirecting tests to another host."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def api_token():
    return JwtToken(token_type="Bearer", access_token="abc123", expires_in=1800)


@pytest.fixture
def make_recording():
    """Factory for recording JSON objects."""
    return recording_dict
