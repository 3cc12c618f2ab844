"""Real-time streaming director response dataclasses.

WHY: The director tells a publisher or viewer where to connect and hands
out a short-lived JWT for that connection.

HOW: Director responses arrive wrapped as ``{"status": ..., "data": {...}}``.
``unwrap_envelope`` extracts ``data``; the dataclasses parse it.

RULES:
- urls is the list of WebRTC endpoints, in preference order
- stream_account_id is None when the director omits it
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from dolbyio_rest_apis.core.schema import validate_shape

ENVELOPE_SCHEMA = {
    "type": "object",
    "required": ["data"],
    "properties": {
        "status": {"type": "string"},
        "data": {"type": "object"},
    },
}

DIRECTOR_SCHEMA = {
    "type": "object",
    "required": ["urls", "jwt"],
    "properties": {
        "urls": {"type": "array", "items": {"type": "string"}},
        "jwt": {"type": "string"},
        "wsUrl": {"type": ["string", "null"]},
        "streamAccountId": {"type": ["string", "null"]},
        "subscriberId": {"type": ["string", "null"]},
    },
}


def unwrap_envelope(body: Any) -> dict:
    """Return the ``data`` object of a director response."""
    validate_shape(body, ENVELOPE_SCHEMA, "director response")
    return body["data"]


@dataclass
class PublishResponse:
    urls: List[str]
    jwt: str
    stream_account_id: Optional[str] = None
    ws_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> PublishResponse:
        validate_shape(data, DIRECTOR_SCHEMA, "publish response")
        return cls(
            urls=list(data["urls"]),
            jwt=data["jwt"],
            stream_account_id=data.get("streamAccountId"),
            ws_url=data.get("wsUrl"),
        )


@dataclass
class SubscribeResponse:
    urls: List[str]
    jwt: str
    stream_account_id: Optional[str] = None
    ws_url: Optional[str] = None
    subscriber_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> SubscribeResponse:
        validate_shape(data, DIRECTOR_SCHEMA, "subscribe response")
        return cls(
            urls=list(data["urls"]),
            jwt=data["jwt"],
            stream_account_id=data.get("streamAccountId"),
            ws_url=data.get("wsUrl"),
            subscriber_id=data.get("subscriberId"),
        )
