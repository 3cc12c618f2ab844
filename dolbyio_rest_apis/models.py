"""API token model shared by all Dolby.io REST APIs.

WHY: Every authenticated call carries an ``Authorization`` header built
from the token type and access token returned by the token endpoint.

HOW: JwtToken maps the token endpoint's JSON 1:1. The ``authorization``
property renders the header value.

RULES:
- token_type and access_token are required
- The SDK never refreshes or persists a token; callers own its lifetime
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dolbyio_rest_apis.core.schema import validate_shape

JWT_TOKEN_SCHEMA = {
    "type": "object",
    "required": ["token_type", "access_token"],
    "properties": {
        "token_type": {"type": "string"},
        "access_token": {"type": "string"},
        "refresh_token": {"type": ["string", "null"]},
        "scope": {"type": ["string", "null"]},
        "expires_in": {"type": ["integer", "null"]},
    },
}


@dataclass
class JwtToken:
    """A JWT API token (the bearer credential)."""

    token_type: str
    access_token: str
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None

    @property
    def authorization(self) -> str:
        return f"{self.token_type} {self.access_token}"

    @classmethod
    def from_dict(cls, data: dict) -> JwtToken:
        validate_shape(data, JWT_TOKEN_SCHEMA, "API token")
        return cls(
            token_type=data["token_type"],
            access_token=data["access_token"],
            expires_in=data.get("expires_in"),
            refresh_token=data.get("refresh_token"),
            scope=data.get("scope"),
        )
