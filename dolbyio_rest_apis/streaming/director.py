"""Real-time streaming director: publish and subscribe negotiation.

WHY: Before opening a WebRTC connection, a publisher or viewer asks the
director which cluster to use and receives a connection JWT.

HOW: POSTs a JSON body naming the stream, unwraps the director's
``{"status", "data"}`` envelope, and types the result.

RULES:
- publish always needs a publishing token
- subscribe sends ``Authorization: NoAuth`` when no token is given;
  streamAccountId is then required by the server
"""

from __future__ import annotations

import json
from typing import Dict, Optional

import httpx

from dolbyio_rest_apis.config import get_rts_director_hostname
from dolbyio_rest_apis.core.request import send_post
from dolbyio_rest_apis.streaming.models import (
    PublishResponse,
    SubscribeResponse,
    unwrap_envelope,
)


def _headers(authorization: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": authorization,
    }


async def publish(
    publishing_token: str,
    stream_name: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PublishResponse:
    """Request the URLs and JWT needed to publish a stream.

    Args:
        publishing_token: The publishing token.
        stream_name: Name of the stream.
        transport: Optional httpx transport (tests).
    """
    body = await send_post(
        get_rts_director_hostname(),
        "/api/director/publish",
        headers=_headers(f"Bearer {publishing_token}"),
        body=json.dumps({"streamName": stream_name}),
        transport=transport,
    )
    return PublishResponse.from_dict(unwrap_envelope(body))


async def subscribe(
    stream_name: str,
    stream_account_id: Optional[str] = None,
    subscribe_token: Optional[str] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SubscribeResponse:
    """Request the URLs and JWT needed to view a stream.

    Args:
        stream_name: Name of the stream.
        stream_account_id: Account identifier. Required when the stream
            does not require subscriber authentication.
        subscribe_token: Optional subscribe token.
        transport: Optional httpx transport (tests).
    """
    payload = {"streamName": stream_name}
    if stream_account_id:
        payload["streamAccountId"] = stream_account_id

    authorization = f"Bearer {subscribe_token}" if subscribe_token else "NoAuth"
    body = await send_post(
        get_rts_director_hostname(),
        "/api/director/subscribe",
        headers=_headers(authorization),
        body=json.dumps(payload),
        transport=transport,
    )
    return SubscribeResponse.from_dict(unwrap_envelope(body))
