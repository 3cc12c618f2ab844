"""API token acquisition.

WHY: Every Communications and Media API call needs a JWT API token. The
token is obtained by exchanging the app key and secret once; callers then
pass the returned JwtToken to the endpoint functions.

HOW: POSTs a client-credentials grant to /v1/auth/token with HTTP Basic
authentication built from ``app_key:app_secret``.

RULES:
- expires_in (seconds) is only sent when given
- The token is never cached or refreshed here
"""

from __future__ import annotations

import base64
import logging
from typing import Optional

import httpx

from dolbyio_rest_apis.config import get_auth_hostname
from dolbyio_rest_apis.core.request import send_post
from dolbyio_rest_apis.models import JwtToken

logger = logging.getLogger(__name__)


async def get_api_access_token(
    app_key: str,
    app_secret: str,
    expires_in: Optional[int] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JwtToken:
    """Generate an API token.

    Args:
        app_key: Your Dolby.io app key.
        app_secret: Your Dolby.io app secret.
        expires_in: Optional token lifetime in seconds.
        transport: Optional httpx transport (tests).

    Returns:
        The JwtToken to pass to other API calls.
    """
    body = "grant_type=client_credentials"
    if expires_in:
        body += f"&expires_in={expires_in}"

    authz = base64.b64encode(f"{app_key}:{app_secret}".encode("utf-8")).decode("ascii")

    data = await send_post(
        get_auth_hostname(),
        "/v1/auth/token",
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Cache-Control": "no-cache",
            "Authorization": f"Basic {authz}",
        },
        body=body,
        transport=transport,
    )
    token = JwtToken.from_dict(data)
    logger.debug("Acquired %s API token (expires_in=%s)", token.token_type, token.expires_in)
    return token
