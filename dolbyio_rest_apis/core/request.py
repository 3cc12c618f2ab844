"""Single-shot HTTP request executor.

WHY: Every endpoint wrapper needs the same round trip: send a request to
a Dolby.io host, treat non-2xx answers as failures, and hand back the
decoded JSON. Centralizing it gives one place for error mapping and
request logging.

HOW: A frozen RequestDescriptor captures method, hostname, path, query
parameters, headers, and body. execute() opens a short-lived
httpx.AsyncClient, performs exactly one request, and maps the outcome:
2xx → decoded JSON, other status → HttpError, transport failure →
NetworkError, malformed body → DecodeError.

RULES:
- Exactly one attempt per call: no retries, no backoff
- Query parameters are percent-encoded by httpx; headers are sent verbatim
- An empty 2xx body decodes to None (e.g. 204 No Content on DELETE)
- The ``transport`` argument exists so tests can swap in httpx.MockTransport
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

import httpx

from dolbyio_rest_apis.config import HTTP_CONNECT_TIMEOUT_S, HTTP_TIMEOUT_S
from dolbyio_rest_apis.errors import DecodeError, HttpError, NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one HTTP request.

    WHY: The paginated collector reuses the same request for every page,
    changing only the cursor parameter. An immutable descriptor makes that
    substitution explicit and keeps one page's request from leaking into
    the next.

    HOW: Build a fresh descriptor per call. ``with_params`` returns a copy
    with some query parameters replaced.

    RULES:
    - hostname has no scheme; requests always go over https
    - params and headers are string → string mappings
    - body, when set, is sent as the raw payload
    """

    method: str
    hostname: str
    path: str
    params: Optional[Mapping[str, str]] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @property
    def url(self) -> str:
        return f"https://{self.hostname}{self.path}"

    def with_params(self, **overrides: str) -> RequestDescriptor:
        """Return a copy with the given query parameters set."""
        params: Dict[str, str] = dict(self.params or {})
        params.update(overrides)
        return replace(self, params=params)


async def execute(
    request: RequestDescriptor,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Perform one HTTP round trip and return the decoded JSON body.

    Args:
        request: The request to send.
        transport: Optional httpx transport (tests pass httpx.MockTransport).

    Returns:
        The decoded JSON value, or None when the response body is empty.

    Raises:
        HttpError: The server answered with a status outside 200-299.
        NetworkError: The connection failed or timed out.
        DecodeError: The body is not valid JSON or its content encoding is corrupt.
    """
    timeout = httpx.Timeout(HTTP_TIMEOUT_S, connect=HTTP_CONNECT_TIMEOUT_S)
    logger.debug("%s %s params=%s", request.method, request.url, request.params)

    try:
        async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
            resp = await client.request(
                request.method,
                request.url,
                params=dict(request.params) if request.params else None,
                headers=dict(request.headers),
                content=request.body,
            )
    except httpx.DecodingError as e:
        raise DecodeError(
            f"{request.method} {request.url} returned a body that could not be decoded: {e}"
        ) from e
    except httpx.RequestError as e:
        logger.debug("%s %s failed: %s", request.method, request.url, e)
        raise NetworkError(f"{request.method} {request.url} failed: {e}") from e

    logger.debug("%s %s -> %d", request.method, request.url, resp.status_code)

    if not 200 <= resp.status_code < 300:
        raise HttpError(resp.status_code, resp.text)

    if not resp.content.strip():
        return None

    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(
            f"{request.method} {request.url} returned a body that is not JSON: {e}"
        ) from e


async def send_get(
    hostname: str,
    path: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """GET a resource and return its decoded JSON body."""
    request = RequestDescriptor("GET", hostname, path, params=params, headers=headers or {})
    return await execute(request, transport=transport)


async def send_post(
    hostname: str,
    path: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """POST ``body`` and return the decoded JSON response."""
    request = RequestDescriptor(
        "POST", hostname, path, params=params, headers=headers or {}, body=body
    )
    return await execute(request, transport=transport)


async def send_delete(
    hostname: str,
    path: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """DELETE a resource; returns the decoded body, usually None."""
    request = RequestDescriptor("DELETE", hostname, path, headers=headers or {})
    return await execute(request, transport=transport)


def bearer_headers(credential: Any) -> Dict[str, str]:
    """Headers for a JSON call authorized by an API token.

    ``credential`` is a JwtToken (anything with an ``authorization`` property).
    """
    return {
        "Accept": "application/json",
        "Authorization": credential.authorization,
    }
