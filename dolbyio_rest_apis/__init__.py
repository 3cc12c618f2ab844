"""Dolby.io REST APIs client SDK.

WHY: Applications talk to three Dolby.io API families (authentication,
Communications, real-time streaming) over plain JSON REST. This package
wraps each endpoint in an async function that returns typed results.

HOW: Endpoint modules build a request description and hand it to the
shared executor in ``core``; list endpoints go through the paginated
collector. Failures surface as DolbyioError subclasses.

RULES:
- All network calls are async (await them, or use asyncio.run)
- No state is kept between calls; callers own the API token
"""

from dolbyio_rest_apis import authentication, communications, streaming
from dolbyio_rest_apis.errors import (
    DecodeError,
    DolbyioError,
    HttpError,
    NetworkError,
    PaginationLimitError,
)
from dolbyio_rest_apis.models import JwtToken

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DolbyioError",
    "HttpError",
    "JwtToken",
    "NetworkError",
    "PaginationLimitError",
    "authentication",
    "communications",
    "streaming",
]
