"""Request execution and pagination shared by every endpoint wrapper.

WHY: All endpoint modules issue the same kind of call: build a request
description, send it once, decode the JSON. List endpoints additionally
follow a continuation cursor. This package holds those two pieces so the
endpoint modules stay thin.

RULES:
- Endpoint modules never create httpx clients themselves
- No state is shared between calls (no connection pool, no cache)
"""

from dolbyio_rest_apis.core.pagination import get_all
from dolbyio_rest_apis.core.request import (
    RequestDescriptor,
    bearer_headers,
    execute,
    send_delete,
    send_get,
    send_post,
)

__all__ = [
    "RequestDescriptor",
    "bearer_headers",
    "execute",
    "get_all",
    "send_delete",
    "send_get",
    "send_post",
]
