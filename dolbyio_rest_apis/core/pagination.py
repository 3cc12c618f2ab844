"""Paginated collector for cursor-based list endpoints.

WHY: Communications list endpoints (recordings, conference recordings)
return at most ``max`` items per response plus a ``next`` cursor. Callers
of the "get all" wrappers want one flat list and should not have to drive
the page-by-page protocol themselves.

HOW: Sends the template request, reads the named array field, appends
its elements, then looks for a continuation cursor in the response. When
a non-empty cursor is present, the cursor value is substituted into the
query string and the next page is requested. Pages are fetched strictly
one after another because each request depends on the previous cursor.

RULES:
- Output order = page order, then within-page order; no deduplication
- A page without the array field contributes nothing and ends the loop
- An array field that is not a list is a DecodeError
- Any failure on any page aborts the whole call; partial results are dropped
- No page ceiling by default: the loop ends when the server stops sending
  a cursor. ``max_pages`` opts into a ceiling (PaginationLimitError)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

import httpx

from dolbyio_rest_apis.core.request import RequestDescriptor, execute
from dolbyio_rest_apis.errors import DecodeError, PaginationLimitError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def get_all(
    request: RequestDescriptor,
    property_name: str,
    *,
    parse: Optional[Callable[[Any], T]] = None,
    cursor_param: str = "start",
    cursor_field: str = "next",
    max_pages: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[T]:
    """Fetch every page of a list endpoint and return the items in order.

    Args:
        request: Template request for the first page. Later pages reuse it
            with ``cursor_param`` set to the previous page's cursor.
        property_name: Name of the array field holding each page's items.
        parse: Optional converter applied to every raw item
            (e.g. ``Recording.from_dict``). Items are returned as-is if None.
        cursor_param: Query parameter that carries the cursor.
        cursor_field: Response field holding the next page's cursor.
        max_pages: Optional ceiling on the number of pages fetched.
        transport: Optional httpx transport forwarded to the executor.

    Returns:
        All items from all pages, page by page.

    Raises:
        HttpError, NetworkError, DecodeError: From any page; nothing is
            returned for the pages already fetched.
        PaginationLimitError: ``max_pages`` pages were fetched and the
            server still returned a cursor.
    """
    if max_pages is not None and max_pages < 1:
        raise ValueError("max_pages must be a positive integer")

    results: List[T] = []
    page = request
    page_number = 0

    while True:
        page_number += 1
        envelope = await execute(page, transport=transport)

        if not isinstance(envelope, dict) or envelope.get(property_name) is None:
            logger.debug(
                "%s page %d has no '%s' field, stopping",
                request.path, page_number, property_name,
            )
            break

        items = envelope[property_name]
        if not isinstance(items, list):
            raise DecodeError(
                f"Field '{property_name}' on {request.path} is "
                f"{type(items).__name__}, expected a list"
            )

        if parse is None:
            results.extend(items)
        else:
            results.extend(parse(item) for item in items)

        logger.debug(
            "%s page %d: %d items (%d total)",
            request.path, page_number, len(items), len(results),
        )

        cursor = envelope.get(cursor_field)
        if cursor is None or cursor == "":
            break

        if max_pages is not None and page_number >= max_pages:
            raise PaginationLimitError(max_pages)

        page = request.with_params(**{cursor_param: str(cursor)})

    return results
