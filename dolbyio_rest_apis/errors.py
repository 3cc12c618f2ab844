"""Exception types raised by the SDK.

WHY: Callers need typed exceptions to tell a rejected request apart from
a broken connection or a response they cannot use.

HOW: Every failure derives from DolbyioError. The request executor raises
HttpError, NetworkError, and DecodeError; the paginated collector raises
PaginationLimitError only when the caller asked for a page ceiling.

RULES:
- Errors propagate unchanged to the caller (no retry, no translation)
- Transport exceptions are chained with ``raise ... from``
"""

from __future__ import annotations


class DolbyioError(Exception):
    """Base class for all SDK failures."""


class HttpError(DolbyioError):
    """Raised when the server responds with a non-2xx status.

    RULES:
    - Always carries status_code and the raw response body
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class NetworkError(DolbyioError):
    """Raised when the connection cannot be established or times out."""


class DecodeError(DolbyioError, ValueError):
    """Raised when a response body is not JSON or has an unexpected shape."""


class PaginationLimitError(DolbyioError):
    """Raised when a list endpoint is still paging after ``max_pages`` pages."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        super().__init__(
            f"Server still returned a continuation cursor after {max_pages} pages"
        )
