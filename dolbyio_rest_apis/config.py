"""Hostnames, request defaults, and .env loading.

WHY: Every endpoint wrapper needs to know which host to call and which
defaults to apply to list queries. Keeping these values in one module
makes them easy to find and lets the environment redirect the SDK (for
example to a staging host) without code changes.

HOW: python-dotenv loads the .env file on import. Hostnames are resolved
through small getter functions at call time, so a changed environment
variable takes effect on the next request. Numeric defaults are plain
module-level constants.

RULES:
- Hostnames never include a scheme or trailing slash
- All defaults can be overridden via environment variables
- App credentials are loaded from the environment, never hardcoded
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Hostnames
# ---------------------------------------------------------------------------

DEFAULT_AUTH_HOSTNAME = "api.dolby.io"
DEFAULT_COMMS_HOSTNAME = "comms.api.dolby.io"
DEFAULT_RTS_DIRECTOR_HOSTNAME = "director.millicast.com"


def get_auth_hostname() -> str:
    """Hostname serving the API token endpoint."""
    return os.getenv("DOLBYIO_AUTH_HOSTNAME", DEFAULT_AUTH_HOSTNAME)


def get_comms_hostname() -> str:
    """Hostname serving the Communications REST APIs."""
    return os.getenv("DOLBYIO_COMMS_HOSTNAME", DEFAULT_COMMS_HOSTNAME)


def get_rts_director_hostname() -> str:
    """Hostname serving the real-time streaming director."""
    return os.getenv("DOLBYIO_RTS_DIRECTOR_HOSTNAME", DEFAULT_RTS_DIRECTOR_HOSTNAME)


# ---------------------------------------------------------------------------
# Request defaults
# ---------------------------------------------------------------------------

FAR_FUTURE_TIMESTAMP = 9999999999999
"""Upper bound used by time-range queries when the caller gives no ``to``."""

DEFAULT_PAGE_SIZE = 100

HTTP_TIMEOUT_S = float(os.getenv("DOLBYIO_HTTP_TIMEOUT", "30"))
HTTP_CONNECT_TIMEOUT_S = 10.0


def load_app_credentials() -> tuple[str, str]:
    """Load the Dolby.io app key and secret from the environment.

    WHY: The command-line tool exchanges the app key/secret for an API
    token before every call. Reading them from the environment (via .env)
    keeps them out of shell history and source code.

    HOW: Reads DOLBYIO_APP_KEY and DOLBYIO_APP_SECRET from os.environ.

    RULES:
    - Raises ValueError if either value is missing or empty
    - Never returns a default/placeholder value
    """
    app_key = os.getenv("DOLBYIO_APP_KEY", "").strip()
    app_secret = os.getenv("DOLBYIO_APP_SECRET", "").strip()
    if not app_key or not app_secret:
        raise ValueError(
            "Dolby.io app credentials not configured. "
            "Add DOLBYIO_APP_KEY and DOLBYIO_APP_SECRET to the .env file."
        )
    return app_key, app_secret
