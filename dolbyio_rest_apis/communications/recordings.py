"""Communications monitor API: conference recordings.

WHY: Applications list recorded conferences to download them (through
short-lived presigned URLs) and delete them once archived elsewhere.

HOW: Each function turns an options dataclass into a RequestDescriptor
and hands it to the request executor (single page) or the paginated
collector (every page). Responses are validated and typed before return.

RULES:
- Time ranges match on the recording's end time
- "get_all_*" functions follow the ``next`` cursor through the ``start``
  query parameter until the server stops returning one
- delete_recording cannot be undone
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx

from dolbyio_rest_apis.config import get_comms_hostname
from dolbyio_rest_apis.communications.models import (
    GetAllConferenceRecordingsOptions,
    GetAllRecordingsOptions,
    GetConferenceRecordingsOptions,
    GetConferenceRecordingsResponse,
    GetRecordingsOptions,
    GetRecordingsResponse,
    Recording,
)
from dolbyio_rest_apis.core.pagination import get_all
from dolbyio_rest_apis.core.request import (
    RequestDescriptor,
    bearer_headers,
    send_delete,
    send_get,
)
from dolbyio_rest_apis.models import JwtToken

logger = logging.getLogger(__name__)

_RECORDINGS_PATH = "/v2/monitor/recordings"


def _conference_recordings_path(conf_id: str) -> str:
    return f"/v2/monitor/conferences/{quote(conf_id, safe='')}/recordings"


async def get_recordings(
    access_token: JwtToken,
    options: Optional[GetRecordingsOptions] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GetRecordingsResponse:
    """Get one page of recorded conference metadata.

    Pass the returned ``next`` value as ``options.start`` to read the
    following page, or use get_all_recordings to read them all.

    Args:
        access_token: API token from get_api_access_token().
        options: Time range, page size, cursor, and filters.
        transport: Optional httpx transport (tests).

    Returns:
        The page, with its recordings and continuation cursor.
    """
    opts = options or GetRecordingsOptions()
    data = await send_get(
        get_comms_hostname(),
        _RECORDINGS_PATH,
        params=opts.to_params(),
        headers=bearer_headers(access_token),
        transport=transport,
    )
    return GetRecordingsResponse.from_dict(data)


async def get_all_recordings(
    access_token: JwtToken,
    options: Optional[GetAllRecordingsOptions] = None,
    *,
    max_pages: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Recording]:
    """Get every recording that ended in the requested time range.

    Args:
        access_token: API token from get_api_access_token().
        options: Time range, page size, and filters.
        max_pages: Optional ceiling on the number of pages requested.
        transport: Optional httpx transport (tests).

    Returns:
        All recordings, in the order the server paged them.
    """
    opts = options or GetAllRecordingsOptions()
    request = RequestDescriptor(
        "GET",
        get_comms_hostname(),
        _RECORDINGS_PATH,
        params=opts.to_params(),
        headers=bearer_headers(access_token),
    )
    recordings = await get_all(
        request,
        "recordings",
        parse=Recording.from_dict,
        max_pages=max_pages,
        transport=transport,
    )
    logger.info("Fetched %d recordings", len(recordings))
    return recordings


async def get_conference_recordings(
    access_token: JwtToken,
    options: GetConferenceRecordingsOptions,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GetConferenceRecordingsResponse:
    """Get one page of recordings for a specific conference."""
    data = await send_get(
        get_comms_hostname(),
        _conference_recordings_path(options.conf_id),
        params=options.to_params(),
        headers=bearer_headers(access_token),
        transport=transport,
    )
    return GetConferenceRecordingsResponse.from_dict(data)


async def get_all_conference_recordings(
    access_token: JwtToken,
    options: GetAllConferenceRecordingsOptions,
    *,
    max_pages: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Recording]:
    """Get every recording of a specific conference."""
    request = RequestDescriptor(
        "GET",
        get_comms_hostname(),
        _conference_recordings_path(options.conf_id),
        params=options.to_params(),
        headers=bearer_headers(access_token),
    )
    recordings = await get_all(
        request,
        "recordings",
        parse=Recording.from_dict,
        max_pages=max_pages,
        transport=transport,
    )
    logger.info("Fetched %d recordings for conference %s", len(recordings), options.conf_id)
    return recordings


async def delete_recording(
    access_token: JwtToken,
    conf_id: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Delete all recording data of a conference.

    This also removes data downloaded through the v1 monitor API. Deleted
    recordings cannot be restored.
    """
    await send_delete(
        get_comms_hostname(),
        _conference_recordings_path(conf_id),
        headers=bearer_headers(access_token),
        transport=transport,
    )
    logger.info("Deleted recordings for conference %s", conf_id)
