"""Communications recording dataclasses and request options.

WHY: The monitor recordings endpoints return JSON objects describing
recorded conferences. Typed dataclasses make those structures explicit,
and option dataclasses with declared defaults make every list query
reproducible from its arguments alone.

HOW: Response dataclasses provide ``from_dict`` factories that validate
the decoded JSON against a schema before reading it. Option dataclasses
carry the documented defaults (``from_=0``, ``to=FAR_FUTURE_TIMESTAMP``,
page size 100); callers override individual fields by keyword.

RULES:
- JSON keys are camelCase, dataclass fields are snake_case
- ``from_`` carries a trailing underscore because ``from`` is reserved
- Fields only present on some recordings default to None
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dolbyio_rest_apis.config import DEFAULT_PAGE_SIZE, FAR_FUTURE_TIMESTAMP
from dolbyio_rest_apis.core.schema import validate_shape

_OPTIONAL_STRING = {"type": ["string", "null"]}
_OPTIONAL_NUMBER = {"type": ["number", "null"]}
_CURSOR = {"type": ["string", "number", "null"]}

RECORDING_SCHEMA = {
    "type": "object",
    "required": ["id", "confId"],
    "properties": {
        "id": {"type": "string"},
        "confId": {"type": "string"},
        "confAlias": _OPTIONAL_STRING,
        "region": _OPTIONAL_STRING,
        "mediaType": _OPTIONAL_STRING,
        "recordingType": _OPTIONAL_STRING,
        "url": _OPTIONAL_STRING,
        "startTime": _OPTIONAL_NUMBER,
        "duration": _OPTIONAL_NUMBER,
        "size": _OPTIONAL_NUMBER,
        "splits": {"type": ["array", "null"], "items": {"type": "object"}},
    },
}

CONFERENCE_SCHEMA = {
    "type": "object",
    "required": ["confId"],
    "properties": {
        "confId": {"type": "string"},
        "confAlias": _OPTIONAL_STRING,
        "region": _OPTIONAL_STRING,
        "ownerId": _OPTIONAL_STRING,
    },
}

RECORDINGS_PAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "first": _CURSOR,
        "next": _CURSOR,
        "recordings": {"type": ["array", "null"]},
        "conference": {"type": ["object", "null"]},
    },
}


def _cursor(value: Any) -> Optional[str]:
    """Cursors may be opaque strings or numeric offsets; expose them as strings."""
    return None if value is None else str(value)


@dataclass
class RecordingSplit:
    """One segment of a recording that was split into several files."""

    start_time: Optional[float] = None
    duration: Optional[float] = None
    size: Optional[float] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> RecordingSplit:
        return cls(
            start_time=data.get("startTime"),
            duration=data.get("duration"),
            size=data.get("size"),
            url=data.get("url"),
        )


@dataclass
class Recording:
    """Metadata for one recorded conference.

    RULES:
    - id and conf_id are always present
    - url is an S3 presigned URL, valid for ten minutes after the call
    - start_time is milliseconds since the epoch
    """

    id: str
    conf_id: str
    conf_alias: Optional[str] = None
    region: Optional[str] = None
    media_type: Optional[str] = None
    recording_type: Optional[str] = None
    url: Optional[str] = None
    start_time: Optional[float] = None
    duration: Optional[float] = None
    size: Optional[float] = None
    splits: List[RecordingSplit] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> Recording:
        """Parse a Recording, raising DecodeError on an unexpected shape."""
        validate_shape(data, RECORDING_SCHEMA, "recording")
        return cls(
            id=data["id"],
            conf_id=data["confId"],
            conf_alias=data.get("confAlias"),
            region=data.get("region"),
            media_type=data.get("mediaType"),
            recording_type=data.get("recordingType"),
            url=data.get("url"),
            start_time=data.get("startTime"),
            duration=data.get("duration"),
            size=data.get("size"),
            splits=[RecordingSplit.from_dict(s) for s in data.get("splits") or []],
        )


@dataclass
class Conference:
    conf_id: str
    conf_alias: Optional[str] = None
    region: Optional[str] = None
    owner_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> Conference:
        validate_shape(data, CONFERENCE_SCHEMA, "conference")
        return cls(
            conf_id=data["confId"],
            conf_alias=data.get("confAlias"),
            region=data.get("region"),
            owner_id=data.get("ownerId"),
        )


@dataclass
class GetRecordingsResponse:
    """One page from GET /v2/monitor/recordings.

    RULES:
    - next is None on the last page
    - recordings is empty (never None) when the page has no items
    """

    recordings: List[Recording]
    first: Optional[str] = None
    next: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> GetRecordingsResponse:
        validate_shape(data, RECORDINGS_PAGE_SCHEMA, "recordings page")
        return cls(
            recordings=[Recording.from_dict(r) for r in data.get("recordings") or []],
            first=_cursor(data.get("first")),
            next=_cursor(data.get("next")),
        )


@dataclass
class GetConferenceRecordingsResponse:
    """One page from GET /v2/monitor/conferences/{confId}/recordings."""

    recordings: List[Recording]
    conference: Optional[Conference] = None
    first: Optional[str] = None
    next: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> GetConferenceRecordingsResponse:
        validate_shape(data, RECORDINGS_PAGE_SCHEMA, "conference recordings page")
        conference = data.get("conference")
        return cls(
            recordings=[Recording.from_dict(r) for r in data.get("recordings") or []],
            conference=Conference.from_dict(conference) if conference else None,
            first=_cursor(data.get("first")),
            next=_cursor(data.get("next")),
        )


# ---------------------------------------------------------------------------
# Request options
# ---------------------------------------------------------------------------


@dataclass
class GetAllRecordingsOptions:
    """Filters for fetching every recording that ended in a time range.

    RULES:
    - from_/to are epoch milliseconds; the range matches on recording end time
    - page_size is sent as the ``max`` query parameter of each page
    - region, type, and media_type are only sent when set
    """

    from_: int = 0
    to: int = FAR_FUTURE_TIMESTAMP
    page_size: int = DEFAULT_PAGE_SIZE
    region: Optional[str] = None
    type: Optional[str] = None
    media_type: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        params = {
            "from": str(self.from_),
            "to": str(self.to),
            "max": str(self.page_size),
        }
        if self.region:
            params["region"] = self.region
        if self.type:
            params["type"] = self.type
        if self.media_type:
            params["mediaType"] = self.media_type
        return params


@dataclass
class GetRecordingsOptions:
    """Filters for a single page of recordings.

    RULES:
    - start is the cursor returned as ``next`` by the previous page
    """

    from_: int = 0
    to: int = FAR_FUTURE_TIMESTAMP
    max: int = DEFAULT_PAGE_SIZE
    start: Optional[str] = None
    region: Optional[str] = None
    type: Optional[str] = None
    media_type: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        params = GetAllRecordingsOptions(
            from_=self.from_,
            to=self.to,
            page_size=self.max,
            region=self.region,
            type=self.type,
            media_type=self.media_type,
        ).to_params()
        if self.start:
            params["start"] = self.start
        return params


@dataclass
class GetAllConferenceRecordingsOptions:
    """Filters for every recording of one conference."""

    conf_id: str
    from_: int = 0
    to: int = FAR_FUTURE_TIMESTAMP
    page_size: int = DEFAULT_PAGE_SIZE

    def to_params(self) -> Dict[str, str]:
        return {
            "from": str(self.from_),
            "to": str(self.to),
            "max": str(self.page_size),
        }


@dataclass
class GetConferenceRecordingsOptions:
    """Filters for a single page of one conference's recordings."""

    conf_id: str
    from_: int = 0
    to: int = FAR_FUTURE_TIMESTAMP
    max: int = DEFAULT_PAGE_SIZE
    start: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        params = {
            "from": str(self.from_),
            "to": str(self.to),
            "max": str(self.max),
        }
        if self.start:
            params["start"] = self.start
        return params
