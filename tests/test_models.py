"""Tests for response dataclasses and option defaults.

WHY: Models validate decoded JSON before reading it, so a changed server
payload surfaces as a DecodeError naming the field instead of a KeyError
somewhere downstream. Option dataclasses carry the documented defaults.
"""

from __future__ import annotations

import pytest

from dolbyio_rest_apis.communications.models import (
    GetAllConferenceRecordingsOptions,
    GetAllRecordingsOptions,
    GetConferenceRecordingsOptions,
    GetRecordingsOptions,
    GetRecordingsResponse,
    Recording,
)
from dolbyio_rest_apis.errors import DecodeError
from dolbyio_rest_apis.models import JwtToken


class TestJwtToken:
    def test_from_dict(self):
        token = JwtToken.from_dict({
            "token_type": "Bearer",
            "access_token": "xyz",
            "expires_in": 1800,
            "scope": "comms:*",
        })
        assert token.access_token == "xyz"
        assert token.expires_in == 1800
        assert token.scope == "comms:*"
        assert token.refresh_token is None

    def test_authorization(self):
        assert JwtToken("Bearer", "xyz").authorization == "Bearer xyz"

    def test_missing_access_token(self):
        with pytest.raises(DecodeError, match="access_token"):
            JwtToken.from_dict({"token_type": "Bearer"})

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            JwtToken.from_dict(["Bearer", "xyz"])


class TestRecording:
    def test_from_dict(self, make_recording):
        rec = Recording.from_dict(make_recording(
            "r1",
            recordingType="mix",
            splits=[{"startTime": 1, "duration": 2.5, "size": 300, "url": "https://s3/1"}],
        ))
        assert rec.id == "r1"
        assert rec.conf_id == "conf-1"
        assert rec.conf_alias == "standup"
        assert rec.media_type == "audio/mpeg"
        assert rec.recording_type == "mix"
        assert rec.start_time == 1700000000000
        assert rec.splits[0].duration == 2.5
        assert rec.splits[0].url == "https://s3/1"

    def test_optional_fields_default(self):
        rec = Recording.from_dict({"id": "r1", "confId": "c1"})
        assert rec.region is None
        assert rec.url is None
        assert rec.splits == []

    def test_wrong_type_reports_location(self, make_recording):
        with pytest.raises(DecodeError, match="duration"):
            Recording.from_dict(make_recording("r1", duration="long"))


class TestRecordingsPage:
    def test_missing_recordings_is_empty(self):
        page = GetRecordingsResponse.from_dict({"next": None})
        assert page.recordings == []

    def test_numeric_cursors_become_strings(self):
        page = GetRecordingsResponse.from_dict({"recordings": [], "first": 0, "next": 100})
        assert page.first == "0"
        assert page.next == "100"

    def test_recordings_must_be_a_list(self):
        with pytest.raises(DecodeError):
            GetRecordingsResponse.from_dict({"recordings": "nope"})


class TestOptions:
    def test_get_recordings_defaults(self):
        assert GetRecordingsOptions().to_params() == {
            "from": "0", "to": "9999999999999", "max": "100",
        }

    def test_get_all_recordings_defaults(self):
        assert GetAllRecordingsOptions().to_params() == {
            "from": "0", "to": "9999999999999", "max": "100",
        }

    def test_field_override_keeps_other_defaults(self):
        params = GetAllRecordingsOptions(to=500).to_params()
        assert params == {"from": "0", "to": "500", "max": "100"}

    def test_conference_options_require_conf_id(self):
        with pytest.raises(TypeError):
            GetConferenceRecordingsOptions()
        with pytest.raises(TypeError):
            GetAllConferenceRecordingsOptions()

    def test_conference_options_do_not_send_conf_id(self):
        params = GetConferenceRecordingsOptions(conf_id="c1").to_params()
        assert "confId" not in params
        assert "conf_id" not in params
