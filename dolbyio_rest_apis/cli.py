"""Command-line interface for the Dolby.io REST APIs.

WHY: Operators want to fetch a token, inspect or purge recordings, and
test stream negotiation without writing a script.

HOW: argparse subcommands map 1:1 to SDK functions. Each command runs its
coroutine via asyncio.run(). App credentials come from the environment
(.env); commands that need an API token acquire one first. Results are
printed as JSON on stdout, status and errors on stderr.

RULES:
- Status and error output goes to stderr (stdout stays pipeable)
- DolbyioError and ValueError exit with status 1
- -v/--verbose turns on DEBUG logging (one line per HTTP request)
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Any, List, Optional

from dolbyio_rest_apis.authentication import get_api_access_token
from dolbyio_rest_apis.communications import recordings
from dolbyio_rest_apis.communications.models import (
    GetAllConferenceRecordingsOptions,
    GetAllRecordingsOptions,
    GetConferenceRecordingsOptions,
    GetRecordingsOptions,
)
from dolbyio_rest_apis.config import (
    DEFAULT_PAGE_SIZE,
    FAR_FUTURE_TIMESTAMP,
    load_app_credentials,
)
from dolbyio_rest_apis.errors import DolbyioError
from dolbyio_rest_apis.models import JwtToken
from dolbyio_rest_apis.streaming import director


def _status(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def _emit(result: Any) -> None:
    """Print a dataclass (or list of them) as JSON on stdout."""
    if isinstance(result, list):
        payload = [dataclasses.asdict(item) for item in result]
    else:
        payload = dataclasses.asdict(result)
    print(json.dumps(payload, indent=2))


async def _token(expires_in: Optional[int] = None) -> JwtToken:
    app_key, app_secret = load_app_credentials()
    return await get_api_access_token(app_key, app_secret, expires_in)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def _cmd_token(args: argparse.Namespace) -> Any:
    return await _token(args.expires_in)


async def _cmd_recordings_list(args: argparse.Namespace) -> Any:
    token = await _token()

    if args.conf_id and args.all:
        return await recordings.get_all_conference_recordings(
            token,
            GetAllConferenceRecordingsOptions(
                conf_id=args.conf_id, from_=args.from_, to=args.to, page_size=args.max,
            ),
            max_pages=args.max_pages,
        )
    if args.conf_id:
        return await recordings.get_conference_recordings(
            token,
            GetConferenceRecordingsOptions(
                conf_id=args.conf_id, from_=args.from_, to=args.to, max=args.max,
                start=args.start,
            ),
        )
    if args.all:
        return await recordings.get_all_recordings(
            token,
            GetAllRecordingsOptions(
                from_=args.from_, to=args.to, page_size=args.max,
                region=args.region, type=args.type, media_type=args.media_type,
            ),
            max_pages=args.max_pages,
        )
    return await recordings.get_recordings(
        token,
        GetRecordingsOptions(
            from_=args.from_, to=args.to, max=args.max, start=args.start,
            region=args.region, type=args.type, media_type=args.media_type,
        ),
    )


async def _cmd_recordings_delete(args: argparse.Namespace) -> Any:
    token = await _token()
    await recordings.delete_recording(token, args.conf_id)
    _status("Deleted recordings for conference {}".format(args.conf_id))
    return None


async def _cmd_publish(args: argparse.Namespace) -> Any:
    return await director.publish(args.token, args.stream_name)


async def _cmd_subscribe(args: argparse.Namespace) -> Any:
    return await director.subscribe(args.stream_name, args.account_id, args.token)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _check_list_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject ``recordings list`` flags that the chosen endpoint cannot honour.

    RULES:
    - --start addresses one page, so it conflicts with --all
    - --max-pages only applies to --all
    - Conference recordings accept no region/type/media-type filters
    """
    if args.all and args.start:
        parser.error("--start cannot be combined with --all")
    if args.max_pages is not None and not args.all:
        parser.error("--max-pages requires --all")
    if args.conf_id:
        given = [
            flag for flag, value in (
                ("--region", args.region),
                ("--type", args.type),
                ("--media-type", args.media_type),
            ) if value
        ]
        if given:
            parser.error("{} cannot be combined with --conf-id".format(", ".join(given)))


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dolbyio",
        description="Call the Dolby.io REST APIs from the terminal. App key and "
                    "secret are read from DOLBYIO_APP_KEY / DOLBYIO_APP_SECRET.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every HTTP request to stderr.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    token = commands.add_parser("token", help="Generate an API token.")
    token.add_argument("--expires-in", type=int, default=None,
                       help="Token lifetime in seconds.")
    token.set_defaults(handler=_cmd_token)

    recs = commands.add_parser("recordings", help="List or delete conference recordings.")
    recs_commands = recs.add_subparsers(dest="recordings_command", required=True)

    rec_list = recs_commands.add_parser("list", help="List recordings.")
    rec_list.add_argument("--conf-id", default=None,
                          help="Only list recordings of this conference.")
    rec_list.add_argument("--all", action="store_true",
                          help="Follow pagination and return every recording.")
    rec_list.add_argument("--from", dest="from_", type=int, default=0,
                          help="Range start, epoch milliseconds (default: %(default)s).")
    rec_list.add_argument("--to", type=int, default=FAR_FUTURE_TIMESTAMP,
                          help="Range end, epoch milliseconds.")
    rec_list.add_argument("--max", type=int, default=DEFAULT_PAGE_SIZE,
                          help="Recordings per page (default: %(default)s).")
    rec_list.add_argument("--start", default=None,
                          help="Cursor from a previous page's 'next' value (not with --all).")
    rec_list.add_argument("--max-pages", type=int, default=None,
                          help="With --all, fail instead of fetching more than this many pages.")
    rec_list.add_argument("--region", default=None,
                          help="Region filter (not with --conf-id).")
    rec_list.add_argument("--type", default=None,
                          help="Recording type filter (not with --conf-id).")
    rec_list.add_argument("--media-type", default=None,
                          help="Media type filter (not with --conf-id).")
    rec_list.set_defaults(handler=_cmd_recordings_list)

    rec_delete = recs_commands.add_parser("delete", help="Delete a conference's recordings.")
    rec_delete.add_argument("conf_id", help="Conference identifier.")
    rec_delete.set_defaults(handler=_cmd_recordings_delete)

    pub = commands.add_parser("publish", help="Negotiate publishing a stream.")
    pub.add_argument("stream_name")
    pub.add_argument("--token", required=True, help="Publishing token.")
    pub.set_defaults(handler=_cmd_publish)

    sub = commands.add_parser("subscribe", help="Negotiate viewing a stream.")
    sub.add_argument("stream_name")
    sub.add_argument("--account-id", default=None, help="Stream account identifier.")
    sub.add_argument("--token", default=None, help="Subscribe token.")
    sub.set_defaults(handler=_cmd_subscribe)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``dolbyio`` and ``python -m dolbyio_rest_apis``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "recordings" and args.recordings_command == "list":
        _check_list_args(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        result = asyncio.run(args.handler(args))
    except (DolbyioError, ValueError) as e:
        _status("Error: {}".format(e))
        return 1

    if result is not None:
        _emit(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
