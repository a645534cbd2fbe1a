#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1]
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from googleapiclient.errors import HttpError

from yt_revenue.analytics import build_demographics_query, build_top_videos_query, run_query
from yt_revenue.auth import build_services, get_credentials
from yt_revenue.config import CLIENT_SECRETS_FILE, SCOPES, TOKEN_FILE
from yt_revenue.models import DateRange
from yt_revenue.render import format_console_table
from yt_revenue.youtube import ChannelNotFoundError, get_main_channel


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the most viewed videos and the viewer demographics of the authenticated channel."
    )
    parser.add_argument("--year", type=int, default=date.today().year, help="Calendar year. Defaults to this year.")
    parser.add_argument("--top", type=int, default=10, help="Number of top videos to list. Defaults to 10.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    date_range = DateRange(start=f"{args.year}-01-01", end=f"{args.year}-12-31")

    credentials = get_credentials(CLIENT_SECRETS_FILE, TOKEN_FILE, SCOPES)
    services = build_services(credentials)

    try:
        channel = get_main_channel(services.youtube)
        print(f"Channel: {channel.title} ( {channel.id} ), {date_range.start} → {date_range.end}\n")
        top_videos = run_query(services.analytics, build_top_videos_query(channel.id, date_range, args.top))
        demographics = run_query(services.analytics, build_demographics_query(channel.id, date_range))
    except HttpError as error:
        print(f"Request failed: {error}", file=sys.stderr)
        return 1
    except ChannelNotFoundError as error:
        print(error, file=sys.stderr)
        return 1

    print("Top videos")
    print(format_console_table(top_videos))
    print("Demographics")
    print(format_console_table(demographics))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
