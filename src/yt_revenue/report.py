from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from googleapiclient.errors import HttpError
from tqdm.auto import tqdm

from yt_revenue.analytics import fetch_revenue_report
from yt_revenue.auth import build_services, get_credentials
from yt_revenue.config import (
    CLIENT_SECRETS_FILE,
    CURRENCY,
    DATA_DIR,
    FIRST_REPORT_YEAR,
    REPORT_FILE_PREFIX,
    SCOPES,
    TOKEN_FILE,
)
from yt_revenue.models import Playlist, Report, report_years
from yt_revenue.render import format_console_table, write_csv_block
from yt_revenue.youtube import ChannelNotFoundError, get_main_channel, list_playlists, list_video_ids, sort_playlists


@dataclass(frozen=True)
class PlaylistReport:
    playlist: Playlist
    video_count: int
    report: Report


@dataclass
class YearReport:
    year: int
    path: Path
    entries: list[PlaylistReport] = field(default_factory=list)
    skipped: list[Playlist] = field(default_factory=list)


def report_path(output_dir: Path, year: int) -> Path:
    return output_dir / f"{REPORT_FILE_PREFIX}{year}.csv"


def describe_playlist(playlist: Playlist, video_count: int) -> str:
    return f"playlist: {playlist.title}, videos: {video_count}"


def write_year_report(
    youtube_service: Any,
    analytics_service: Any,
    year: int,
    output_path: Path,
    currency: str = CURRENCY,
) -> YearReport:
    summary = YearReport(year=year, path=output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        channel = get_main_channel(youtube_service)
        print(f"Default Channel: {channel.title} ( {channel.id} )\n")

        playlists = sort_playlists(list_playlists(youtube_service, channel.id))
        for playlist in tqdm(playlists, desc=str(year), unit="playlist", leave=False):
            video_ids = list_video_ids(youtube_service, playlist.id)
            playlist_info = describe_playlist(playlist, len(video_ids))
            tqdm.write(playlist_info)
            if not video_ids:
                tqdm.write(f"ignoring empty playlist: {playlist_info}")
                summary.skipped.append(playlist)
                continue
            report = fetch_revenue_report(analytics_service, channel.id, video_ids, year, currency)
            tqdm.write(format_console_table(report))
            write_csv_block(handle, playlist_info, report, currency)
            summary.entries.append(PlaylistReport(playlist=playlist, video_count=len(video_ids), report=report))
    return summary


def run(
    youtube_service: Any,
    analytics_service: Any,
    years: Sequence[int],
    output_dir: Path = DATA_DIR,
    currency: str = CURRENCY,
) -> list[YearReport]:
    summaries: list[YearReport] = []
    for year in years:
        output_path = report_path(output_dir, year)
        summary = write_year_report(youtube_service, analytics_service, year, output_path, currency)
        print(f"Saved {len(summary.entries)} playlist reports to {output_path}")
        summaries.append(summary)
    return summaries


def main() -> int:
    credentials = get_credentials(CLIENT_SECRETS_FILE, TOKEN_FILE, SCOPES)
    services = build_services(credentials)

    years = report_years(FIRST_REPORT_YEAR)
    print(f"Requesting {CURRENCY} revenue for {years[0]} → {years[-1]}")
    try:
        run(services.youtube, services.analytics, years)
    except HttpError as error:
        print(f"Request failed: {error}", file=sys.stderr)
        return 1
    except ChannelNotFoundError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
