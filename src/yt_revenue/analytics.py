from __future__ import annotations

from typing import Any, Sequence

from yt_revenue.config import REVENUE_METRIC
from yt_revenue.models import DateRange, Report


def channel_scope(channel_id: str) -> str:
    return f"channel=={channel_id}"


def build_revenue_query(channel_id: str, video_ids: Sequence[str], year: int, currency: str) -> dict[str, Any]:
    date_range = DateRange.for_year(year)
    return {
        "ids": channel_scope(channel_id),
        "metrics": REVENUE_METRIC,
        "currency": currency,
        "startDate": date_range.start,
        "endDate": date_range.end,
        "dimensions": "month",
        "sort": "month",
        "filters": "video==" + ",".join(video_ids),
    }


def build_top_videos_query(channel_id: str, date_range: DateRange, max_results: int = 10) -> dict[str, Any]:
    return {
        "ids": channel_scope(channel_id),
        "metrics": "views,subscribersGained,subscribersLost",
        "startDate": date_range.start,
        "endDate": date_range.end,
        "dimensions": "video",
        "sort": "-views",
        "maxResults": max_results,
    }


def build_demographics_query(channel_id: str, date_range: DateRange) -> dict[str, Any]:
    return {
        "ids": channel_scope(channel_id),
        "metrics": "viewerPercentage",
        "startDate": date_range.start,
        "endDate": date_range.end,
        "dimensions": "ageGroup,gender",
        "sort": "-viewerPercentage",
    }


def run_query(analytics_service: Any, params: dict[str, Any]) -> Report:
    # Aggregate queries come back in a single response; there is no paging here.
    response = analytics_service.reports().query(**params).execute()
    return Report.from_response(response)


def fetch_revenue_report(
    analytics_service: Any,
    channel_id: str,
    video_ids: Sequence[str],
    year: int,
    currency: str,
) -> Report:
    return run_query(analytics_service, build_revenue_query(channel_id, video_ids, year, currency))
