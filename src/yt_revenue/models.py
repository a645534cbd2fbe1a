from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

import pandas as pd


@dataclass(frozen=True)
class Channel:
    id: str
    title: str

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> Channel:
        return cls(id=item["id"], title=(item.get("snippet") or {}).get("title", ""))


@dataclass(frozen=True)
class Playlist:
    id: str
    title: str

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> Playlist:
        return cls(id=item["id"], title=(item.get("snippet") or {}).get("title", ""))


@dataclass(frozen=True)
class PlaylistItem:
    id: str
    video_id: str
    title: str = ""

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> PlaylistItem:
        return cls(
            id=item.get("id", ""),
            video_id=(item.get("contentDetails") or {}).get("videoId", ""),
            title=(item.get("snippet") or {}).get("title", ""),
        )


@dataclass(frozen=True)
class ColumnHeader:
    name: str
    data_type: str = ""
    column_type: str = ""

    @classmethod
    def from_api(cls, header: Mapping[str, Any]) -> ColumnHeader:
        return cls(
            name=header.get("name", ""),
            data_type=header.get("dataType", ""),
            column_type=header.get("columnType", ""),
        )


@dataclass(frozen=True)
class Report:
    column_headers: tuple[ColumnHeader, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> Report:
        headers = tuple(ColumnHeader.from_api(header) for header in response.get("columnHeaders") or [])
        rows = tuple(tuple(row) for row in response.get("rows") or [])
        return cls(column_headers=headers, rows=rows)

    @property
    def column_names(self) -> list[str]:
        return [header.name for header in self.column_headers]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dataframe(self) -> pd.DataFrame:
        # object dtype keeps API values as-is (no int -> float upcasting)
        return pd.DataFrame(list(self.rows), columns=self.column_names, dtype=object)


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str

    @classmethod
    def for_year(cls, year: int) -> DateRange:
        # End stays on December 1st, so the last month is only partially covered.
        return cls(start=f"{year}-01-01", end=f"{year}-12-01")


def report_years(first_year: int, today: date | None = None) -> list[int]:
    current_year = (today or date.today()).year
    return list(range(first_year, current_year + 1))
