from __future__ import annotations

from typing import Any, Sequence, TextIO

import pandas as pd

from yt_revenue.config import COLUMN_WIDTH, NO_RESULTS, REVENUE_METRIC
from yt_revenue.models import Report

LINE_TERMINATOR = "\r\n"


def format_cell(value: Any, data_type: str, width: int = COLUMN_WIDTH) -> str:
    if value is None:
        return " " * width
    if data_type == "INTEGER":
        return f"{int(value):>{width}d}"
    if data_type == "FLOAT":
        return f"{float(value):>{width}}"
    return f"{value!s:>{width}}"


def format_console_table(report: Report, width: int = COLUMN_WIDTH) -> str:
    if report.is_empty:
        return NO_RESULTS
    lines = ["".join(f"{header.name:>{width}}" for header in report.column_headers)]
    for row in report.rows:
        lines.append(
            "".join(
                format_cell(value, header.data_type, width)
                for header, value in zip(report.column_headers, row)
            )
        )
    lines.append("")
    return "\n".join(lines)


def csv_column_titles(report: Report, currency: str) -> list[str]:
    return [
        f"revenue {currency}" if name == REVENUE_METRIC else name
        for name in report.column_names
    ]


def _write_csv_line(handle: TextIO, values: Sequence[str]) -> None:
    # A header-only frame writes exactly one escaped line; the extra "" column leaves the trailing comma.
    pd.DataFrame(columns=[*values, ""]).to_csv(handle, index=False, lineterminator=LINE_TERMINATOR)


def write_csv_block(handle: TextIO, playlist_info: str, report: Report, currency: str) -> None:
    handle.write(LINE_TERMINATOR)
    _write_csv_line(handle, [playlist_info])
    if report.is_empty:
        _write_csv_line(handle, [NO_RESULTS])
        return
    df = report.to_dataframe()
    df.columns = csv_column_titles(report, currency)
    df[""] = ""
    df.to_csv(handle, index=False, na_rep="", lineterminator=LINE_TERMINATOR)
