from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from fakes import revenue_response
from yt_revenue.models import ColumnHeader, Report
from yt_revenue.render import csv_column_titles, format_cell, format_console_table, write_csv_block


def render_csv(playlist_info: str, report: Report, currency: str = "GBP") -> list[str]:
    buffer = io.StringIO(newline="")
    write_csv_block(buffer, playlist_info, report, currency)
    return buffer.getvalue().split("\r\n")


@pytest.mark.parametrize(
    "value,data_type,expected",
    [
        (12, "INTEGER", "12"),
        (12.0, "INTEGER", "12"),
        ("7", "INTEGER", "7"),
        (1.234567891, "FLOAT", "1.234567891"),
        ("2020-01", "STRING", "2020-01"),
        ("female", "CURRENCY", "female"),
    ],
)
def test_format_cell_right_justifies_by_type(value, data_type, expected):
    assert format_cell(value, data_type, width=12) == expected.rjust(12)


def test_console_table_has_header_then_rows():
    report = Report.from_response(revenue_response([["2020-01", 1.5], ["2020-02", 0.25]]))

    lines = format_console_table(report).split("\n")

    assert lines[0] == "month".rjust(30) + "estimatedRevenue".rjust(30)
    assert lines[1] == "2020-01".rjust(30) + "1.5".rjust(30)
    assert lines[2] == "2020-02".rjust(30) + "0.25".rjust(30)
    assert lines[3] == ""


def test_console_table_for_empty_report():
    report = Report.from_response(revenue_response([]))

    assert format_console_table(report) == "No results Found."


def test_csv_titles_name_the_currency():
    report = Report.from_response(revenue_response([]))

    assert csv_column_titles(report, "USD") == ["month", "revenue USD"]


def test_csv_block_appends_trailing_field_on_every_line():
    report = Report.from_response(revenue_response([["2020-01", 1.5], ["2020-02", 0]]))

    lines = render_csv("playlist: Mix, videos: 2", report)

    assert lines == [
        "",
        '"playlist: Mix, videos: 2",',
        "month,revenue GBP,",
        "2020-01,1.5,",
        "2020-02,0,",
        "",
    ]


def test_csv_block_escapes_quotes_and_newlines():
    report = Report(
        column_headers=(ColumnHeader("note", "STRING"),),
        rows=(('say "hi"',), ("two\nlines",), ("plain",)),
    )

    value = "".join(f"{line}\r\n" for line in render_csv("playlist: x", report))

    assert '"say ""hi""",' in value
    assert '"two\nlines",' in value
    assert "\r\nplain,\r\n" in value
    assert "\r\nplaylist: x,\r\n" in value


def test_csv_block_for_empty_report_has_marker_and_no_data_lines():
    report = Report.from_response(revenue_response([]))

    lines = render_csv("playlist: Mix, videos: 1", report)

    assert lines == ["", '"playlist: Mix, videos: 1",', "No results Found.,", ""]
