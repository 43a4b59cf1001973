"""Tests for report rendering."""

import io
import json

from analyzer_bench.aggregator import AggregateReport, aggregate
from analyzer_bench.duration import Duration
from analyzer_bench.report import (
    COLUMN_WIDTHS,
    build_record,
    format_table,
    write_report,
)
from analyzer_bench.testing.factories import FixtureRunFactory


def make_report() -> AggregateReport:
    return aggregate(
        [
            FixtureRunFactory.build(
                status="approve_as_optimal",
                comments=[],
                duration=Duration.from_milliseconds(5),
            ),
            FixtureRunFactory.build(
                status="approve_as_optimal",
                comments=[],
                duration=Duration.from_milliseconds(9),
            ),
            FixtureRunFactory.build(
                status="refer_to_mentor",
                comments=["two-fer.signature", {"comment": "t", "params": {"n": "1"}}],
                duration=Duration(7_900_000),
            ),
        ]
    )


def test_build_record() -> None:
    """Formats per-status statistics, the total and the batch runtime."""
    record = build_record(make_report(), Duration.from_milliseconds(1234))

    assert record["approve_as_optimal"] == {
        "count": 2,
        "comments": {"unique": [], "unique_templates": []},
        "runtimes": {"total": 14, "average": 7, "median": 9},
    }
    assert record["refer_to_mentor"]["count"] == 1
    assert record["refer_to_mentor"]["runtimes"]["median"] == 7
    assert record["refer_to_mentor"]["comments"]["unique_templates"] == [
        "t",
        "two-fer.signature",
    ]
    assert record["total"]["count"] == 3
    assert record["total_runtime_ms"] == 1234
    assert "approve_with_comment" not in record


def test_build_record_is_json_serializable() -> None:
    """Produces plain JSON types only."""
    record = build_record(make_report(), Duration.zero())

    assert json.loads(json.dumps(record)) == record


def test_table_has_five_rows_in_fixed_order() -> None:
    """Renders a header, a separator and exactly five rows."""
    lines = format_table(make_report()).splitlines()

    assert len(lines) == 7
    labels = [line.split("|")[1].strip() for line in lines[2:]]
    assert labels == [
        "Approve (optimal)",
        "Approve (comment)",
        "Disapprove (comment)",
        "Refer to mentor",
        "Total",
    ]


def test_table_renders_missing_status_as_zeros() -> None:
    """Statuses without runs still get a row of zeros."""
    lines = format_table(make_report()).splitlines()

    cells = [cell.strip() for cell in lines[3].split("|")[1:-1]]
    assert cells == ["Approve (comment)", "0", "0", "0", "0", "0", "0"]


def test_table_row_values() -> None:
    """Shows count, uniques, average and median in ms and total in s."""
    lines = format_table(make_report()).splitlines()

    optimal = [cell.strip() for cell in lines[2].split("|")[1:-1]]
    total = [cell.strip() for cell in lines[6].split("|")[1:-1]]
    assert optimal == ["Approve (optimal)", "2", "0", "0", "7", "9", "0"]
    assert total == ["Total", "3", "2", "2", "7", "7", "0"]


def test_table_columns_are_fixed_width() -> None:
    """Every line has the same width regardless of the data."""
    empty = format_table(aggregate([])).splitlines()
    full = format_table(make_report()).splitlines()

    width = sum(COLUMN_WIDTHS) + 3 * len(COLUMN_WIDTHS) + 1
    assert {len(line) for line in empty + full} == {width}


def test_write_report() -> None:
    """Writes the record as one line, a blank line, then the table."""
    stream = io.StringIO()
    report = make_report()
    record = build_record(report, Duration.zero())

    write_report(stream, record, format_table(report))

    first, blank, *table = stream.getvalue().splitlines()
    assert json.loads(first) == record
    assert blank == ""
    assert table == format_table(report).splitlines()
