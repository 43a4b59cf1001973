"""Rendering of aggregate statistics as a JSON record and a fixed table."""

import json
from collections.abc import Mapping
from typing import Any, TextIO

from analyzer_bench.aggregator import AggregateReport, AggregateStats
from analyzer_bench.duration import Duration
from analyzer_bench.models.outcome import Status

TABLE_ROWS: Mapping[Status, str] = {
    "approve_as_optimal": "Approve (optimal)",
    "approve_with_comment": "Approve (comment)",
    "disapprove_with_comment": "Disapprove (comment)",
    "refer_to_mentor": "Refer to mentor",
}
TOTAL_LABEL = "Total"
TOTAL_KEY = "total"
RUNTIME_KEY = "total_runtime_ms"

# label, count, comments, templates, avg (ms), median (ms), total (s)
COLUMN_WIDTHS = (22, 7, 10, 10, 10, 10, 9)
HEADERS = (
    "Status",
    "Count",
    "Comments",
    "Templates",
    "Avg (ms)",
    "Med (ms)",
    "Total (s)",
)


def stats_record(stats: AggregateStats) -> dict[str, Any]:
    """Format one group's statistics for JSON output, durations in ms."""
    return {
        "count": stats.count,
        "comments": {
            "unique": sorted(stats.unique_comments),
            "unique_templates": sorted(stats.unique_templates),
        },
        "runtimes": {
            "total": stats.total_duration.milliseconds,
            "average": stats.average_duration.milliseconds,
            "median": stats.median_duration.milliseconds,
        },
    }


def build_record(report: AggregateReport, runtime: Duration) -> dict[str, Any]:
    """Format the aggregate for JSON output.

    Args:
        report: Per-status and total statistics
        runtime: Wall-clock duration of the whole batch

    Returns:
        Mapping of status to statistics, plus the total and batch runtime

    """
    record: dict[str, Any] = {
        status: stats_record(stats) for status, stats in report.groups.items()
    }
    record[TOTAL_KEY] = stats_record(report.total)
    record[RUNTIME_KEY] = runtime.milliseconds
    return record


def format_row(*cells: object) -> str:
    """Pad a label and its values to the fixed column widths."""
    label, *values = cells
    padded = [f"{label!s:<{COLUMN_WIDTHS[0]}}"]
    padded.extend(
        f"{value!s:>{width}}" for value, width in zip(values, COLUMN_WIDTHS[1:])
    )
    return "| " + " | ".join(padded) + " |"


def format_stats_row(label: str, stats: AggregateStats) -> str:
    """Render one table row: ms for average and median, s for the total."""
    return format_row(
        label,
        stats.count,
        len(stats.unique_comments),
        len(stats.unique_templates),
        stats.average_duration.milliseconds,
        stats.median_duration.milliseconds,
        stats.total_duration.seconds,
    )


def format_table(report: AggregateReport) -> str:
    """Render the fixed five-row summary table.

    Every known status gets a row, in a fixed order, whether or not any
    fixture produced it; the total row comes last.
    """
    separator = "|" + "|".join("-" * (width + 2) for width in COLUMN_WIDTHS) + "|"
    lines = [format_row(*HEADERS), separator]
    lines.extend(
        format_stats_row(label, report.get(status))
        for status, label in TABLE_ROWS.items()
    )
    lines.append(format_stats_row(TOTAL_LABEL, report.total))
    return "\n".join(lines)


def write_report(stream: TextIO, record: Mapping[str, Any], table: str) -> None:
    """Write the JSON record on one line, a blank line, then the table."""
    stream.write(json.dumps(record) + "\n\n")
    stream.write(table + "\n")
    stream.flush()
