"""CLI entry point for benchmarking an analyzer against stored fixtures."""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import TextIO

from analyzer_bench.aggregator import aggregate
from analyzer_bench.analyzers.loading import load_analyzer
from analyzer_bench.analyzers.solution import Exercise
from analyzer_bench.duration import Duration
from analyzer_bench.executor import FixtureExecutor
from analyzer_bench.fixtures import DEFAULT_FIXTURES_ROOT, discover_fixtures
from analyzer_bench.logger import create_logger
from analyzer_bench.report import build_record, format_table, write_report


async def run(
    exercise_slug: str,
    fixtures_root: Path,
    log: logging.Logger,
    started_ns: int,
    stream: TextIO | None = None,
) -> None:
    """Benchmark the exercise's analyzer and write the report.

    Args:
        exercise_slug: Exercise identifier (e.g., "two-fer")
        fixtures_root: Directory holding one fixtures directory per exercise
        log: Logger handle shared by the harness and the analyzers
        started_ns: ``time.perf_counter_ns()`` reading at process start
        stream: Where the report is written (default: stdout)

    """
    exercise = Exercise(slug=exercise_slug)
    analyzer_cls = load_analyzer(exercise)
    fixtures = discover_fixtures(fixtures_root, exercise, log)

    executor = FixtureExecutor(exercise=exercise, analyzer_cls=analyzer_cls, log=log)
    runs = await executor.run_fixtures(fixtures)

    report = aggregate(runs)
    log.info(
        "Aggregated %d run(s) across %d status(es)",
        report.total.count,
        len(report.groups),
    )

    record = build_record(report, Duration.since(started_ns))
    write_report(stream or sys.stdout, record, format_table(report))


def main() -> None:
    """CLI entry point."""
    started_ns = time.perf_counter_ns()

    parser = argparse.ArgumentParser(
        description="Run an exercise analyzer against all of its stored fixtures"
    )
    parser.add_argument(
        "exercise",
        help="Exercise slug (e.g., two-fer)",
    )
    parser.add_argument(
        "--fixtures-root",
        type=Path,
        default=DEFAULT_FIXTURES_ROOT,
        help="Directory holding one fixtures directory per exercise",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log harness and analyzer activity to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    asyncio.run(
        run(
            exercise_slug=args.exercise,
            fixtures_root=args.fixtures_root,
            log=create_logger(enabled=args.verbose),
            started_ns=started_ns,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    main()
