"""Fixture executor running an analyzer concurrently over stored solutions."""

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from analyzer_bench.analyzers.base import AnalysisOutput, Analyzer
from analyzer_bench.analyzers.runner import run_analysis
from analyzer_bench.analyzers.solution import Exercise, Solution
from analyzer_bench.duration import Duration
from analyzer_bench.models.configuration import RunConfiguration
from analyzer_bench.models.outcome import AnalysisOutcome
from analyzer_bench.models.result import FixtureRun

OUTPUT_FILENAME = Path("analysis.json")


@dataclass(frozen=True, kw_only=True)
class FixtureExecutor:
    """Runs one analyzer against every fixture of an exercise."""

    exercise: Exercise
    analyzer_cls: type[Analyzer]
    log: logging.Logger = field(repr=False)

    async def run_fixtures(
        self, fixtures: Sequence[Path]
    ) -> Sequence[FixtureRun | None]:
        """Run all fixtures concurrently and wait until every run settles.

        Args:
            fixtures: Fixture directories, one solution each

        Returns:
            One entry per fixture, in input order; ``None`` where the analyzer
            invocation raised

        """
        self.log.info(
            "Running %s analyzer on %d fixture(s)...",
            self.exercise.slug,
            len(fixtures),
        )
        results = await asyncio.gather(
            *(self._run_fixture(fixture) for fixture in fixtures)
        )

        failed = sum(1 for result in results if result is None)
        self.log.info(
            "Fixture execution completed: %d succeeded, %d failed",
            len(results) - failed,
            failed,
        )
        return results

    async def _run_fixture(self, fixture: Path) -> FixtureRun | None:
        """Analyze one fixture and time the invocation."""
        configuration = RunConfiguration(
            debug=False,
            console=False,
            dry=False,
            output=OUTPUT_FILENAME,
            templates=True,
            input_dir=fixture,
        )

        try:
            output, duration = await self._invoke(fixture, configuration)
        except Exception as e:
            self.log.error("Fixture %s failed: %s", fixture, e, exc_info=e)
            return None

        outcome = AnalysisOutcome.model_validate_json(
            output.to_json(templates=configuration.templates)
        )
        self.log.debug(
            "Fixture completed: fixture=%s status=%s", fixture, outcome.status
        )
        return FixtureRun(
            fixture=fixture,
            status=outcome.status,
            comments=outcome.comments,
            duration=duration,
        )

    async def _invoke(
        self, fixture: Path, configuration: RunConfiguration
    ) -> tuple[AnalysisOutput, Duration]:
        """Bind a fresh analyzer to the fixture and time its run."""
        solution = Solution(directory=fixture, exercise=self.exercise)
        analyzer = self.analyzer_cls(solution=solution, log=self.log)

        start = time.perf_counter_ns()
        try:
            output = await run_analysis(analyzer, configuration)
        finally:
            duration = Duration.since(start)
            self.log.debug(
                "Fixture %s settled after %dms", fixture, duration.milliseconds
            )
        return output, duration
