"""Models for fixture execution results."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from analyzer_bench.duration import Duration
from analyzer_bench.models.outcome import Comment, Status


@dataclass(frozen=True, kw_only=True)
class FixtureRun:
    """Outcome of one successful analyzer invocation against a fixture.

    Failed invocations produce no FixtureRun at all.
    """

    fixture: Path
    status: Status
    comments: Sequence[Comment | None]
    duration: Duration
