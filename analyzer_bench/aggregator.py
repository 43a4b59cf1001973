"""Aggregation of fixture runs into per-status statistics."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Self

from analyzer_bench.duration import Duration
from analyzer_bench.models.outcome import (
    Comment,
    Status,
    canonical_comment,
    comment_template,
)
from analyzer_bench.models.result import FixtureRun


@dataclass(frozen=True, kw_only=True)
class AggregateStats:
    """Statistics derived from a sealed group of runs."""

    count: int
    unique_comments: frozenset[str]
    unique_templates: frozenset[str]
    total_duration: Duration
    average_duration: Duration
    median_duration: Duration

    @classmethod
    def empty(cls) -> Self:
        """Statistics of a group without runs."""
        return cls(
            count=0,
            unique_comments=frozenset(),
            unique_templates=frozenset(),
            total_duration=Duration.zero(),
            average_duration=Duration.zero(),
            median_duration=Duration.zero(),
        )


@dataclass(frozen=True, kw_only=True)
class SealedGroup:
    """Runs of one status, frozen before statistics are derived."""

    durations: tuple[Duration, ...]
    comments: tuple[Comment | None, ...]

    @property
    def count(self) -> int:
        """Number of runs in the group."""
        return len(self.durations)

    def stats(self) -> AggregateStats:
        """Reduce the group into statistics.

        The median is the element at index ``count // 2`` of the ascending
        durations, so even-length groups take the upper of the two middle
        values. The average truncates.
        """
        if not self.count:
            return AggregateStats.empty()

        comments = [comment for comment in self.comments if comment]
        ordered = sorted(self.durations)
        total = sum(ordered, Duration.zero())

        return AggregateStats(
            count=self.count,
            unique_comments=frozenset(canonical_comment(c) for c in comments),
            unique_templates=frozenset(comment_template(c) for c in comments),
            total_duration=total,
            average_duration=total // self.count,
            median_duration=ordered[self.count // 2],
        )


@dataclass(kw_only=True)
class StatusGroup:
    """Accumulator for the runs of one status."""

    status: Status
    durations: list[Duration] = field(default_factory=list)
    comments: list[Comment | None] = field(default_factory=list)
    count: int = 0

    def add(self, run: FixtureRun) -> None:
        """Accumulate one successful run."""
        self.durations.append(run.duration)
        self.comments.extend(run.comments)
        self.count += 1

    def seal(self) -> SealedGroup:
        """Freeze the accumulated runs so statistics can be derived."""
        return SealedGroup(
            durations=tuple(self.durations), comments=tuple(self.comments)
        )


@dataclass(frozen=True, kw_only=True)
class AggregateReport:
    """Per-status statistics plus the total over every status."""

    groups: Mapping[Status, AggregateStats]
    total: AggregateStats

    def get(self, status: Status) -> AggregateStats:
        """Statistics for a status, all zero when no run had it."""
        return self.groups.get(status, AggregateStats.empty())


def group_runs(runs: Iterable[FixtureRun | None]) -> Mapping[Status, SealedGroup]:
    """Group successful runs by status, dropping failed fixtures."""
    groups: dict[Status, StatusGroup] = {}
    for run in runs:
        if run is None:
            continue
        if run.status not in groups:
            groups[run.status] = StatusGroup(status=run.status)
        groups[run.status].add(run)
    return {status: group.seal() for status, group in groups.items()}


def merge_groups(groups: Iterable[SealedGroup]) -> SealedGroup:
    """Combine groups into the synthetic total group."""
    durations: list[Duration] = []
    comments: list[Comment | None] = []
    for group in groups:
        durations.extend(group.durations)
        comments.extend(group.comments)
    return SealedGroup(durations=tuple(durations), comments=tuple(comments))


def aggregate(runs: Sequence[FixtureRun | None]) -> AggregateReport:
    """Reduce fixture runs into per-status and total statistics."""
    groups = group_runs(runs)
    return AggregateReport(
        groups={status: group.stats() for status, group in groups.items()},
        total=merge_groups(groups.values()).stats(),
    )
