"""Discover stored solution fixtures for an exercise."""

import logging
from collections.abc import Sequence
from pathlib import Path

from analyzer_bench.analyzers.solution import Exercise

DEFAULT_FIXTURES_ROOT = Path("test") / "fixtures"


class FixturesNotFoundError(Exception):
    """Raised when the fixtures directory of an exercise cannot be read."""


def discover_fixtures(
    root: Path, exercise: Exercise, log: logging.Logger
) -> Sequence[Path]:
    """List fixture directories for an exercise.

    Args:
        root: Base directory holding one sub-directory per exercise
        exercise: Exercise whose fixtures to list
        log: Harness logger

    Returns:
        Fixture directories, numeric names in numeric order before the rest

    Raises:
        FixturesNotFoundError: If ``root/<slug>`` is missing or unreadable

    """
    exercise_dir = root / exercise.slug
    try:
        entries = list(exercise_dir.iterdir())
    except OSError as e:
        raise FixturesNotFoundError(
            f"Cannot read fixtures for '{exercise.slug}' at {exercise_dir}: {e}"
        ) from e

    fixtures = sorted((path for path in entries if path.is_dir()), key=fixture_sort_key)
    log.info("Found %d fixture(s) in %s", len(fixtures), exercise_dir)
    return fixtures


def fixture_sort_key(path: Path) -> tuple[int, int, str]:
    """Order numbered fixtures numerically (2 before 10)."""
    if path.name.isdigit():
        return (0, int(path.name), path.name)
    return (1, 0, path.name)
