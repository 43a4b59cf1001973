"""Tests for fixture discovery."""

import logging
from pathlib import Path

import pytest

from analyzer_bench.analyzers.solution import Exercise
from analyzer_bench.fixtures import FixturesNotFoundError, discover_fixtures

EXERCISE = Exercise(slug="two-fer")
LOG = logging.getLogger("fixtures-tests")


def test_lists_fixture_directories(tmp_path: Path) -> None:
    """Lists every directory under the exercise's fixtures."""
    exercise_dir = tmp_path / "two-fer"
    for name in ("1", "2", "3"):
        (exercise_dir / name).mkdir(parents=True)

    fixtures = discover_fixtures(tmp_path, EXERCISE, LOG)

    assert fixtures == [exercise_dir / "1", exercise_dir / "2", exercise_dir / "3"]


def test_orders_numbered_fixtures_numerically(tmp_path: Path) -> None:
    """Sorts 2 before 10 and named fixtures after numbered ones."""
    exercise_dir = tmp_path / "two-fer"
    for name in ("10", "2", "custom", "1"):
        (exercise_dir / name).mkdir(parents=True)

    fixtures = discover_fixtures(tmp_path, EXERCISE, LOG)

    assert [f.name for f in fixtures] == ["1", "2", "10", "custom"]


def test_skips_plain_files(tmp_path: Path) -> None:
    """Ignores files next to the fixture directories."""
    exercise_dir = tmp_path / "two-fer"
    (exercise_dir / "1").mkdir(parents=True)
    (exercise_dir / "README.md").write_text("fixtures")

    fixtures = discover_fixtures(tmp_path, EXERCISE, LOG)

    assert fixtures == [exercise_dir / "1"]


def test_raises_when_exercise_has_no_fixtures(tmp_path: Path) -> None:
    """Raises FixturesNotFoundError for a missing fixtures directory."""
    with pytest.raises(FixturesNotFoundError) as exc_info:
        discover_fixtures(tmp_path, EXERCISE, LOG)

    assert "two-fer" in str(exc_info.value)
