"""Tests for the solution model."""

from pathlib import Path

from analyzer_bench.analyzers.solution import Exercise, Solution


def test_source_files_skip_hidden_and_directories(tmp_path: Path) -> None:
    """Lists regular files only, sorted by name."""
    (tmp_path / "two-fer.js").write_text("export const twoFer = () => {}")
    (tmp_path / "README.md").write_text("notes")
    (tmp_path / ".meta").mkdir()
    (tmp_path / ".eslintrc").write_text("{}")
    solution = Solution(directory=tmp_path, exercise=Exercise(slug="two-fer"))

    assert solution.source_files() == [tmp_path / "README.md", tmp_path / "two-fer.js"]


async def test_read(tmp_path: Path) -> None:
    """Reads a file of the solution."""
    (tmp_path / "two-fer.js").write_text("content")
    solution = Solution(directory=tmp_path, exercise=Exercise(slug="two-fer"))

    assert await solution.read("two-fer.js") == "content"
