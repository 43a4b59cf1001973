"""Loading of analyzers from entry points."""

from importlib.metadata import entry_points

from analyzer_bench.analyzers.base import Analyzer
from analyzer_bench.analyzers.solution import Exercise

ENTRY_POINT_GROUP = "analyzer_bench.analyzers"


class AnalyzerNotFoundError(Exception):
    """Raised when no analyzer is registered for an exercise."""


def load_analyzer(exercise: Exercise) -> type[Analyzer]:
    """Resolve the analyzer class for an exercise.

    Args:
        exercise: Exercise whose slug is the entry point name
                  (e.g., "two-fer")

    Returns:
        The analyzer class registered for the exercise

    Raises:
        AnalyzerNotFoundError: If no analyzer is registered for the slug

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == exercise.slug:
            analyzer_cls: type[Analyzer] = entry.load()
            return analyzer_cls

    available = [e.name for e in entries]
    raise AnalyzerNotFoundError(
        f"No analyzer for exercise '{exercise.slug}'. Available analyzers: {available}"
    )
