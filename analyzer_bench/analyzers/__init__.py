"""Analyzer contract, resolution and invocation."""

from analyzer_bench.analyzers.base import AnalysisOutput, Analyzer, ReviewComment
from analyzer_bench.analyzers.loading import AnalyzerNotFoundError, load_analyzer
from analyzer_bench.analyzers.runner import run_analysis
from analyzer_bench.analyzers.solution import Exercise, Solution

__all__ = [
    "AnalysisOutput",
    "Analyzer",
    "AnalyzerNotFoundError",
    "Exercise",
    "ReviewComment",
    "Solution",
    "load_analyzer",
    "run_analysis",
]
