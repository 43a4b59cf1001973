"""Abstract base class for exercise analyzers."""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from analyzer_bench.analyzers.solution import Solution
from analyzer_bench.models.outcome import Comment, Status


@dataclass(frozen=True, kw_only=True)
class ReviewComment:
    """A review comment produced by an analyzer.

    The template id identifies the comment independent of its parameters;
    the message is the rendered text shown when templates are disabled.
    """

    template: str
    message: str
    params: Mapping[str, str] = field(default_factory=dict)

    def serialize(self, *, templates: bool) -> Comment:
        """Wire form: rendered message, bare template id, or id plus params."""
        if not templates:
            return self.message.format(**self.params)
        if not self.params:
            return self.template
        return {"comment": self.template, "params": dict(self.params)}


@dataclass(frozen=True, kw_only=True)
class AnalysisOutput:
    """Verdict produced by an analyzer for one solution."""

    status: Status
    comments: Sequence[ReviewComment] = ()

    def to_json(self, *, templates: bool = True) -> str:
        """Serialize to the ``{status, comments}`` wire format."""
        payload: dict[str, Any] = {
            "status": self.status,
            "comments": [
                comment.serialize(templates=templates) for comment in self.comments
            ],
        }
        return json.dumps(payload)


@dataclass(frozen=True, kw_only=True)
class Analyzer(ABC):
    """Abstract base for exercise analyzers.

    An analyzer instance is bound to exactly one solution and is used for a
    single run. Analyzers log through the handle they are given rather than
    a module-level logger so the caller decides whether output is visible.
    """

    solution: Solution
    log: logging.Logger = field(repr=False)

    @abstractmethod
    async def analyze(self) -> AnalysisOutput:
        """Judge the bound solution.

        Returns:
            Verdict status and review comments

        """
