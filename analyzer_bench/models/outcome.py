"""Models for analyzer outcomes parsed from their serialized JSON."""

import json
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import Field, field_validator

from analyzer_bench.models.base import Model

Status = Literal[
    "approve_as_optimal",
    "approve_with_comment",
    "disapprove_with_comment",
    "refer_to_mentor",
]

Comment = str | Mapping[str, Any]


class AnalysisOutcome(Model):
    """Verdict and review comments produced for one solution.

    Comments are either a bare template id or a mapping holding the template
    id under ``comment`` plus its parameters. The payload comes from whatever
    result object a plugin analyzer returns, not only ``AnalysisOutput``, so
    null and empty entries are accepted here and dropped during aggregation.
    """

    status: Status = Field(..., description="Verdict of the analysis")
    comments: Sequence[Comment | None] = Field(
        default_factory=list,
        description="Comment template ids or structured comments with parameters",
    )

    @field_validator("comments")
    @classmethod
    def _require_template_ids(
        cls, comments: Sequence[Comment | None]
    ) -> Sequence[Comment | None]:
        for comment in comments:
            if isinstance(comment, Mapping) and comment and not isinstance(
                comment.get("comment"), str
            ):
                raise ValueError(f"Structured comment without template id: {comment}")
        return comments


def canonical_comment(comment: Comment) -> str:
    """Serialize a comment so equal comments compare equal as strings."""
    return json.dumps(comment, sort_keys=True, separators=(",", ":"))


def comment_template(comment: Comment) -> str:
    """Return the template identifier of a comment, ignoring its parameters."""
    if isinstance(comment, str):
        return comment
    return comment["comment"]
