"""Pydantic models for manifest scoring results."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator

# A parsed package.json document. Never mutated while it is being scored.
Manifest = Mapping[str, Any]


class LicenseInfo(BaseModel):
    """A license identifier recognised by the license oracle."""

    identifier: str
    name: str = ""
    osi_approved: bool = False


# --- Scoring Models ---


class ScoreResult(BaseModel):
    """Achieved and maximum score for a single rule (or a sum of rules)."""

    achieved: float = Field(ge=0)
    maximum: float = Field(ge=0)

    @model_validator(mode="after")
    def _achieved_within_maximum(self) -> "ScoreResult":
        if self.achieved > self.maximum:
            raise ValueError(
                f"achieved score {self.achieved} exceeds maximum {self.maximum}"
            )
        return self

    def as_pair(self) -> list[float]:
        """Return the result as a ``[achieved, maximum]`` pair."""
        return [self.achieved, self.maximum]


class Report(BaseModel):
    """Aggregate of all rule results for one scoring pass.

    ``overall`` is always the exact sum of every entry in ``scores``.
    """

    overall: ScoreResult
    scores: dict[str, ScoreResult] = Field(default_factory=dict)

    @property
    def percentage(self) -> float:
        """Overall score as a percentage of the achievable maximum."""
        if not self.overall.maximum:
            return 0.0
        return round(self.overall.achieved / self.overall.maximum * 100, 1)

    def as_legacy_dict(self) -> dict[str, Any]:
        """Render the report in the ``{score, total}`` / ``[score, total]`` shape.

        Each rule maps to a plain ``[score, total]`` list, which is what
        ``pkgscore score --json`` prints.
        """
        return {
            "overall": {
                "score": self.overall.achieved,
                "total": self.overall.maximum,
            },
            "scores": {name: result.as_pair() for name, result in self.scores.items()},
        }
