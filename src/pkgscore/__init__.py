"""Package manifest quality scoring."""

from pkgscore.analyzers.rules import RULES, Rule, RuleRegistry
from pkgscore.analyzers.scorer import PackageChecker
from pkgscore.exceptions import (
    DuplicateRuleError,
    ManifestLoadError,
    PkgScoreError,
    RuleEvaluationError,
)
from pkgscore.models.schemas import Report, ScoreResult

__version__ = "0.1.0"

__all__ = [
    "DuplicateRuleError",
    "ManifestLoadError",
    "PackageChecker",
    "PkgScoreError",
    "Report",
    "RULES",
    "Rule",
    "RuleEvaluationError",
    "RuleRegistry",
    "ScoreResult",
]
