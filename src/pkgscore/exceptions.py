"""Exceptions raised by pkgscore."""


class PkgScoreError(Exception):
    """Base class for all pkgscore errors."""


class ManifestLoadError(PkgScoreError):
    """Raised when a package manifest cannot be obtained or parsed."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Could not load manifest from '{location}': {reason}")


class RuleEvaluationError(PkgScoreError):
    """Raised when a scoring rule faults while inspecting a manifest."""

    def __init__(self, rule_name: str, reason: str | None = None) -> None:
        self.rule_name = rule_name
        message = f"Rule '{rule_name}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DuplicateRuleError(PkgScoreError, ValueError):
    """Raised when a rule name is registered twice in the same registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rule '{name}' is already registered")
