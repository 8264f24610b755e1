"""Score calculator for package manifests."""

import logging
from pathlib import Path

from pydantic import ValidationError

from pkgscore.adapters.base import BaseLoader
from pkgscore.adapters.package_json import PackageJsonLoader
from pkgscore.analyzers.oracles import LicenseOracle, Oracles, SemverOracle, SpdxLicenseOracle
from pkgscore.analyzers.rules import RULES, Rule, RuleRegistry
from pkgscore.exceptions import RuleEvaluationError
from pkgscore.models.schemas import Manifest, Report, ScoreResult

logger = logging.getLogger(__name__)


class PackageChecker:
    """Scores a package manifest against every registered rule.

    Default rules (total 26 points):
    - Name without redundant "node"/"js" components: 1 + 1
    - Repository declared: 1
    - Description of 30+ characters: 2
    - SPDX license (3) that is OSI approved (+1): 4
    - Valid semver: 6, and at least 1.0.0: 3
    - Three or more keywords: 2
    - Structured author with a real name: 1
    - Test script: 5

    A rule that raises aborts the whole scoring pass with a
    RuleEvaluationError naming the rule; partial reports are never returned.
    """

    def __init__(
        self,
        location: str | Path,
        manifest: Manifest | None = None,
        *,
        loader: BaseLoader | None = None,
        registry: RuleRegistry | None = None,
        licenses: LicenseOracle | None = None,
        semver: SemverOracle | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            location: Package directory (or manifest file).
            manifest: Pre-parsed manifest. When given it is used as-is and the
                loader is never consulted.
            loader: Manifest loader. Defaults to PackageJsonLoader.
            registry: Rules to score against. Defaults to the built-in RULES.
            licenses: License oracle. Defaults to the SPDX license list.
            semver: Semantic version oracle.

        Raises:
            ManifestLoadError: If no manifest is given and loading fails.
        """
        self.location = location
        self.registry = registry if registry is not None else RULES
        self.oracles = Oracles(
            licenses=licenses if licenses is not None else SpdxLicenseOracle(),
            semver=semver if semver is not None else SemverOracle(),
        )

        if manifest is not None:
            self.manifest = manifest
        else:
            self.manifest = (loader or PackageJsonLoader()).load(location)

    def _evaluate(self, rule: Rule) -> ScoreResult:
        """Run a single rule against the bound manifest."""
        try:
            achieved = rule.check(self.manifest, self.oracles)
        except Exception as e:
            logger.error(f"Rule {rule.name} failed on {self.location}: {e!r}")
            raise RuleEvaluationError(rule.name, repr(e)) from e

        try:
            return ScoreResult(achieved=achieved, maximum=rule.maximum)
        except ValidationError as e:
            logger.error(f"Rule {rule.name} returned invalid score {achieved!r}")
            raise RuleEvaluationError(
                rule.name, f"score {achieved!r} outside 0..{rule.maximum}"
            ) from e

    def score(self) -> Report:
        """Evaluate every registered rule and aggregate the results.

        Returns:
            Report with the overall score and one entry per rule.

        Raises:
            RuleEvaluationError: If any rule faults.
        """
        achieved = 0.0
        maximum = 0.0
        scores: dict[str, ScoreResult] = {}

        for rule in self.registry:
            result = self._evaluate(rule)
            logger.debug(f"{rule.name}: {result.achieved}/{result.maximum}")
            achieved += result.achieved
            maximum += result.maximum
            scores[rule.name] = result

        overall = ScoreResult(achieved=achieved, maximum=maximum)
        logger.info(f"Scored {self.location}: {overall.achieved}/{overall.maximum}")
        return Report(overall=overall, scores=scores)
