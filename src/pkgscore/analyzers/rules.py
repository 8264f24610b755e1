"""Scoring rules for package manifests and the registry that holds them.

Every rule is a pure function of the manifest (plus the injected oracles)
that returns the points it awards. The registry pairs each rule with its
fixed maximum and a unique key, which is what the checker reports against.
New rules are added with ``@RULES.register(...)`` and need no change to the
aggregation code.
"""

import re
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass

from pkgscore.analyzers.oracles import Oracles
from pkgscore.exceptions import DuplicateRuleError
from pkgscore.models.schemas import Manifest

RuleCheck = Callable[[Manifest, Oracles], float]

# "node-foo", "foo_node" etc. A bare "node" or "nodemon" is fine.
NODE_COMPONENT = re.compile(r"(?:^node[-_]|[-_]node$)")
JS_COMPONENT = re.compile(r"(?:^js[-_]|[-_]js$)")

MIN_DESCRIPTION_LENGTH = 30
MIN_KEYWORDS = 3
MIN_AUTHOR_NAME_LENGTH = 6

# License tiers
SPDX_RECOGNISED_POINTS = 3.0
OSI_APPROVED_POINTS = 1.0


@dataclass(frozen=True)
class Rule:
    """A named scoring rule with a fixed maximum."""

    name: str
    maximum: float
    check: RuleCheck
    description: str = ""

    def __post_init__(self) -> None:
        if self.maximum <= 0:
            raise ValueError(f"Rule '{self.name}' must have a positive maximum")


class RuleRegistry:
    """Ordered, enumerable table of scoring rules keyed by name."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def add(self, rule: Rule) -> Rule:
        """Add a rule to the registry.

        Raises:
            DuplicateRuleError: If a rule with the same name is registered.
        """
        if rule.name in self._rules:
            raise DuplicateRuleError(rule.name)
        self._rules[rule.name] = rule
        return rule

    def register(
        self, name: str, maximum: float, description: str | None = None
    ) -> Callable[[RuleCheck], RuleCheck]:
        """Decorator registering a check function under ``name``.

        The function's docstring is used as the rule description unless one
        is given explicitly.
        """

        def decorator(check: RuleCheck) -> RuleCheck:
            text = description if description is not None else (check.__doc__ or "")
            self.add(Rule(name=name, maximum=maximum, check=check, description=text.strip()))
            return check

        return decorator

    def copy(self) -> "RuleRegistry":
        """Return a new registry holding the same rules."""
        registry = RuleRegistry()
        registry._rules = dict(self._rules)
        return registry

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return list(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules


RULES = RuleRegistry()


# --- Package name ---


@RULES.register("packagename_does_not_include_node", 1.0)
def packagename_does_not_include_node(manifest: Manifest, oracles: Oracles) -> float:
    """Package name should not carry a redundant "node" component.

    Lots of packages are named "node-foo" or "foo-node" after their git
    repository, which says nothing about the package itself.
    """
    return 0.0 if NODE_COMPONENT.search(manifest["name"]) else 1.0


@RULES.register("packagename_does_not_include_js", 1.0)
def packagename_does_not_include_js(manifest: Manifest, oracles: Oracles) -> float:
    """Package name should not carry a redundant "js" component."""
    return 0.0 if JS_COMPONENT.search(manifest["name"]) else 1.0


# --- Project metadata ---


@RULES.register("package_has_repo", 1.0)
def package_has_repo(manifest: Manifest, oracles: Oracles) -> float:
    """A source repository should be declared."""
    return 1.0 if manifest.get("repository") else 0.0


@RULES.register("package_has_sufficient_description", 2.0)
def package_has_sufficient_description(manifest: Manifest, oracles: Oracles) -> float:
    """Description should be at least 30 characters long."""
    description = manifest.get("description")
    if not description or len(description) < MIN_DESCRIPTION_LENGTH:
        return 0.0
    return 2.0


@RULES.register("package_has_spdx_license", 4.0)
def package_has_spdx_license(manifest: Manifest, oracles: Oracles) -> float:
    """License should be a known SPDX identifier, ideally OSI approved."""
    license_id = manifest.get("license")
    if not license_id:
        return 0.0

    info = oracles.licenses.lookup(license_id)
    if info is None:
        return 0.0

    score = SPDX_RECOGNISED_POINTS
    if info.osi_approved:
        score += OSI_APPROVED_POINTS
    return score


# --- Versioning ---


@RULES.register("package_has_valid_semver", 6.0)
def package_has_valid_semver(manifest: Manifest, oracles: Oracles) -> float:
    """Version should be a valid semantic version."""
    version = manifest.get("version")
    if version and oracles.semver.is_valid(version):
        return 6.0
    return 0.0


@RULES.register("package_has_valid_semver_with_base_value", 3.0)
def package_has_valid_semver_with_base_value(manifest: Manifest, oracles: Oracles) -> float:
    """Version should be valid and at least 1.0.0."""
    version = manifest.get("version")
    if version and oracles.semver.is_valid(version) and oracles.semver.satisfies(version):
        return 3.0
    return 0.0


# --- Discoverability and ownership ---


@RULES.register("package_has_minimum_keywords", 2.0)
def package_has_minimum_keywords(manifest: Manifest, oracles: Oracles) -> float:
    """At least three keywords should be listed."""
    keywords = manifest.get("keywords")
    if not isinstance(keywords, Sequence) or isinstance(keywords, str):
        return 0.0
    if len(keywords) >= MIN_KEYWORDS:
        return 2.0
    return 0.0


@RULES.register("package_has_author", 1.0)
def package_has_author(manifest: Manifest, oracles: Oracles) -> float:
    """Author should be an object with a name longer than five characters.

    The "Name <email> (url)" string shorthand does not count.
    """
    author = manifest.get("author")
    if not author or not isinstance(author, Mapping):
        return 0.0

    name = author.get("name")
    if isinstance(name, str) and len(name) >= MIN_AUTHOR_NAME_LENGTH:
        return 1.0
    return 0.0


@RULES.register("package_has_test_script", 5.0)
def package_has_test_script(manifest: Manifest, oracles: Oracles) -> float:
    """A non-empty ``test`` script should be defined."""
    scripts = manifest.get("scripts")
    if not scripts or not isinstance(scripts, Mapping):
        return 0.0

    test = scripts.get("test")
    if isinstance(test, str) and test:
        return 5.0
    return 0.0
