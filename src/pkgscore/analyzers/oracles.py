"""License and semantic-version oracles used by the scoring rules.

Both oracles are stateless and are injected into the checker, so tests can
swap in fakes instead of depending on the bundled SPDX list or on semver
edge cases.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

import semver
from spdx_license_list import LICENSES

from pkgscore.models.schemas import LicenseInfo

# Minimum version a package should have reached to be considered stable
BASE_VERSION = "1.0.0"

# npm rejects anything longer, and numbers it cannot represent exactly
MAX_VERSION_LENGTH = 256
MAX_SAFE_INTEGER = 2**53 - 1


class LicenseOracle(Protocol):
    """Resolves license identifiers against a license knowledge base."""

    def lookup(self, identifier: Any) -> LicenseInfo | None:
        """Return license details, or None if the identifier is unrecognised."""
        ...


class SpdxLicenseOracle:
    """License oracle backed by the SPDX license list.

    Identifiers are matched exactly first, then case-insensitively
    (``mit`` resolves to ``MIT``). Anything that is not a string, including
    the legacy ``{"type": "MIT"}`` object form, is unrecognised.
    """

    def __init__(self, licenses: dict | None = None) -> None:
        """Initialize the oracle.

        Args:
            licenses: Mapping of SPDX identifier to license record. Defaults
                to the list shipped with ``spdx-license-list``.
        """
        self._licenses = LICENSES if licenses is None else licenses
        self._by_lower = {key.lower(): key for key in self._licenses}

    def lookup(self, identifier: Any) -> LicenseInfo | None:
        if not isinstance(identifier, str):
            return None

        key = identifier.strip()
        if key not in self._licenses:
            key = self._by_lower.get(key.lower())
            if key is None:
                return None

        record = self._licenses[key]
        return LicenseInfo(
            identifier=key,
            name=record.name,
            osi_approved=bool(record.osi_approved),
        )


class SemverOracle:
    """Semantic version checks following npm's conventions.

    npm tolerates a single leading ``v`` and surrounding whitespace, and a
    prerelease never satisfies a range unless the range itself names a
    prerelease, so ``2.0.0-beta.1`` does not satisfy ``>=1.0.0``.
    """

    def _parse(self, version: Any) -> semver.Version | None:
        if not isinstance(version, str) or len(version) > MAX_VERSION_LENGTH:
            return None

        cleaned = version.strip()
        if cleaned.startswith("v"):
            cleaned = cleaned[1:]
        if not semver.Version.is_valid(cleaned):
            return None
        parsed = semver.Version.parse(cleaned)
        if max(parsed.major, parsed.minor, parsed.patch) > MAX_SAFE_INTEGER:
            return None
        return parsed

    def is_valid(self, version: Any) -> bool:
        """Check whether ``version`` is a syntactically valid semantic version."""
        return self._parse(version) is not None

    def satisfies(self, version: Any, minimum: str = BASE_VERSION) -> bool:
        """Check whether ``version`` satisfies the range ``>=minimum``.

        Args:
            version: Version string to test.
            minimum: Lower bound (inclusive) of the range.

        Returns:
            True if the version is valid, not a prerelease and at least ``minimum``.
        """
        parsed = self._parse(version)
        if parsed is None or parsed.prerelease:
            return False
        return parsed.compare(minimum) >= 0


@dataclass(frozen=True)
class Oracles:
    """The external services a rule may consult."""

    licenses: LicenseOracle = field(default_factory=SpdxLicenseOracle)
    semver: SemverOracle = field(default_factory=SemverOracle)
