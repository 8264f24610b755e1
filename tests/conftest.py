"""Shared fixtures for pkgscore tests."""

import pytest

from pkgscore.models.schemas import LicenseInfo


class FakeLicenseOracle:
    """License oracle over a fixed table, so tests don't depend on the SPDX list."""

    def __init__(self, known: dict[str, bool] | None = None) -> None:
        self.known = known if known is not None else {"MIT": True, "WTFPL": False}
        self.lookups: list = []

    def lookup(self, identifier):
        self.lookups.append(identifier)
        if identifier not in self.known:
            return None
        return LicenseInfo(identifier=identifier, osi_approved=self.known[identifier])


class ExplodingLoader:
    """Loader that fails the test if it is ever used."""

    def load(self, location):
        raise AssertionError(f"loader should not be called for {location}")


@pytest.fixture
def complete_manifest():
    """Manifest that earns full credit on every default rule."""
    return {
        "name": "foo",
        "version": "1.2.3",
        "license": "MIT",
        "description": "A sufficiently long description exceeding thirty chars",
        "repository": {"type": "git", "url": "x"},
        "keywords": ["a", "b", "c"],
        "author": {"name": "Jane Doe"},
        "scripts": {"test": "run-tests"},
    }


@pytest.fixture
def fake_licenses():
    return FakeLicenseOracle()


@pytest.fixture
def exploding_loader():
    return ExplodingLoader()
