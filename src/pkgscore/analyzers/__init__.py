"""Scoring engine, rules and the oracles they consult."""

from pkgscore.analyzers.oracles import Oracles, SemverOracle, SpdxLicenseOracle
from pkgscore.analyzers.rules import RULES, Rule, RuleRegistry
from pkgscore.analyzers.scorer import PackageChecker

__all__ = [
    "Oracles",
    "PackageChecker",
    "RULES",
    "Rule",
    "RuleRegistry",
    "SemverOracle",
    "SpdxLicenseOracle",
]
