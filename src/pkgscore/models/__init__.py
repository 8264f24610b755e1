"""Data models and schemas."""

from pkgscore.models.schemas import (
    LicenseInfo,
    Manifest,
    Report,
    ScoreResult,
)

__all__ = ["LicenseInfo", "Manifest", "Report", "ScoreResult"]
