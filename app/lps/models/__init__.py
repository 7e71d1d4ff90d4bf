"""Data models for lps.

This module exports the core data structures used throughout the application.
"""

from lps.models.package import MAX_NAME_LENGTH, PackageRecord, UpgradeCandidate

__all__ = [
    "MAX_NAME_LENGTH",
    "PackageRecord",
    "UpgradeCandidate",
]
