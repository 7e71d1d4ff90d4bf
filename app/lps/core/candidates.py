"""Upgrade candidate collection and ordering."""

import logging
from collections.abc import Callable, Container, Iterable

from lps.models.package import PackageRecord, UpgradeCandidate

logger = logging.getLogger(__name__)

BestAvailable = Callable[[PackageRecord], PackageRecord | None]


def collect_candidates(
    installed: Iterable[PackageRecord],
    best_available: BestAvailable,
    excluded: Container[str],
) -> list[UpgradeCandidate]:
    """Collect installed packages that have a newer version available.

    Packages without an update, and packages whose name is excluded,
    are skipped.

    Args:
        installed: Records of all installed packages.
        best_available: Returns the newer record for a package, or None.
        excluded: Names protected from upgrading (the dependency closure).

    Returns:
        Unselected candidates wrapping the new records, in input order.
    """
    candidates: list[UpgradeCandidate] = []
    for record in installed:
        new_record = best_available(record)
        if new_record is None:
            continue
        if record.name in excluded:
            logger.debug("Holding back protected package: %s", record.name)
            continue
        candidates.append(UpgradeCandidate(record=new_record))
    return candidates


def _sort_key(candidate: UpgradeCandidate) -> tuple[int, bytes]:
    # Sizes below zero order as zero; the stored record keeps its value
    return (-max(candidate.record.installed_size, 0), candidate.record.name.encode("utf-8"))


def sort_candidates(candidates: Iterable[UpgradeCandidate]) -> list[UpgradeCandidate]:
    """Order candidates for display.

    Largest installed size first; equal sizes ordered by name, byte-wise.

    Args:
        candidates: Candidates in any order.

    Returns:
        New list in display order.
    """
    return sorted(candidates, key=_sort_key)
