"""Upgrade planning: closure, collection and ordering in one pass.

This runs once before the interactive picker starts; nothing is
recomputed while the picker is active.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from lps.core.candidates import collect_candidates, sort_candidates
from lps.core.closure import ClosureResult, compute_closure
from lps.core.config import LpsConfig
from lps.core.errors import NoCandidatesError
from lps.database.base import PackageDatabase
from lps.database.pacman import PacmanDatabase
from lps.models.package import UpgradeCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpgradePlan:
    """Sorted upgrade candidates and the closure that filtered them.

    Attributes:
        candidates: Candidates in display order.
        closure: Protected closure of the keep list.
    """

    candidates: list[UpgradeCandidate]
    closure: ClosureResult


def open_database(config: LpsConfig) -> PacmanDatabase:
    """Create, initialize and register the configured pacman database.

    Args:
        config: Runtime configuration.

    Returns:
        A database ready to be queried.

    Raises:
        DatabaseInitError: If the local database cannot be opened.
        RepositoryRegistrationError: If a repository fails to register.
    """
    db = PacmanDatabase(root=config.root, dbpath=config.dbpath, repositories=config.repositories)
    db.initialize()
    db.register_repositories()
    return db


def plan_upgrades(db: PackageDatabase, keep: Iterable[str]) -> UpgradePlan:
    """Compute the upgrade candidates left after protecting the keep list.

    Args:
        db: Initialized package database.
        keep: Keep-list names whose dependency closure is protected.

    Returns:
        UpgradePlan, possibly without candidates.
    """
    closure = compute_closure(keep, db.lookup)
    candidates = sort_candidates(
        collect_candidates(db.installed(), db.best_available, closure.closure)
    )
    logger.debug("%d upgrade candidates", len(candidates))
    return UpgradePlan(candidates=candidates, closure=closure)


def ensure_candidates(plan: UpgradePlan) -> list[UpgradeCandidate]:
    """Return the plan's candidates, refusing an empty plan.

    Raises:
        NoCandidatesError: If every outdated package is protected or
            nothing is outdated.
    """
    if not plan.candidates:
        msg = (
            "There are currently no packages to upgrade. "
            "Try `sudo pacman -Sy` or removing packages from the keep list."
        )
        raise NoCandidatesError(msg)
    return plan.candidates
