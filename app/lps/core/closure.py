"""Transitive dependency closure of the keep list.

Walks the dependency graph exposed by a lookup function, starting from
every root, with one visited set shared across all roots.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from lps.database.base import LookupResult

logger = logging.getLogger(__name__)

Lookup = Callable[[str], LookupResult]


@dataclass(frozen=True, slots=True)
class ClosureResult:
    """Result of a closure computation.

    Attributes:
        closure: Names of every found package reachable from the roots.
        unfound: Names that were reached but are absent from the database,
            sorted byte-wise.
    """

    closure: frozenset[str]
    unfound: tuple[str, ...]

    def __contains__(self, name: object) -> bool:
        return name in self.closure


def compute_closure(roots: Iterable[str], lookup: Lookup) -> ClosureResult:
    """Compute the transitive dependency closure of a set of roots.

    Each name is looked up at most once, so cycles and self-dependencies
    terminate. A name the lookup cannot find is reported in ``unfound``,
    is not part of the closure, and is not traversed further; the walk
    from the remaining roots continues.

    Args:
        roots: Root package names (e.g., the keep list).
        lookup: Function resolving a name to its direct dependencies.

    Returns:
        ClosureResult with the closure and the unfound names.
    """
    visited: set[str] = set()
    closure: set[str] = set()
    unfound: set[str] = set()
    stack: list[str] = list(roots)

    while stack:
        name = stack.pop()
        if name in visited:
            continue
        visited.add(name)

        result = lookup(name)
        if not result.found:
            logger.debug("Package not found in local database: %s", name)
            unfound.add(name)
            continue

        closure.add(name)
        stack.extend(dep for dep in result.depends if dep not in visited)

    logger.debug("Dependency closure: %d packages, %d unfound", len(closure), len(unfound))
    return ClosureResult(
        closure=frozenset(closure),
        unfound=tuple(sorted(unfound, key=lambda n: n.encode("utf-8"))),
    )
