"""Abstract base class for package databases.

This module defines the PackageDatabase interface the closure builder
and candidate collector query. Implementations wrap a real package
manager; tests substitute in-memory graphs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from lps.models.package import PackageRecord


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of looking a package name up in the local database.

    Attributes:
        found: True if the name resolves to an installed package.
        depends: Direct dependency names of the resolved package.
    """

    found: bool
    depends: tuple[str, ...] = field(default=())


NOT_FOUND = LookupResult(found=False)


class PackageDatabase(ABC):
    """Abstract base class for package database services.

    A database is initialized once, has its remote repositories
    registered once, and is then queried read-only.

    Example:
        >>> db = PacmanDatabase()
        >>> db.initialize()
        >>> db.register_repositories()
        >>> for record in db.installed():
        ...     print(record.name, db.best_available(record))
    """

    @abstractmethod
    def initialize(self) -> None:
        """Open the local database.

        Raises:
            DatabaseInitError: If the database cannot be opened.
        """

    @abstractmethod
    def register_repositories(self) -> None:
        """Register every configured remote repository.

        Raises:
            RepositoryRegistrationError: If any repository fails to register.
        """

    @abstractmethod
    def installed(self) -> list[PackageRecord]:
        """Return records for all installed packages."""

    @abstractmethod
    def lookup(self, name: str) -> LookupResult:
        """Look a package name up in the local database.

        Args:
            name: Package name to resolve.

        Returns:
            LookupResult with the direct dependency names when found.
        """

    @abstractmethod
    def best_available(self, record: PackageRecord) -> PackageRecord | None:
        """Return the newer version of an installed package.

        Args:
            record: The installed package.

        Returns:
            The sync record of the best available newer version, or None
            if the package is up to date.
        """
