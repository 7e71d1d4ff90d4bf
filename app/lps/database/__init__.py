"""Package database services.

Exports the database interface and the pacman implementation.
"""

from lps.database.base import NOT_FOUND, LookupResult, PackageDatabase
from lps.database.pacman import PacmanDatabase

__all__ = ["NOT_FOUND", "LookupResult", "PackageDatabase", "PacmanDatabase"]
