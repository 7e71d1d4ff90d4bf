"""Pacman package database implementation.

Reads the local database with ``pacman -Qi``, the sync databases with
``pacman -Si`` and the set of outdated packages with ``pacman -Qu``.
All output is parsed once; queries afterwards are pure lookups.
"""

import logging
import re
import subprocess
from collections.abc import Iterator, Sequence
from pathlib import Path

from lps.core.errors import DatabaseInitError, RepositoryRegistrationError
from lps.database.base import NOT_FOUND, LookupResult, PackageDatabase
from lps.models.package import PackageRecord
from lps.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

DEFAULT_ROOT = Path("/")
DEFAULT_DBPATH = Path("/var/lib/pacman")
DEFAULT_REPOSITORIES: tuple[str, ...] = ("core", "extra", "multilib")

# pacman prints localized field names unless forced to the C locale
_PACMAN_ENV = {"LC_ALL": "C"}

_SIZE_UNITS = {
    "B": 1,
    "KiB": 1024,
    "MiB": 1024**2,
    "GiB": 1024**3,
    "TiB": 1024**4,
    "PiB": 1024**5,
}

_CONSTRAINT_RE = re.compile(r"[<>=]")


def strip_constraint(dep: str) -> str:
    """Strip a version constraint from a dependency string.

    Args:
        dep: Dependency such as 'glibc>=2.38' or 'libfoo.so=1-64'.

    Returns:
        The bare package name.
    """
    return _CONSTRAINT_RE.split(dep, maxsplit=1)[0].strip()


def parse_name_list(value: str) -> tuple[str, ...]:
    """Parse a pacman multi-value field into bare names.

    Args:
        value: Field value, whitespace separated, or 'None'.

    Returns:
        Tuple of names in field order with constraints stripped.
    """
    if not value or value.strip() == "None":
        return ()
    names = (strip_constraint(part) for part in value.split())
    return tuple(name for name in names if name)


def parse_size(value: str) -> int:
    """Parse a pacman size field ('1.50 MiB') into bytes.

    Args:
        value: Size string as printed by pacman.

    Returns:
        Size in bytes, 0 if the value cannot be parsed.
    """
    parts = value.split()
    if len(parts) != 2 or parts[1] not in _SIZE_UNITS:
        logger.debug("Unparseable size field: %r", value)
        return 0
    try:
        return int(float(parts[0]) * _SIZE_UNITS[parts[1]])
    except ValueError:
        logger.debug("Unparseable size number: %r", value)
        return 0


def parse_info_blocks(output: str) -> Iterator[dict[str, str]]:
    """Split ``pacman -Qi``/``-Si`` output into field dictionaries.

    Blocks are separated by blank lines. Each field line has the form
    ``Key : value``; lines starting with whitespace continue the
    previous field.

    Args:
        output: Raw pacman output.

    Yields:
        One dictionary of field name to value per package.
    """
    block: dict[str, str] = {}
    last_key: str | None = None

    for line in output.splitlines():
        if not line.strip():
            if block:
                yield block
            block = {}
            last_key = None
            continue

        if line[0].isspace():
            if last_key is not None:
                block[last_key] = f"{block[last_key]}  {line.strip()}"
            continue

        key, sep, value = line.partition(":")
        if not sep:
            logger.debug("Skipping malformed pacman line: %r", line[:100])
            continue
        last_key = key.strip()
        block[last_key] = value.strip()

    if block:
        yield block


def record_from_block(block: dict[str, str]) -> PackageRecord | None:
    """Build a PackageRecord from one parsed info block.

    Args:
        block: Field dictionary from parse_info_blocks().

    Returns:
        PackageRecord, or None if the block lacks a usable name.
    """
    name = block.get("Name", "").strip()
    if not name:
        logger.debug("Skipping pacman block without a name")
        return None

    description = block.get("Description", "")
    try:
        return PackageRecord(
            name=name,
            version=block.get("Version", ""),
            installed_size=parse_size(block.get("Installed Size", "")),
            description="" if description == "None" else description,
            depends=parse_name_list(block.get("Depends On", "")),
            provides=parse_name_list(block.get("Provides", "")),
            repository=block.get("Repository") or None,
        )
    except ValueError as e:
        logger.debug("Skipping invalid package %r: %s", name[:40], e)
        return None


def parse_upgrades(output: str) -> dict[str, str]:
    """Parse ``pacman -Qu`` output.

    Args:
        output: Lines of the form 'name old -> new [ignored]'.

    Returns:
        Mapping of package name to the new version.
    """
    upgrades: dict[str, str] = {}
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 4 or parts[2] != "->":
            if line.strip():
                logger.debug("Skipping malformed upgrade line: %r", line[:100])
            continue
        upgrades[parts[0]] = parts[3]
    return upgrades


class PacmanDatabase(PackageDatabase):
    """Package database backed by the pacman command line tool.

    Attributes:
        root: Installation root passed as ``--root``.
        dbpath: Database directory passed as ``--dbpath``.
        repositories: Sync repositories to consider, in priority order.
    """

    def __init__(
        self,
        root: Path = DEFAULT_ROOT,
        dbpath: Path = DEFAULT_DBPATH,
        repositories: Sequence[str] = DEFAULT_REPOSITORIES,
    ) -> None:
        self.root = root
        self.dbpath = dbpath
        self.repositories = tuple(repositories)
        self._local: dict[str, PackageRecord] = {}
        self._providers: dict[str, str] = {}
        self._sync: dict[str, PackageRecord] = {}
        self._upgrades: dict[str, str] = {}

    def _pacman(self, *args: str) -> CommandResult:
        return run_command(
            ["pacman", "--root", str(self.root), "--dbpath", str(self.dbpath), *args],
            timeout=120.0,
            env=_PACMAN_ENV,
        )

    def initialize(self) -> None:
        """Load the local database.

        Raises:
            DatabaseInitError: If pacman is missing, the local database
                directory does not exist, or ``pacman -Qi`` fails.
        """
        if not command_exists("pacman"):
            msg = "pacman is not available on this system"
            raise DatabaseInitError(msg)

        local_dir = self.dbpath / "local"
        if not local_dir.is_dir():
            msg = f"Local database not found: {local_dir}"
            raise DatabaseInitError(msg)

        try:
            result = self._pacman("-Qi")
        except (OSError, subprocess.SubprocessError) as e:
            msg = f"Failed to query local database: {e}"
            raise DatabaseInitError(msg) from e

        if not result.success:
            msg = f"pacman -Qi failed: {result.stderr.strip() or 'unknown error'}"
            raise DatabaseInitError(msg)

        self._local = {}
        self._providers = {}
        for block in parse_info_blocks(result.stdout):
            record = record_from_block(block)
            if record is None:
                continue
            self._local[record.name] = record

        # Deterministic provider choice: first provider by name wins
        for name in sorted(self._local):
            for provided in self._local[name].provides:
                if provided != name:
                    self._providers.setdefault(provided, name)

        logger.debug("Loaded %d local packages from %s", len(self._local), self.dbpath)

    def register_repositories(self) -> None:
        """Load sync metadata for the configured repositories.

        Raises:
            RepositoryRegistrationError: If a repository database is
                missing or pacman cannot read the sync databases.
        """
        sync_dir = self.dbpath / "sync"
        for repo in self.repositories:
            if not (sync_dir / f"{repo}.db").is_file():
                msg = f"{repo} syncdb failed to register ({sync_dir / f'{repo}.db'} not found)"
                raise RepositoryRegistrationError(msg)

        try:
            sync_result = self._pacman("-Si")
            upgrade_result = self._pacman("-Qu")
        except (OSError, subprocess.SubprocessError) as e:
            msg = f"Failed to query sync databases: {e}"
            raise RepositoryRegistrationError(msg) from e

        if not sync_result.success:
            msg = f"pacman -Si failed: {sync_result.stderr.strip() or 'unknown error'}"
            raise RepositoryRegistrationError(msg)

        # -Qu exits 1 when nothing is outdated
        if not upgrade_result.success and upgrade_result.stdout.strip():
            msg = f"pacman -Qu failed: {upgrade_result.stderr.strip() or 'unknown error'}"
            raise RepositoryRegistrationError(msg)

        priority = {repo: index for index, repo in enumerate(self.repositories)}
        ranked: dict[str, tuple[int, PackageRecord]] = {}
        for block in parse_info_blocks(sync_result.stdout):
            record = record_from_block(block)
            if record is None or record.repository is None or record.repository not in priority:
                continue
            rank = priority[record.repository]
            current = ranked.get(record.name)
            if current is None or rank < current[0]:
                ranked[record.name] = (rank, record)
        self._sync = {name: record for name, (_, record) in ranked.items()}

        self._upgrades = parse_upgrades(upgrade_result.stdout)
        logger.debug(
            "Registered %d repositories: %d sync packages, %d outdated",
            len(self.repositories),
            len(self._sync),
            len(self._upgrades),
        )

    def installed(self) -> list[PackageRecord]:
        """Return all local package records in database order."""
        return list(self._local.values())

    def lookup(self, name: str) -> LookupResult:
        """Resolve a name against the local database.

        Virtual names provided by an installed package resolve to a
        record that depends on the providing package.
        """
        record = self._local.get(name)
        if record is not None:
            return LookupResult(found=True, depends=record.depends)

        provider = self._providers.get(name)
        if provider is not None:
            return LookupResult(found=True, depends=(provider,))

        return NOT_FOUND

    def best_available(self, record: PackageRecord) -> PackageRecord | None:
        """Return the sync record matching the version ``pacman -Qu`` reports."""
        new_version = self._upgrades.get(record.name)
        if new_version is None:
            return None

        candidate = self._sync.get(record.name)
        if candidate is None or candidate.version != new_version:
            return None
        return candidate
