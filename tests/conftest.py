"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

import pytest
from lps.database.base import NOT_FOUND, LookupResult, PackageDatabase
from lps.models.package import PackageRecord, UpgradeCandidate


class GraphDatabase(PackageDatabase):
    """In-memory package database for tests.

    Installed packages are given as records; ``updates`` maps a package
    name to the record of its newer version.
    """

    def __init__(
        self,
        installed: Sequence[PackageRecord],
        updates: Mapping[str, PackageRecord] | None = None,
    ) -> None:
        self._installed = list(installed)
        self._by_name = {record.name: record for record in installed}
        self._updates = dict(updates or {})
        self.lookups: list[str] = []

    def initialize(self) -> None:
        pass

    def register_repositories(self) -> None:
        pass

    def installed(self) -> list[PackageRecord]:
        return list(self._installed)

    def lookup(self, name: str) -> LookupResult:
        self.lookups.append(name)
        record = self._by_name.get(name)
        if record is None:
            return NOT_FOUND
        return LookupResult(found=True, depends=record.depends)

    def best_available(self, record: PackageRecord) -> PackageRecord | None:
        return self._updates.get(record.name)


def make_candidates(count: int) -> list[UpgradeCandidate]:
    """Create ``count`` unselected candidates named pkg00, pkg01, ..."""
    return [
        UpgradeCandidate(
            record=PackageRecord(
                name=f"pkg{i:02d}",
                installed_size=(count - i) * 1024,
                description=f"Package number {i}",
            )
        )
        for i in range(count)
    ]


@pytest.fixture
def graph_db() -> GraphDatabase:
    """Small system: pacman and glibc kept, firefox and vim outdated."""
    installed = [
        PackageRecord(name="pacman", depends=("bash", "glibc", "curl")),
        PackageRecord(name="bash", depends=("readline", "glibc")),
        PackageRecord(name="readline", depends=("glibc", "ncurses")),
        PackageRecord(name="ncurses", depends=("glibc",)),
        PackageRecord(name="glibc", depends=("filesystem",)),
        PackageRecord(name="curl", depends=("glibc", "openssl")),
        PackageRecord(name="openssl", depends=("glibc",)),
        PackageRecord(name="firefox", depends=("gtk3", "glibc")),
        PackageRecord(name="vim", depends=("glibc", "ncurses")),
    ]
    updates = {
        "bash": PackageRecord(name="bash", version="5.2.026-3", installed_size=9_800_000),
        "openssl": PackageRecord(name="openssl", version="3.2.1-1", installed_size=6_000_000),
        "firefox": PackageRecord(
            name="firefox",
            version="124.0-1",
            installed_size=252_000_000,
            description="Standalone web browser from mozilla.org",
        ),
        "vim": PackageRecord(
            name="vim",
            version="9.1.0100-1",
            installed_size=4_400_000,
            description="Vi Improved, a highly configurable, improved version of vi",
        ),
    }
    return GraphDatabase(installed, updates)


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def pacman_dbpath(tmp_path: Path) -> Path:
    """A pacman database directory with local/ and core, extra, multilib syncdbs."""
    dbpath = tmp_path / "pacman"
    (dbpath / "local").mkdir(parents=True)
    (dbpath / "sync").mkdir()
    for repo in ("core", "extra", "multilib"):
        (dbpath / "sync" / f"{repo}.db").write_bytes(b"")
    return dbpath


@pytest.fixture
def mock_pacman_qi_output() -> str:
    """Sample ``pacman -Qi`` output for testing."""
    return """Name            : bash
Version         : 5.2.026-2
Description     : The GNU Bourne Again shell
Architecture    : x86_64
Provides        : sh
Depends On      : readline  libreadline.so=8-64  glibc  ncurses
Optional Deps   : bash-completion: for tab completion
Installed Size  : 9.37 MiB

Name            : firefox
Version         : 123.0-1
Description     : Standalone web browser from mozilla.org
Provides        : None
Depends On      : gtk3  glibc>=2.38  libxt
Installed Size  : 240.50 MiB

Name            : glibc
Version         : 2.39-1
Description     : GNU C Library
Provides        : None
Depends On      : linux-api-headers>=4.10  tzdata
                  filesystem
Installed Size  : 47.25 MiB

Name            : pacman
Version         : 6.1.0-3
Description     : A library-based package manager with dependency support
Depends On      : bash  glibc  libarchive
Installed Size  : 4.83 MiB

Name            : vim
Version         : 9.1.0-1
Description     : Vi Improved, a highly configurable, improved version of the vi text editor
Depends On      : glibc  gpm
Installed Size  : 4.20 MiB
"""


@pytest.fixture
def mock_pacman_si_output() -> str:
    """Sample ``pacman -Si`` output for testing."""
    return """Repository      : core
Name            : bash
Version         : 5.2.026-3
Description     : The GNU Bourne Again shell
Depends On      : readline  glibc  ncurses
Installed Size  : 9.40 MiB

Repository      : extra
Name            : firefox
Version         : 124.0-1
Description     : Standalone web browser from mozilla.org
Depends On      : gtk3  glibc
Installed Size  : 241.00 MiB

Repository      : testing
Name            : vim
Version         : 9.2-1
Description     : Vi Improved (testing build)
Depends On      : glibc  gpm
Installed Size  : 4.30 MiB

Repository      : extra
Name            : vim
Version         : 9.1.0100-1
Description     : Vi Improved, a highly configurable, improved version of the vi text editor
Depends On      : glibc  gpm
Installed Size  : 4.25 MiB
"""


@pytest.fixture
def mock_pacman_qu_output() -> str:
    """Sample ``pacman -Qu`` output for testing."""
    return """bash 5.2.026-2 -> 5.2.026-3
firefox 123.0-1 -> 124.0-1
vim 9.1.0-1 -> 9.1.0100-1
"""


@pytest.fixture
def candidate_factory():
    """Factory for lists of candidates named pkg00, pkg01, ..."""
    return make_candidates


@pytest.fixture
def graph_factory() -> type[GraphDatabase]:
    """The in-memory database class, for tests building their own graphs."""
    return GraphDatabase
