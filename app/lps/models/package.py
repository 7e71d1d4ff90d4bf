"""Package models for upgrade selection.

This module defines the immutable package metadata snapshot read from
the pacman database and the mutable upgrade candidate wrapped around it.
"""

from dataclasses import dataclass, field

# Names are bounded: at most this many bytes once UTF-8 encoded.
MAX_NAME_LENGTH = 199


@dataclass(frozen=True, slots=True)
class PackageRecord:
    """Snapshot of one package's metadata.

    Records are read once from the local or a sync database and never
    mutated afterwards.

    Attributes:
        name: Package name (e.g., 'glibc', 'linux-firmware')
        version: Full version string including epoch and pkgrel
        installed_size: Installed size in bytes
        description: Human-readable package description
        depends: Direct dependency names, version constraints stripped
        provides: Virtual names this package provides, constraints stripped
        repository: Sync repository the record came from (None for local)
    """

    name: str
    version: str = field(default="")
    installed_size: int = field(default=0)
    description: str = field(default="")
    depends: tuple[str, ...] = field(default=())
    provides: tuple[str, ...] = field(default=())
    repository: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if len(self.name.encode("utf-8")) > MAX_NAME_LENGTH:
            msg = f"Package name exceeds {MAX_NAME_LENGTH} bytes: {self.name[:40]!r}..."
            raise ValueError(msg)

    @property
    def size_human(self) -> str:
        """Return human-readable size string."""
        size = float(max(self.installed_size, 0))
        for unit in ("B", "KiB", "MiB", "GiB"):
            if size < 1024:
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} TiB"


@dataclass(slots=True)
class UpgradeCandidate:
    """An installed package with a newer version available.

    Attributes:
        record: Metadata of the new (available) version.
        selected: Whether the user picked this package for upgrade.
    """

    record: PackageRecord
    selected: bool = False

    @property
    def name(self) -> str:
        """Name of the package to upgrade."""
        return self.record.name
