"""Keep-list persistence.

The keep list is a plain text file with one package name per line. The
trailing newline is stripped on read and added back on write.
"""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from lps.core.errors import ConfigFileOpenError
from lps.core.paths import ensure_dir, get_keep_list_path

logger = logging.getLogger(__name__)

DEFAULT_KEEP_PACKAGES: tuple[str, ...] = ("pacman", "glibc")


class KeepListStore:
    """Reads and rewrites the keep-list file.

    Storage location: ~/.config/lps/keep_packages

    Attributes:
        path: Location of the keep-list file.
        defaults: Names seeded when the file holds no names.
    """

    def __init__(
        self,
        path: Path | None = None,
        defaults: Sequence[str] = DEFAULT_KEEP_PACKAGES,
    ) -> None:
        """Initialize KeepListStore.

        Args:
            path: Optional override for the keep-list file.
                  Default: ~/.config/lps/keep_packages
            defaults: Names returned by read() when the file is empty.
        """
        self.path = path if path is not None else get_keep_list_path()
        self.defaults = tuple(defaults)

    def open(self) -> None:
        """Make sure the config directory and the keep-list file exist.

        Raises:
            ConfigDirCreateError: If the directory cannot be created.
            ConfigDirAccessError: If the directory cannot be inspected.
            ConfigDirNotDirectoryError: If the directory path is a file.
            ConfigFileOpenError: If the file cannot be created or opened.
        """
        ensure_dir(self.path.parent)
        try:
            self.path.touch(exist_ok=True)
        except OSError as e:
            msg = f"Failed to open config file {self.path}: {e.strerror or e}"
            raise ConfigFileOpenError(msg) from e

    def read(self) -> list[str]:
        """Read the keep list.

        Blank lines are ignored. When no names are stored the defaults
        are returned instead.

        Returns:
            Package names in file order.

        Raises:
            ConfigFileOpenError: If the file exists but cannot be read.
        """
        try:
            with self.path.open(encoding="utf-8") as f:
                names = [line.rstrip("\n").strip() for line in f]
        except FileNotFoundError:
            names = []
        except OSError as e:
            msg = f"Failed to open config file {self.path}: {e.strerror or e}"
            raise ConfigFileOpenError(msg) from e

        names = [name for name in names if name]
        if not names:
            logger.debug("Keep list empty, seeding defaults: %s", ", ".join(self.defaults))
            return list(self.defaults)
        return names

    def write(self, names: Iterable[str]) -> None:
        """Rewrite the keep list, one name per line.

        Args:
            names: Package names in the order to store them.

        Raises:
            ConfigFileOpenError: If the file cannot be written.
        """
        content = "".join(f"{name}\n" for name in names)
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"Failed to write config file {self.path}: {e.strerror or e}"
            raise ConfigFileOpenError(msg) from e

    def add(self, names: Iterable[str]) -> list[str]:
        """Append names that are not yet kept and persist the result.

        Returns:
            The updated keep list.
        """
        current = self.read()
        for name in names:
            if name not in current:
                current.append(name)
        self.write(current)
        return current

    def remove(self, names: Iterable[str]) -> list[str]:
        """Drop names from the keep list and persist the result.

        Returns:
            The updated keep list (defaults if it became empty).
        """
        dropped = set(names)
        current = [name for name in self.read() if name not in dropped]
        self.write(current)
        return current or list(self.defaults)
