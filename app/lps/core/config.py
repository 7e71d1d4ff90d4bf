"""Runtime configuration.

Configuration is stored in ~/.config/lps/config.toml. Every setting is
optional; a missing file yields the defaults.

Example config.toml:

    root = "/"
    dbpath = "/var/lib/pacman"
    repositories = ["core", "extra", "multilib"]
    default_keep = ["pacman", "glibc"]
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lps.core.errors import ConfigError
from lps.core.keeplist import DEFAULT_KEEP_PACKAGES
from lps.core.paths import get_config_path
from lps.database.pacman import DEFAULT_DBPATH, DEFAULT_REPOSITORIES, DEFAULT_ROOT

logger = logging.getLogger(__name__)


class LpsConfig(BaseModel):
    """Configuration for the package database and keep list.

    Attributes:
        root: Installation root handed to pacman.
        dbpath: pacman database directory.
        repositories: Sync repositories to take upgrades from, in priority order.
        default_keep: Names seeded into an empty keep list.
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[Path, Field(description="Installation root")] = DEFAULT_ROOT
    dbpath: Annotated[Path, Field(description="pacman database directory")] = DEFAULT_DBPATH
    repositories: Annotated[
        list[str],
        Field(min_length=1, description="Sync repositories in priority order"),
    ] = list(DEFAULT_REPOSITORIES)
    default_keep: Annotated[
        list[str],
        Field(min_length=1, description="Keep-list seed when the file is empty"),
    ] = list(DEFAULT_KEEP_PACKAGES)

    @field_validator("repositories", "default_keep")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Reject blank names and duplicates."""
        names = [name.strip() for name in v]
        if any(not name for name in names):
            msg = "names cannot be empty"
            raise ValueError(msg)
        if len(set(names)) != len(names):
            msg = "names must be unique"
            raise ValueError(msg)
        return names


def load_config(path: Path | None = None) -> LpsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated LpsConfig; defaults when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path)
        return LpsConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return LpsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
