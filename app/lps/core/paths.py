"""XDG-compliant path management for lps.

This module provides the configuration paths following the XDG Base
Directory Specification.

XDG defaults:
- Config: ~/.config/lps/
"""

import logging
import os
import stat
from pathlib import Path

from lps.core.errors import ConfigDirAccessError, ConfigDirCreateError, ConfigDirNotDirectoryError

logger = logging.getLogger(__name__)

# Application identifier for directory naming
APP_NAME = "lps"

KEEP_LIST_FILENAME = "keep_packages"
CONFIG_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/lps/ (or XDG_CONFIG_HOME/lps/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_keep_list_path() -> Path:
    """Get the keep-list file path.

    Returns:
        Path to ~/.config/lps/keep_packages.
    """
    return get_config_dir() / KEEP_LIST_FILENAME


def get_config_path() -> Path:
    """Get the configuration file path.

    Returns:
        Path to ~/.config/lps/config.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/lps/theme.toml.
    """
    return get_config_dir() / THEME_FILENAME


def ensure_dir(path: Path) -> Path:
    """Create a configuration directory unless it already exists.

    Args:
        path: Directory to check or create.

    Returns:
        The existing or newly created directory path.

    Raises:
        ConfigDirCreateError: If the directory is missing and cannot be created.
        ConfigDirAccessError: If the path cannot be inspected.
        ConfigDirNotDirectoryError: If the path exists but is not a directory.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        try:
            path.mkdir(mode=0o755, parents=True)
        except OSError as e:
            msg = f"Failed to create config directory {path}: {e.strerror or e}"
            raise ConfigDirCreateError(msg) from e
        logger.debug("Created config directory %s", path)
        return path
    except OSError as e:
        msg = f"Cannot access config directory {path}: {e.strerror or e}"
        raise ConfigDirAccessError(msg) from e

    if not stat.S_ISDIR(mode):
        msg = f"Config dir is not a directory: {path}"
        raise ConfigDirNotDirectoryError(msg)
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Returns:
        Path to the configuration directory.

    Raises:
        ConfigDirCreateError: If the directory cannot be created.
        ConfigDirAccessError: If the directory cannot be inspected.
        ConfigDirNotDirectoryError: If the path is not a directory.
    """
    return ensure_dir(get_config_dir())
