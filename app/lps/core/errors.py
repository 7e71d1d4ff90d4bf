"""Fatal error types and process exit codes.

Every condition that aborts a run is an ``LpsError`` subclass carrying the
exit code the CLI terminates with.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Distinguished process exit codes."""

    OK = 0
    REPOSITORY_REGISTRATION = 1
    DATABASE_INIT = 10
    EVENT_SOURCE = 15
    NO_CANDIDATES = 20
    CONFIG_DIR_CREATE = 30
    CONFIG_DIR_ACCESS = 31
    CONFIG_DIR_NOT_DIRECTORY = 32
    CONFIG_FILE_OPEN = 35
    CONFIG_INVALID = 36
    TERMINAL_INIT = 100


class LpsError(Exception):
    """Base exception for fatal lps errors."""

    exit_code: ExitCode = ExitCode.DATABASE_INIT


class DatabaseInitError(LpsError):
    """Raised when the package database cannot be opened."""

    exit_code = ExitCode.DATABASE_INIT


class RepositoryRegistrationError(LpsError):
    """Raised when a configured sync repository cannot be registered."""

    exit_code = ExitCode.REPOSITORY_REGISTRATION


class ConfigDirCreateError(LpsError):
    """Raised when the config directory does not exist and cannot be created."""

    exit_code = ExitCode.CONFIG_DIR_CREATE


class ConfigDirAccessError(LpsError):
    """Raised when the config directory cannot be inspected."""

    exit_code = ExitCode.CONFIG_DIR_ACCESS


class ConfigDirNotDirectoryError(LpsError):
    """Raised when the config directory path exists but is not a directory."""

    exit_code = ExitCode.CONFIG_DIR_NOT_DIRECTORY


class ConfigFileOpenError(LpsError):
    """Raised when the keep-list file cannot be opened or written."""

    exit_code = ExitCode.CONFIG_FILE_OPEN


class ConfigError(LpsError):
    """Raised when config.toml cannot be parsed or validated."""

    exit_code = ExitCode.CONFIG_INVALID


class NoCandidatesError(LpsError):
    """Raised when no upgrade candidates remain after filtering."""

    exit_code = ExitCode.NO_CANDIDATES


class TerminalInitError(LpsError):
    """Raised when the interactive terminal cannot be set up."""

    exit_code = ExitCode.TERMINAL_INIT


class EventSourceError(LpsError):
    """Raised when reading terminal events fails during the selection loop."""

    exit_code = ExitCode.EVENT_SOURCE
