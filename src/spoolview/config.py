# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating spoolview configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spoolview/  (default: ~/.config/spoolview/)
#   - State:   $XDG_STATE_HOME/spoolview/   (default: ~/.local/state/spoolview/)
#
# Files:
#   - config.toml: User configuration (mail directory, skip list, logging)
#   - spoolview.log: Log file (in state directory, unless configured)
#
# Command-line options always win over the config file.
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spoolview"

# Where local delivery agents drop the spool files
DEFAULT_MAIL_DIR = "/var/mail"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for spoolview.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spoolview/
    This is where user configuration files live (config.toml).
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for spoolview.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spoolview/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class MailConfig:
    """
    Where to find mail.

    Attributes:
        directory: The spool directory holding one file per user.
        skip: Mailbox (user) names never shown in directory mode.
    """
    directory: str = DEFAULT_MAIL_DIR
    skip: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """
    Log output settings.

    Attributes:
        level: Log level name ("DEBUG", "INFO", "WARNING", ...).
        file: Log file path. Empty means spoolview.log in the state directory.
    """
    level: str = "WARNING"
    file: str = ""


@dataclass
class Config:
    """
    Main configuration container for spoolview.

    Attributes:
        mail: Mail directory configuration.
        logging: Logging configuration.

    Usage:
        >>> config = Config.load()
        >>> config.mail.directory
        '/var/mail'
    """
    mail: MailConfig = field(default_factory=MailConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_log_path() -> Path:
        """Returns the default log file path."""
        return get_xdg_state_home() / "spoolview.log"

    def log_path(self) -> Path:
        """Returns the log file path in effect."""
        if self.logging.file:
            return Path(self.logging.file).expanduser()
        return self.default_log_path()

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read (default: XDG config location).

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.

        Returns:
            The path written.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type.
        """
        config = cls()

        # Mail settings
        mail = _section(data, "mail")
        config.mail = MailConfig(
            directory=_get(mail, "mail", "directory", str, DEFAULT_MAIL_DIR),
            skip=_get(mail, "mail", "skip", list, []),
        )
        if not all(isinstance(name, str) for name in config.mail.skip):
            raise ConfigError("mail.skip must be a list of strings")

        # Logging settings
        log = _section(data, "logging")
        config.logging = LoggingConfig(
            level=_get(log, "logging", "level", str, "WARNING").upper(),
            file=_get(log, "logging", "file", str, ""),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["mail"] = {
            "directory": self.mail.directory,
            "skip": list(self.mail.skip),
        }

        data["logging"] = {
            "level": self.logging.level,
            "file": self.logging.file,
        }

        return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a [section] table, or {} if absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _get(section: dict[str, Any], section_name: str, key: str, kind: type, default: Any) -> Any:
    """Return section[key] checked against `kind`, or the default."""
    value = section.get(key, default)
    if not isinstance(value, kind):
        raise ConfigError(f"{section_name}.{key} must be of type {kind.__name__}")
    return value


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config and logs are stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.default_log_path()}")
