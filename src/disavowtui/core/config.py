"""Configuration loader for DisavowTUI.

User preferences live in a single YAML file. A missing file means
defaults; a file that exists but cannot be parsed or validated raises
ConfigError.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from rich.console import Console
from rich.logging import RichHandler

from disavowtui.core.exceptions import ConfigError
from disavowtui.core.models import AppSettings


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_BOOL_KEYS = ("dedupe", "skip_non_url", "utf8_check")
_STR_KEYS = ("comment", "theme", "log_level")
_PATH_KEYS = ("download_dir", "log_file")


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the user configuration directory (~/.config/disavowtui)."""
    return Path.home() / ".config" / "disavowtui"


def get_user_config_path() -> Path:
    return get_config_dir() / "config.yaml"


# ============================================================================
# Settings Loader
# ============================================================================

def load_user_config(config_file: Path | str | None = None) -> AppSettings:
    """Load user settings from YAML.

    Args:
        config_file: Path to config YAML. If None, uses the user config path

    Returns:
        AppSettings with defaults filled in for missing keys

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    config_path = Path(config_file) if config_file is not None else get_user_config_path()

    if not config_path.exists():
        if config_file is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        return AppSettings()

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}") from e

    if data is None:
        return AppSettings()

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping")

    return settings_from_dict(data)


def settings_from_dict(data: dict[str, Any]) -> AppSettings:
    """Validate a raw mapping and build AppSettings from it."""
    unknown = set(data) - set(_BOOL_KEYS) - set(_STR_KEYS) - set(_PATH_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {}

    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"'{key}' must be true or false")
            values[key] = data[key]

    for key in _STR_KEYS:
        if key in data and data[key] is not None:
            if not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a string")
            values[key] = data[key]

    for key in _PATH_KEYS:
        if data.get(key):
            if not isinstance(data[key], str):
                raise ConfigError(f"'{key}' must be a path string")
            values[key] = Path(data[key]).expanduser()

    if "log_level" in values:
        level = values["log_level"].upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log_level '{values['log_level']}'. "
                f"Must be one of: {', '.join(LOG_LEVELS)}"
            )
        values["log_level"] = level

    return AppSettings(**values)


def save_user_config(settings: AppSettings, config_file: Path | str | None = None) -> Path:
    """Write settings to YAML and return the path written."""
    config_path = Path(config_file) if config_file is not None else get_user_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to write config file: {e}") from e

    return config_path


# ============================================================================
# Logging
# ============================================================================

def configure_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    *,
    console: bool = True,
) -> None:
    """Route package logs to stderr through rich, plus an optional file.

    The TUI passes console=False since textual owns the terminal.
    """
    root = logging.getLogger("disavowtui")
    root.setLevel(level.upper())
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    if console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to open log file {log_file}: {e}") from e
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(file_handler)
