"""Configuration file management for ymd."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from ymd.clock import LOCAL, resolve_zone
from ymd.domain.models import DayOfWeek

logger = logging.getLogger(__name__)

ZONE_ENV = "YMD_ZONE"
WEEK_START_ENV = "YMD_WEEK_START"


@dataclass(frozen=True)
class Settings:
    """Resolved settings: environment over config file over defaults."""

    zone: str = LOCAL
    week_start: DayOfWeek = DayOfWeek.SUNDAY


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "ymd" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "zone": Settings.zone,
        "week_start": int(Settings.week_start),
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_week_start(value: Any) -> DayOfWeek:
    """Parse a week start day from a number (0-6) or a day name.

    Raises:
        ValueError: If value is not a day of the week.
    """
    if isinstance(value, bool) or not isinstance(value, int | str):
        raise ValueError(f"Unknown day of week: {value!r}")
    if isinstance(value, str) and not value.strip().isdigit():
        try:
            return DayOfWeek[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown day of week: {value!r}") from None
    return DayOfWeek(int(value))


def load_settings(config_path: Path | None = None) -> Settings:
    """Resolve settings from the environment, the config file and defaults.

    A missing config file is not an error.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Resolved settings.

    Raises:
        ValueError: If the zone or week start is invalid.
    """
    try:
        config = load_config(config_path)
        logger.debug("Loaded config from %s", config_path or get_config_path())
    except FileNotFoundError:
        logger.debug("No config file, using defaults")
        config = {}

    zone = os.environ.get(ZONE_ENV, config.get("zone", Settings.zone))
    week_start = os.environ.get(WEEK_START_ENV, config.get("week_start", Settings.week_start))

    resolve_zone(zone)
    return Settings(zone=zone, week_start=parse_week_start(week_start))
