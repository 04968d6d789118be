"""Configuration management for Crewday."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CREWDAY_HOME = Path(os.environ.get("CREWDAY_HOME", Path.home() / "crewday"))
CONFIG_FILE = CREWDAY_HOME / "config" / "crewday.conf"
LOG_DIR = CREWDAY_HOME / "logs"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Crewday configuration."""

    log_file: str = str(LOG_DIR / "astronaut_schedule.log")
    log_level: str = "INFO"
    echo_conflicts: bool = True
    log_conflicts: bool = False


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Ignoring {key.upper()}={value!r}: expected true or false")
    return default


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from crewday.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                value = value[1:end_quote]
            else:
                value = value[1:]
        else:
            # Unquoted: strip inline comments
            if "#" in value:
                value = value.split("#")[0].strip()

        match key:
            case "log_file":
                config.log_file = str(Path(value).expanduser())
            case "log_level":
                config.log_level = value.upper()
            case "echo_conflicts":
                config.echo_conflicts = _parse_bool(key, value, config.echo_conflicts)
            case "log_conflicts":
                config.log_conflicts = _parse_bool(key, value, config.log_conflicts)

    return config
