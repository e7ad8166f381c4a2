"""User settings for reactshift.

Settings live in ``config.yaml`` under the reactshift home directory.
Only ``package_manager`` and ``log_level`` are read; unknown keys are
ignored so the file can be shared with future versions.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from reactshift_cli.core.errors import ConfigError

logger = logging.getLogger(__name__)

PACKAGE_MANAGER_CHOICES = ("auto", "npm", "yarn", "pnpm", "bun")
DEFAULT_PACKAGE_MANAGER = "npm"

HOME_ENV_VAR = "REACTSHIFT_HOME"
PACKAGE_MANAGER_ENV_VAR = "REACTSHIFT_PACKAGE_MANAGER"
CONFIG_FILENAME = "config.yaml"


def _is_windows() -> bool:
    return os.name == "nt"


def get_reactshift_home() -> Path:
    """Return the user-global reactshift directory.

    Resolution order:
    1. REACTSHIFT_HOME environment variable
    2. ~/.reactshift/ on macOS/Linux
    3. %LOCALAPPDATA%\\reactshift\\ on Windows (via platformdirs)
    """
    if env_home := os.environ.get(HOME_ENV_VAR):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("reactshift"))

    return Path.home() / ".reactshift"


@dataclass(frozen=True)
class Settings:
    """Resolved user settings.

    Attributes:
        package_manager: One of PACKAGE_MANAGER_CHOICES. ``auto`` means
            detect from the project's lockfile.
        log_level: Name of the logging level for the ``reactshift_cli`` logger.
    """

    package_manager: str = "auto"
    log_level: str = "WARNING"


def _validate_package_manager(value: object, source: str) -> str:
    if not isinstance(value, str) or value.lower() not in PACKAGE_MANAGER_CHOICES:
        valid = ", ".join(PACKAGE_MANAGER_CHOICES)
        raise ConfigError(f"Unknown package manager {value!r} in {source}. Valid: {valid}")
    return value.lower()


def load_settings(home: Path | None = None) -> Settings:
    """Load settings from ``config.yaml`` and the environment."""
    config_file = (home or get_reactshift_home()) / CONFIG_FILENAME
    data: dict = {}

    if config_file.exists():
        yaml = YAML(typ="safe")
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.load(f) or {}
        except YAMLError as exc:
            logger.error("Failed to load config: %s", exc)
            raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {config_file}")
    else:
        logger.debug("Config file not found: %s", config_file)

    package_manager = "auto"
    if "package_manager" in data:
        package_manager = _validate_package_manager(data["package_manager"], str(config_file))
    if env_value := os.environ.get(PACKAGE_MANAGER_ENV_VAR):
        package_manager = _validate_package_manager(env_value, PACKAGE_MANAGER_ENV_VAR)

    log_level = str(data.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log_level {log_level!r} in {config_file}")

    return Settings(package_manager=package_manager, log_level=log_level)


__all__ = [
    "PACKAGE_MANAGER_CHOICES",
    "DEFAULT_PACKAGE_MANAGER",
    "HOME_ENV_VAR",
    "PACKAGE_MANAGER_ENV_VAR",
    "Settings",
    "get_reactshift_home",
    "load_settings",
]
