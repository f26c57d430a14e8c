"""nbsanity configuration loaded from ``pyproject.toml`` and environment variables.

Settings live under the ``[tool.nbsanity]`` table::

    [tool.nbsanity]
    root = "notebooks"
    disable = ["HasTitleCell"]

Environment variables with the ``NBSANITY_`` prefix fill in anything the
table does not set.  ``NBSANITY_DISABLE`` takes a JSON list or a
comma-separated string.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict, SettingsError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("pyproject.toml")
_TABLE = ("tool", "nbsanity")


class ConfigError(Exception):
    """Raised when the configuration file is missing, unreadable or invalid."""


class Settings(BaseSettings):
    """Run settings.  Loaded once at start-up and passed explicitly."""

    model_config = SettingsConfigDict(
        env_prefix="NBSANITY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Directory to search for notebooks, or a single notebook file.
    root: Path = Path(".")

    # Check names to turn off.  Validated against the registry by the CLI.
    disable: Annotated[list[str], NoDecode] = []

    debug: bool = False

    @field_validator("disable", mode="before")
    @classmethod
    def split_disable(cls, v: Any) -> Any:
        # NBSANITY_DISABLE may be a JSON list or a comma-separated string.
        if isinstance(v, str):
            text = v.strip()
            if text.startswith("["):
                return json.loads(text)
            return [name.strip() for name in text.split(",") if name.strip()]
        return v


def read_tool_table(config_path: Path) -> dict[str, Any]:
    """Return the ``[tool.nbsanity]`` table of *config_path* (empty if absent).

    Raises
    ------
    ConfigError
        If the file cannot be read or is not valid TOML.
    """
    try:
        with open(config_path, "rb") as fh:
            document = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{config_path}': {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in '{config_path}': {exc}") from exc

    table: Any = document
    for key in _TABLE:
        table = table.get(key, {}) if isinstance(table, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[{'.'.join(_TABLE)}] in '{config_path}' must be a table.")
    return table


def _read_file_values(config_path: Path) -> dict[str, Any]:
    # A relative root is relative to the file that names it.
    values = read_tool_table(config_path)
    root = values.get("root")
    if isinstance(root, str) and not Path(root).is_absolute():
        values["root"] = config_path.parent / root
    return values


def load_settings(config_path: Path | None = None, **overrides: Any) -> Settings:
    """Load settings from a pyproject file and the environment.

    Parameters
    ----------
    config_path:
        Explicit config file.  It must exist.  When ``None``,
        ``./pyproject.toml`` is used if present, otherwise defaults apply.
        A relative ``root`` in the file is resolved against the file's
        directory.
    overrides:
        Values that win over both the file and the environment (CLI flags,
        tests).  ``None`` values are ignored.

    Raises
    ------
    ConfigError
        If the file is missing (explicit path only), unreadable, or its
        table does not validate.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: '{config_path}'")
        values.update(_read_file_values(config_path))
    elif DEFAULT_CONFIG_FILE.is_file():
        values.update(_read_file_values(DEFAULT_CONFIG_FILE))
    else:
        logger.debug("No %s found; using default settings.", DEFAULT_CONFIG_FILE)

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = Settings(**values)
    except (ValidationError, SettingsError) as exc:
        raise ConfigError(f"Invalid nbsanity configuration: {exc}") from exc

    if settings.debug:
        logger.info("Loaded settings: root=%s disable=%s", settings.root, settings.disable)

    return settings
