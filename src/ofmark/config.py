#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading.

Configuration files hold a flat table of option flags, keyed by snake_case
field name or camelCase alias (see :class:`ofmark.options.ObsidianOptions`).
Supported formats are TOML, YAML and JSON, plus a ``[tool.ofmark]`` table in
``pyproject.toml``.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from ofmark.constants import CONFIG_FILE_NAMES, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from ofmark.exceptions import ConfigError
from ofmark.options import ObsidianOptions

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.ofmark] section from a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"JSON config file must contain an object, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"YAML config file must contain a mapping, got {type(config).__name__}", config_path=str(config_path)
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping loaded from the file

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unsupported type

    Examples
    --------
    >>> config = load_config_file(".ofmark.toml")
    >>> config.get("enableCheckbox")
    True

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == PYPROJECT_FILE_NAME:
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
            )
    except OSError as e:
        raise ConfigError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    logger.debug("Loaded %d option(s) from %s", len(config), config_path)
    return config


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked for
    ``.ofmark.toml``, ``.ofmark.yaml``, ``.ofmark.yml``, ``.ofmark.json`` and
    finally a ``pyproject.toml`` that has a ``[tool.ofmark]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILE_NAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILE_NAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_options(config_path: Path | str | None = None, overrides: Optional[Dict[str, Any]] = None) -> ObsidianOptions:
    """Build options from a configuration file and explicit overrides.

    Parameters
    ----------
    config_path : Path, str or None
        Configuration file to read; None uses defaults only
    overrides : dict, optional
        Flag values applied after the file, e.g. from the command line

    Returns
    -------
    ObsidianOptions
        Resulting immutable options

    Raises
    ------
    ConfigError
        If the configuration file cannot be loaded
    ValidationError
        If a key is unknown or a value is not a boolean

    """
    options = ObsidianOptions()
    if config_path is not None:
        options = ObsidianOptions.from_mapping(load_config_file(config_path), base=options)
    if overrides:
        options = ObsidianOptions.from_mapping(overrides, base=options)
    return options
