#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the textcanvas CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON format, and turning them into keyword
arguments for :class:`~textcanvas.options.ParserConfig`.

A configuration file holds option names as keys::

    # .textcanvas.toml
    css_profile = "strict"
    display_links = true

    [css_overrides.span]
    display = "block"
    margin_after = 1

The ``css_overrides`` table maps tag names to :class:`ElementStyle` fields;
enum fields take their lower-case value names (``"block"``, ``"pre"``, ...).
"""

import json
import logging
import sys
from dataclasses import fields
from enum import Enum
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from textcanvas.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from textcanvas.exceptions import ConfigError
from textcanvas.model.element import Display, ElementStyle, HorizontalAlignment, VerticalAlignment, WhiteSpace
from textcanvas.options import ParserConfig

logger = logging.getLogger(__name__)

_ENUM_STYLE_FIELDS: Dict[str, type[Enum]] = {
    "display": Display,
    "whitespace": WhiteSpace,
    "align": HorizontalAlignment,
    "valign": VerticalAlignment,
}
# fields that are managed by the renderer and cannot be configured
_INTERNAL_STYLE_FIELDS = frozenset({"tag", "canvas", "previous_margin_after"})
_INT_STYLE_FIELDS = frozenset({"margin_before", "margin_after", "padding_inline"})
_STR_STYLE_FIELDS = frozenset({"prefix", "suffix", "list_bullet"})
_BOOL_STYLE_FIELDS = frozenset({"limit_whitespace_affixes"})


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.textcanvas]`` table from a pyproject.toml file.

    Returns an empty dict if the table does not exist.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for ``.textcanvas.toml``, ``.textcanvas.yaml``,
    ``.textcanvas.yml``, ``.textcanvas.json`` and finally a ``pyproject.toml``
    with a ``[tool.textcanvas]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
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


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            # an empty YAML document
            if config is None:
                config = {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json", str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid configuration file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"Configuration file {config_path} must contain a table/mapping, got {type(config).__name__}",
            str(config_path),
        )
    return config


def _convert_style_value(tag: str, key: str, value: Any, config_path: Optional[str]) -> Any:
    """Convert a configured style value to the type of the ``ElementStyle`` field."""
    location = f"css_overrides.{tag}.{key}"
    enum_type = _ENUM_STYLE_FIELDS.get(key)
    if enum_type is not None:
        try:
            return enum_type(str(value).lower())
        except ValueError as e:
            choices = ", ".join(member.value for member in enum_type)
            raise ConfigError(
                f"Invalid value for {location}: {value!r}. Expected one of: {choices}", config_path, e
            ) from e

    if key in _INT_STYLE_FIELDS:
        # "2" is accepted, 2.5 and true are not
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ConfigError(f"{location} must be a non-negative integer, got {value!r}", config_path)
        try:
            number = int(value)
        except ValueError as e:
            raise ConfigError(f"{location} must be a non-negative integer, got {value!r}", config_path, e) from e
        if number < 0:
            raise ConfigError(f"{location} must be a non-negative integer, got {value!r}", config_path)
        return number
    if key in _STR_STYLE_FIELDS and not isinstance(value, str):
        raise ConfigError(f"{location} must be a string, got {value!r}", config_path)
    if key in _BOOL_STYLE_FIELDS and not isinstance(value, bool):
        raise ConfigError(f"{location} must be true or false, got {value!r}", config_path)
    return value


def _build_element_style(tag: str, raw: Any, config_path: Optional[str]) -> ElementStyle:
    if not isinstance(raw, dict):
        raise ConfigError(f"css_overrides.{tag} must be a table, got {type(raw).__name__}", config_path)

    known = {f.name for f in fields(ElementStyle)} - _INTERNAL_STYLE_FIELDS
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            raise ConfigError(f"Unknown style field css_overrides.{tag}.{key}", config_path)
        values[key] = _convert_style_value(tag, key, value, config_path)
    return ElementStyle(tag=tag, **values)


def config_to_options(config: Dict[str, Any], config_path: Optional[str] = None) -> Dict[str, Any]:
    """Validate a configuration dictionary and convert it to ``ParserConfig`` keyword arguments.

    Parameters
    ----------
    config : dict
        Configuration as loaded by :func:`load_config_file`
    config_path : str, optional
        Source of the configuration, used in error messages

    Returns
    -------
    dict
        Keyword arguments for :class:`ParserConfig`

    Raises
    ------
    ConfigError
        If the configuration contains unknown keys or invalid style overrides

    """
    known = set(ParserConfig.field_names())
    unknown = sorted(key for key in config if key.replace("-", "_") not in known)
    if unknown:
        raise ConfigError(f"Unknown configuration option(s): {', '.join(unknown)}", config_path)

    options = {key.replace("-", "_"): value for key, value in config.items()}
    overrides = options.get("css_overrides")
    if overrides is not None:
        if not isinstance(overrides, dict):
            raise ConfigError(f"css_overrides must be a table, got {type(overrides).__name__}", config_path)
        options["css_overrides"] = {
            tag: _build_element_style(tag, raw, config_path) for tag, raw in overrides.items()
        }
    return options
