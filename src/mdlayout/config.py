#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for mdlayout.

A configuration file holds layout options at its top level and an optional
``style`` table overriding style sheet values:

.. code-block:: toml

    fit_content = true
    list_item_alignment = "start"

    [style]
    block_spacing = 12
    h1 = { font_size = 28, font_weight = "bold" }

JSON, TOML, YAML and the ``[tool.mdlayout]`` table of ``pyproject.toml`` are
supported. Errors are reported as :class:`argparse.ArgumentTypeError` so the
CLI can show them as usage errors.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdlayout.exceptions import StyleSheetError
from mdlayout.options import LayoutOptions
from mdlayout.styles.style_sheet import StyleSheet

CONFIG_ENV_VAR = "MDLAYOUT_CONFIG"

DEDICATED_CONFIG_FILENAMES = [".mdlayout.toml", ".mdlayout.yaml", ".mdlayout.yml", ".mdlayout.json"]

STYLE_SECTION = "style"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdlayout]`` table of a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict when the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("mdlayout", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.mdlayout] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file from ``start_dir`` up to the filesystem root.

    Each directory is checked for the dedicated ``.mdlayout.*`` files first,
    then for a ``pyproject.toml`` that has a ``[tool.mdlayout]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, the current working directory by default

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Unreadable pyproject.toml files do not stop the search
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The working directory and its parents are searched first, then the
    user's home directory for the dedicated file names only.

    Returns
    -------
    Path or None
        Path to the discovered file

    """
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path
    return None


def _check_mapping(config: Any, config_path: Path, kind: str) -> Dict[str, Any]:
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"{kind} config file {config_path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        The loaded configuration

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, has an unsupported extension or cannot
        be parsed

    Examples
    --------
    >>> config = load_config_file(".mdlayout.toml")
    >>> config.get("fit_content")
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            with open(config_path, "rb") as f:
                return _check_mapping(tomllib.load(f), config_path, "TOML")
        if ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                return _check_mapping(yaml.safe_load(f), config_path, "YAML")
        if ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                return _check_mapping(json.load(f), config_path, "JSON")
    except argparse.ArgumentTypeError:
        raise
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries, recursing into nested tables.

    Examples
    --------
    >>> merge_configs({"style": {"h1": {"font_size": 20}}}, {"style": {"block_spacing": 4}})
    {'style': {'h1': {'font_size': 20}, 'block_spacing': 4}}

    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration from the highest-priority source available.

    Priority order:
    1. Explicit config file path (``--config``)
    2. Path from the ``MDLAYOUT_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration, empty when no file was found

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)
    return {}


def options_from_config(config: Dict[str, Any], base: Optional[LayoutOptions] = None) -> LayoutOptions:
    """Build layout options from the top-level keys of a configuration.

    Parameters
    ----------
    config : dict
        Loaded configuration; the ``style`` table is ignored here
    base : LayoutOptions, optional
        Options to update, the defaults when omitted

    Raises
    ------
    argparse.ArgumentTypeError
        If a key is unknown or a value is rejected by :class:`LayoutOptions`

    """
    base = base or LayoutOptions()
    values = {key: value for key, value in config.items() if key != STYLE_SECTION}
    unknown = sorted(set(values) - LayoutOptions.field_names())
    if unknown:
        raise argparse.ArgumentTypeError(f"Unknown configuration option(s): {', '.join(unknown)}")
    try:
        return base.create_updated(**values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid layout option: {e}") from e


def style_sheet_from_config(config: Dict[str, Any], base: Optional[StyleSheet] = None) -> StyleSheet:
    """Build a style sheet from the ``style`` table of a configuration.

    Raises
    ------
    argparse.ArgumentTypeError
        If the table is malformed or rejected by :meth:`StyleSheet.from_dict`

    """
    section = config.get(STYLE_SECTION, {})
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(f"'{STYLE_SECTION}' must be a table, got {type(section).__name__}")
    try:
        return StyleSheet.from_dict(section, base=base)
    except StyleSheetError as e:
        raise argparse.ArgumentTypeError(f"Invalid style sheet: {e}") from e
