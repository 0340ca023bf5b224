"""Configuration presets for the rename tool, stored as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from .errors import ConfigLoadError
from .models_fs import NumberingOptions, NumberingPosition, RenameConfiguration

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "bulk-rename-preview" / "config.json"


def configuration_to_dict(config: RenameConfiguration) -> dict:
    """Serialize a configuration to plain JSON types"""
    data = asdict(config)
    data["numbering"]["position"] = config.numbering.position.value
    return data


def _typed(data: dict, key: str, default, kind: type):
    """Read a key, requiring the JSON type of its default"""
    value = data.get(key, default)
    # bool is a subclass of int, so it is never accepted as a number
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


def configuration_from_dict(data: dict) -> RenameConfiguration:
    """
    Build a configuration from a dict, falling back to defaults for
    missing keys. Unknown keys are ignored; values of the wrong type raise
    ValueError.
    """
    defaults = RenameConfiguration()
    numbering_data = data.get("numbering")
    if numbering_data is None:
        numbering_data = {}
    if not isinstance(numbering_data, dict):
        raise ValueError(f"numbering must be an object, got {numbering_data!r}")
    default_numbering = NumberingOptions()

    try:
        position = NumberingPosition(numbering_data.get("position", default_numbering.position.value))
    except ValueError as exc:
        raise ValueError(f"Unknown numbering position: {numbering_data.get('position')!r}") from exc

    numbering = NumberingOptions(
        enabled=_typed(numbering_data, "enabled", default_numbering.enabled, bool),
        start_at=_typed(numbering_data, "start_at", default_numbering.start_at, int),
        increment=_typed(numbering_data, "increment", default_numbering.increment, int),
        padding=max(0, _typed(numbering_data, "padding", default_numbering.padding, int)),
        position=position,
        insert_index=max(0, _typed(numbering_data, "insert_index", default_numbering.insert_index, int)),
        separator=_typed(numbering_data, "separator", default_numbering.separator, str),
    )
    return RenameConfiguration(
        find_text=_typed(data, "find_text", defaults.find_text, str),
        replace_text=_typed(data, "replace_text", defaults.replace_text, str),
        case_sensitive=_typed(data, "case_sensitive", defaults.case_sensitive, bool),
        regex_mode=_typed(data, "regex_mode", defaults.regex_mode, bool),
        replace_first_only=_typed(data, "replace_first_only", defaults.replace_first_only, bool),
        include_extension=_typed(data, "include_extension", defaults.include_extension, bool),
        numbering=numbering,
    )


def load_configuration(path: Optional[Path] = None) -> RenameConfiguration:
    """
    Load a configuration preset

    A missing default preset yields the default configuration; a missing
    explicit path is an error.
    """
    is_default_path = path is None
    path = Path(path) if path else CONFIG_PATH

    if not path.exists():
        if is_default_path:
            logger.debug("No preset at %s, using defaults", path)
            return RenameConfiguration()
        raise ConfigLoadError(path, f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(path, f"Failed to parse config: {exc}") from exc
    except OSError as exc:  # pragma: no cover - depends on filesystem issues
        raise ConfigLoadError(path, f"Unable to read config: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigLoadError(path, "Config must be a JSON object")

    try:
        config = configuration_from_dict(data)
    except (TypeError, ValueError) as exc:
        raise ConfigLoadError(path, f"Invalid config value: {exc}") from exc

    logger.info("Loaded preset from %s", path)
    return config


def save_configuration(config: RenameConfiguration, path: Optional[Path] = None) -> Path:
    """Write a configuration preset, creating parent directories"""
    path = Path(path) if path else CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(configuration_to_dict(config), indent=2), encoding="utf-8")
    logger.info("Saved preset to %s", path)
    return path


__all__ = [
    "CONFIG_PATH",
    "configuration_from_dict",
    "configuration_to_dict",
    "load_configuration",
    "save_configuration",
]
