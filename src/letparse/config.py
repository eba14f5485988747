# Copyright 2026 LetParse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the LetParse configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".letparse.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class LetParseConfig:
    """Settings for scanning and output.

    Attributes:
        strict_characters: Raise on characters the scanner cannot classify
            instead of skipping them.
        indent: JSON indentation width for printed artifacts; None for compact output.
    """

    strict_characters: bool = False
    indent: int | None = 2


def load_config(path: Path) -> LetParseConfig:
    """Load and parse a LetParse configuration file.

    Args:
        path: Path to the `.letparse.yaml` file.

    Returns:
        A LetParseConfig instance; keys missing from the file keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


def find_config(directory: Path) -> Path | None:
    """Return the configuration file in *directory*, or None if there is none."""
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"strict-characters", "indent"})


def _parse_config(text: str, source_label: str = "<string>") -> LetParseConfig:
    """Parse configuration YAML text into a LetParseConfig.

    An empty document is treated as all defaults.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return LetParseConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = LetParseConfig()
    if "strict-characters" in data:
        value = data["strict-characters"]
        if not isinstance(value, bool):
            raise ConfigError(f"{source_label}: 'strict-characters' must be a boolean")
        config.strict_characters = value
    if "indent" in data:
        config.indent = _parse_indent(data["indent"], source_label)
    return config


def _parse_indent(value: object, source_label: str) -> int | None:
    if value is None:
        return None
    # bool is a subclass of int.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{source_label}: 'indent' must be a non-negative integer or null")
    return value
