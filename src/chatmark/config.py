"""Style configuration: load and validate styles.toml."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style

from chatmark.styles import DEFAULT_STYLES, StyleKey


class ConfigError(Exception):
    """Raised when styles.toml is malformed or names an unknown style."""


def get_config_path() -> Path:
    """Return the path to styles.toml, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "chatmark" / "styles.toml"


def load_styles(path: Path) -> dict[StyleKey, str]:
    """Load style overrides from a TOML file on top of DEFAULT_STYLES.

    Returns the defaults if the file does not exist.
    Raises ConfigError on parse errors, unknown keys or invalid Rich styles.
    """
    styles = dict(DEFAULT_STYLES)
    if not path.exists():
        return styles

    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e

    overrides = data.get("styles", {})
    if not isinstance(overrides, dict):
        msg = f"[styles] in {path} must be a table"
        raise ConfigError(msg)

    for name, value in overrides.items():
        try:
            key = StyleKey(name)
        except ValueError as e:
            msg = f"Unknown style '{name}' in {path}"
            raise ConfigError(msg) from e
        if not isinstance(value, str):
            msg = f"Style '{name}' in {path} must be a string"
            raise ConfigError(msg)
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            msg = f"Invalid style '{value}' for '{name}' in {path}: {e}"
            raise ConfigError(msg) from e
        styles[key] = value
    return styles
