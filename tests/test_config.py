"""Tests for config.py: get_config_path() and load_styles()."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from chatmark.config import ConfigError, get_config_path, load_styles
from chatmark.styles import DEFAULT_STYLES, StyleKey

# === get_config_path() ===


def test_get_config_path_respects_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """XDG_CONFIG_HOME overrides the default config location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_path() == tmp_path / "chatmark" / "styles.toml"


def test_get_config_path_falls_back_to_home(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without XDG_CONFIG_HOME, defaults to ~/.config/chatmark/styles.toml."""
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    assert get_config_path() == Path.home() / ".config" / "chatmark" / "styles.toml"


# === load_styles() ===


def test_load_styles_overrides_defaults(tmp_path: Path) -> None:
    """Listed styles replace defaults; the rest are kept."""
    config_file = tmp_path / "styles.toml"
    config_file.write_text(
        textwrap.dedent("""\
        [styles]
        link = "bold blue underline"
        heading_1 = "bold magenta"
        """)
    )
    styles = load_styles(config_file)
    assert styles[StyleKey.LINK] == "bold blue underline"
    assert styles[StyleKey.HEADING_1] == "bold magenta"
    assert styles[StyleKey.CODE] == DEFAULT_STYLES[StyleKey.CODE]


def test_load_styles_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Missing config file returns the defaults without raising."""
    assert load_styles(tmp_path / "nonexistent.toml") == DEFAULT_STYLES


def test_load_styles_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Overrides apply to a copy of the default table."""
    config_file = tmp_path / "styles.toml"
    config_file.write_text('[styles]\nplain = "red"\n')
    load_styles(config_file)
    assert DEFAULT_STYLES[StyleKey.PLAIN] == ""


@pytest.mark.parametrize(
    ("_problem", "toml"),
    [
        ("malformed", "[styles\nbroken = "),
        ("unknown key", '[styles]\nsparkles = "bold"\n'),
        ("not a string", "[styles]\nbold = 1\n"),
        ("bad rich style", '[styles]\nbold = "notacolor on"\n'),
        ("not a table", 'styles = "bold"\n'),
    ],
)
def test_load_styles_invalid_raises(tmp_path: Path, _problem: str, toml: str) -> None:
    """Invalid style files raise ConfigError."""
    config_file = tmp_path / "styles.toml"
    config_file.write_text(toml)
    with pytest.raises(ConfigError):
        load_styles(config_file)
