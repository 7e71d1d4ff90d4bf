"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import lps.core.theme as theme_module
import pytest
from lps.core.theme import (
    ThemeColors,
    get_bundled_theme_path,
    get_colors,
    get_rich_theme,
    get_theme,
    load_theme,
    read_theme_file,
)
from pydantic import ValidationError
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has defaults for every colour."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.selected == "#f5b332"
        assert colors.protected == "#226666"

    def test_short_and_long_hex(self) -> None:
        """Both #RGB and #RRGGBB are accepted."""
        colors = ThemeColors(text="#abc", muted=" #AABBCC ")
        assert colors.text == "#abc"
        assert colors.muted == "#AABBCC"

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            ("ffffff", "must start with '#'"),
            ("#ff", "#RGB or #RRGGBB"),
            ("#fffffff", "#RGB or #RRGGBB"),
            ("#gggggg", "invalid hex color"),
            (123, "must be a string"),
        ],
    )
    def test_invalid_colors(self, value: object, message: str) -> None:
        """Malformed colours are rejected with a reason."""
        with pytest.raises(ValidationError, match=message):
            ThemeColors(selected=value)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValidationError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestReadThemeFile:
    """Tests for read_theme_file function."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        """String values from [colors] are returned."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nborder = 5\n')

        assert read_theme_file(theme_file) == {"text": "#000000"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file reads as empty."""
        assert read_theme_file(tmp_path / "nope.toml") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML reads as empty."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml")

        assert read_theme_file(theme_file) == {}

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        """A scalar colors key reads as empty."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert read_theme_file(theme_file) == {}

    def test_bundled_theme_is_complete(self) -> None:
        """The shipped theme defines every colour."""
        colors = read_theme_file(get_bundled_theme_path())

        assert set(colors) == set(ThemeColors.model_fields)


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_only(self, tmp_path: Path) -> None:
        """Without overrides the bundled colours are used."""
        colors = load_theme(tmp_path / "missing.toml")

        assert colors == ThemeColors()

    def test_partial_override(self, tmp_path: Path) -> None:
        """User values replace only the colours they name."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nselected = "#00ff00"\n')

        colors = load_theme(user_theme)

        assert colors.selected == "#00ff00"
        assert colors.header == "#69B9A1"

    def test_invalid_override_falls_back(self, tmp_path: Path) -> None:
        """An invalid user colour yields the default palette."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nselected = "yellow"\n')

        assert load_theme(user_theme) == ThemeColors()

    def test_default_user_path(self, config_home: Path) -> None:
        """The XDG theme file is read when no path is given."""
        user_theme = config_home / "lps" / "theme.toml"
        user_theme.parent.mkdir()
        user_theme.write_text('[colors]\nprotected = "#123456"\n')

        assert load_theme().protected == "#123456"


class TestRichTheme:
    """Tests for Rich theme construction and caching."""

    def test_styles(self) -> None:
        """Picker and console styles are present."""
        theme = get_rich_theme(ThemeColors())

        for name in ("text", "error", "selected", "cursor", "protected", "bold_header"):
            assert name in theme.styles
        assert theme.styles["selected"].bold is True
        assert theme.styles["cursor"].reverse is True

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Colours and theme are built once."""
        monkeypatch.setattr(theme_module, "_colors", None)
        monkeypatch.setattr(theme_module, "_theme", None)

        assert get_colors() is get_colors()
        theme = get_theme()
        assert isinstance(theme, Theme)
        assert get_theme() is theme
