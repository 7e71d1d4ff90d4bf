"""Colour theme for console output and the upgrade picker.

The bundled ``lps/data/theme.toml`` provides every colour; a user file at
``~/.config/lps/theme.toml`` may override any subset of them.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from rich.theme import Theme

from lps.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def _check_hex(value: object) -> str:
    if not isinstance(value, str):
        msg = "color must be a string"
        raise ValueError(msg)
    color = value.strip()
    digits = color.removeprefix("#")
    if digits == color:
        msg = "color must start with '#'"
        raise ValueError(msg)
    if len(digits) not in (3, 6):
        msg = "color must be #RGB or #RRGGBB format"
        raise ValueError(msg)
    try:
        int(digits, 16)
    except ValueError:
        msg = f"invalid hex color '{color}'"
        raise ValueError(msg) from None
    return color


HexColor = Annotated[str, BeforeValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Validated colour palette."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Picker row flagged for upgrade; closure members in `lps closure`
    selected: HexColor = "#f5b332"
    protected: HexColor = "#226666"


def get_bundled_theme_path() -> Path:
    """Return the path of the theme shipped with the package."""
    return Path(str(resources.files("lps.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, str]:
    """Read the ``[colors]`` table of a theme file.

    Unreadable or malformed files are logged and treated as empty, so a
    broken user theme never stops the program.

    Args:
        path: TOML file to read.

    Returns:
        Colour name to value; non-string values are dropped.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled theme with user overrides applied.

    Args:
        user_path: Override file; defaults to ~/.config/lps/theme.toml.

    Returns:
        ThemeColors; the built-in defaults if the merged result is invalid.
    """
    merged = read_theme_file(get_bundled_theme_path())
    if not merged:
        logger.error("Bundled theme is missing or empty; installation may be corrupted")

    overrides = read_theme_file(user_path or get_user_theme_path())
    if overrides:
        logger.debug("Applying %d user theme overrides", len(overrides))
        merged.update(overrides)

    try:
        return ThemeColors.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Build the Rich styles used by console output.

    Args:
        colors: Palette to convert.

    Returns:
        Rich Theme keyed by style name.
    """
    return Theme(
        {
            "text": colors.text,
            "muted": colors.muted,
            "header": colors.header,
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "protected": colors.protected,
            "selected": f"bold {colors.selected}",
            "cursor": "reverse",
            "bold_header": f"bold {colors.header}",
            "package.name": f"bold {colors.text}",
        }
    )


_colors: ThemeColors | None = None
_theme: Theme | None = None


def get_colors() -> ThemeColors:
    """Return the palette, loading it on first use."""
    global _colors
    if _colors is None:
        _colors = load_theme()
    return _colors


def get_theme() -> Theme:
    """Return the Rich theme, building it on first use."""
    global _theme
    if _theme is None:
        _theme = get_rich_theme(get_colors())
    return _theme
