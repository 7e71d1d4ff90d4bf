"""Interactive terminal picker for upgrade candidates."""

from lps.tui.app import UpgradePicker, run_picker
from lps.tui.render import Surface, draw, fit_to_column, wrap_words

__all__ = ["Surface", "UpgradePicker", "draw", "fit_to_column", "run_picker", "wrap_words"]
