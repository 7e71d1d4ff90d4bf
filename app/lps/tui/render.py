"""Drawing rules for the upgrade picker.

The picker draws through a narrow ``Surface`` protocol: one call per
visible row, plus one call with the word-wrapped description of the
highlighted package. Keeping the rules here lets them be exercised
without a terminal.
"""

from typing import Protocol

from lps.core.selection import SelectionState


class Surface(Protocol):
    """Something the picker can be drawn on."""

    def draw_row(self, row: int, text: str, *, selected: bool, cursor: bool) -> None:
        """Draw one list row.

        Args:
            row: Row index within the viewport.
            text: Package name already fitted to the column width.
            selected: Apply the "selected" attribute.
            cursor: Apply the "cursor" attribute.
        """
        ...

    def draw_description(self, lines: list[str]) -> None:
        """Draw the description pane, one entry per line."""
        ...


def fit_to_column(name: str, width: int) -> str:
    """Left-align a name, padding or truncating it to exactly ``width``."""
    if width <= 0:
        return ""
    return name[:width].ljust(width)


def wrap_words(text: str, width: int) -> list[str]:
    """Word-wrap text into lines no wider than ``width`` where possible.

    Words are split on whitespace. When appending the next word would
    exceed the width, it starts a new line instead; words are never
    broken, so a single word longer than the width gets a line of its own.

    Args:
        text: Text to wrap.
        width: Maximum line width in columns.

    Returns:
        Wrapped lines; empty for blank text.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        extended = f"{current} {word}" if current else word
        if current and len(extended) > width:
            lines.append(current)
            current = word
        else:
            current = extended
    if current:
        lines.append(current)
    return lines


def draw(state: SelectionState, surface: Surface, width: int) -> None:
    """Draw the whole picker onto a surface.

    The list takes the left half of ``width``; the description of the
    highlighted package fills the right half.

    Args:
        state: Current selection state.
        surface: Target surface.
        width: Total width in columns.
    """
    list_width = width // 2
    for row, item in state.visible_rows():
        surface.draw_row(
            row,
            fit_to_column(item.name, list_width),
            selected=item.selected,
            cursor=row == state.cursor_offset,
        )

    current = state.current
    description = current.record.description if current is not None else ""
    surface.draw_description(wrap_words(description, width - list_width))
