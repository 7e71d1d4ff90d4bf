"""Scroll-and-select state machine for the upgrade picker.

The state holds the fixed, sorted candidate list plus three integers:
the first visible item (``viewport_start``), the highlighted row within
the viewport (``cursor_offset``) and the number of visible rows
(``viewport_height``). Each action mutates the state in place.

Invariants kept by every transition:

- ``0 <= viewport_start``
- ``0 <= cursor_offset < viewport_height``
- ``viewport_start + cursor_offset`` indexes an item when items exist
"""

from collections.abc import Sequence
from enum import Enum

from lps.models.package import UpgradeCandidate


class Action(str, Enum):
    """Discrete input events understood by SelectionState."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    TOGGLE_SELECT = "toggle_select"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    RESIZE = "resize"
    QUIT = "quit"


class SelectionState:
    """Viewport, cursor and selection flags over a fixed candidate list.

    Attributes:
        viewport_start: Index of the first visible item.
        cursor_offset: Highlighted row, relative to viewport_start.
        viewport_height: Number of visible rows (at least 1).
    """

    def __init__(self, items: Sequence[UpgradeCandidate], viewport_height: int = 1) -> None:
        """Initialize the state with the cursor on the first item.

        Args:
            items: Candidates in display order; the order never changes.
            viewport_height: Initial number of visible rows.
        """
        self._items: tuple[UpgradeCandidate, ...] = tuple(items)
        self.viewport_start = 0
        self.cursor_offset = 0
        self.viewport_height = max(1, viewport_height)

    @property
    def items(self) -> tuple[UpgradeCandidate, ...]:
        """All candidates in display order."""
        return self._items

    @property
    def cursor_index(self) -> int:
        """Absolute index of the highlighted item."""
        return self.viewport_start + self.cursor_offset

    @property
    def current(self) -> UpgradeCandidate | None:
        """The highlighted candidate, or None when there are no items."""
        if not self._items:
            return None
        return self._items[self.cursor_index]

    def visible_rows(self) -> list[tuple[int, UpgradeCandidate]]:
        """Return (row, candidate) pairs for every row with an item."""
        end = min(self.viewport_start + self.viewport_height, len(self._items))
        return [
            (index - self.viewport_start, self._items[index])
            for index in range(self.viewport_start, end)
        ]

    def selected_names(self) -> list[str]:
        """Return the names of all selected candidates in display order."""
        return [item.name for item in self._items if item.selected]

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def move_down(self) -> None:
        """Move the cursor one item down, scrolling at the bottom row."""
        count = len(self._items)
        if not count:
            return

        at_bottom_row = self.cursor_offset == self.viewport_height - 1
        more_below = self.viewport_start + self.viewport_height < count

        if at_bottom_row and more_below:
            self.viewport_start += 1
        elif self.cursor_offset < min(self.viewport_height, count - self.viewport_start) - 1:
            self.cursor_offset += 1

    def move_up(self) -> None:
        """Move the cursor one item up, scrolling at the top row."""
        if not self._items:
            return

        if self.cursor_offset == 0 and self.viewport_start > 0:
            self.viewport_start -= 1
        elif self.cursor_offset > 0:
            self.cursor_offset -= 1

    def toggle_select(self) -> None:
        """Flip the highlighted item's selection, then advance like move_down."""
        current = self.current
        if current is None:
            return

        current.selected = not current.selected
        self.move_down()

    def page_down(self) -> None:
        """Scroll the viewport half a page down."""
        if not self._items:
            return

        self.viewport_start += self.viewport_height // 2
        max_start = max(0, len(self._items) - self.viewport_height)
        if self.viewport_start > max_start:
            self.viewport_start = max_start
        self._clamp_cursor()

    def page_up(self) -> None:
        """Scroll the viewport half a page up."""
        if not self._items:
            return

        self.viewport_start -= self.viewport_height // 2
        if self.viewport_start < 0:
            self.viewport_start = 0
        self._clamp_cursor()

    def resize(self, height: int) -> None:
        """Change the number of visible rows.

        Args:
            height: New viewport height; values below 1 count as 1.
        """
        self.viewport_height = max(1, height)
        self._clamp_cursor()

    def _clamp_cursor(self) -> None:
        last_row = min(self.viewport_height, len(self._items) - self.viewport_start) - 1
        self.cursor_offset = max(0, min(self.cursor_offset, last_row))

    def dispatch(self, action: Action, height: int | None = None) -> bool:
        """Apply one action.

        Args:
            action: The input event.
            height: New viewport height, required for Action.RESIZE.

        Returns:
            False once the action is QUIT, True otherwise.

        Raises:
            ValueError: If RESIZE is dispatched without a height.
        """
        if action == Action.QUIT:
            return False

        if action == Action.RESIZE:
            if height is None:
                msg = "RESIZE requires a height"
                raise ValueError(msg)
            self.resize(height)
        elif action == Action.MOVE_DOWN:
            self.move_down()
        elif action == Action.MOVE_UP:
            self.move_up()
        elif action == Action.TOGGLE_SELECT:
            self.toggle_select()
        elif action == Action.PAGE_DOWN:
            self.page_down()
        elif action == Action.PAGE_UP:
            self.page_up()
        return True
