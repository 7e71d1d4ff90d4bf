"""Interactive upgrade picker built on Textual.

The app renders the SelectionState through the drawing rules in
``lps.tui.render``, handles exactly one key or resize event at a time,
and exits with the selected package names.
"""

import logging
import sys
from collections.abc import Sequence

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Resize
from textual.widgets import Static

from lps.core.errors import EventSourceError, TerminalInitError
from lps.core.selection import Action, SelectionState
from lps.core.theme import ThemeColors, get_colors
from lps.models.package import UpgradeCandidate
from lps.tui.render import draw

logger = logging.getLogger(__name__)


class FrameSurface:
    """Surface that collects one frame as Rich text."""

    def __init__(self, selected_style: Style) -> None:
        self._selected_style = selected_style
        self._cursor_style = Style(reverse=True)
        self.rows = Text(no_wrap=True, overflow="crop")
        self.description = Text(no_wrap=True, overflow="crop")

    def draw_row(self, row: int, text: str, *, selected: bool, cursor: bool) -> None:
        style = Style()
        if selected:
            style += self._selected_style
        if cursor:
            style += self._cursor_style
        if row:
            self.rows.append("\n")
        self.rows.append(text, style=style)

    def draw_description(self, lines: list[str]) -> None:
        self.description = Text("\n".join(lines), no_wrap=True, overflow="crop")


class UpgradePicker(App[list[str]]):
    """Scroll through upgrade candidates and toggle the ones to upgrade."""

    CSS = """
    Screen {
        layout: horizontal;
    }
    #rows {
        width: 1fr;
        height: 100%;
    }
    #description {
        width: 1fr;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("j,down", "move_down", "Down", show=False),
        Binding("k,up", "move_up", "Up", show=False),
        Binding("space,enter", "toggle_select", "Toggle", show=False),
        Binding("ctrl+d", "page_down", "Half page down", show=False),
        Binding("ctrl+u", "page_up", "Half page up", show=False),
        Binding("q", "finish", "Quit", show=False),
    ]

    def __init__(self, state: SelectionState, colors: ThemeColors | None = None) -> None:
        super().__init__()
        self.state = state
        colors = colors or get_colors()
        # Bold foreground only; a bold background blinks on some terminals
        self._selected_style = Style(bold=True, color=colors.selected)

    def compose(self) -> ComposeResult:
        yield Static(id="rows")
        yield Static(id="description")

    def on_mount(self) -> None:
        self.state.dispatch(Action.RESIZE, height=self.size.height)
        self.redraw()

    def on_resize(self, event: Resize) -> None:
        self.state.dispatch(Action.RESIZE, height=event.size.height)
        self.redraw()

    def redraw(self) -> None:
        """Redraw both panes from the current state."""
        surface = FrameSurface(self._selected_style)
        draw(self.state, surface, self.size.width)
        self.query_one("#rows", Static).update(surface.rows)
        self.query_one("#description", Static).update(surface.description)

    def _apply(self, action: Action) -> None:
        self.state.dispatch(action)
        self.redraw()

    def action_move_down(self) -> None:
        self._apply(Action.MOVE_DOWN)

    def action_move_up(self) -> None:
        self._apply(Action.MOVE_UP)

    def action_toggle_select(self) -> None:
        self._apply(Action.TOGGLE_SELECT)

    def action_page_down(self) -> None:
        self._apply(Action.PAGE_DOWN)

    def action_page_up(self) -> None:
        self._apply(Action.PAGE_UP)

    def action_finish(self) -> None:
        self.state.dispatch(Action.QUIT)
        self.exit(self.state.selected_names())


def _is_terminal() -> bool:
    # Textual draws on stderr and reads keys from stdin
    stderr = sys.__stderr__
    return sys.stdin.isatty() and stderr is not None and stderr.isatty()


def run_picker(candidates: Sequence[UpgradeCandidate]) -> list[str]:
    """Run the interactive picker until the user quits.

    Args:
        candidates: Sorted, non-empty candidate list.

    Returns:
        Names of the selected candidates in display order.

    Raises:
        TerminalInitError: If stdin or stderr is not a terminal.
        EventSourceError: If the app stops because reading events failed.
    """
    if not _is_terminal():
        msg = "Failed to initialize terminal: stdin and stderr must be a TTY"
        raise TerminalInitError(msg)

    app = UpgradePicker(SelectionState(candidates))
    try:
        result = app.run()
    except OSError as e:
        msg = f"Failed to read terminal events: {e}"
        raise EventSourceError(msg) from e

    if app.return_code:
        msg = f"Terminal event loop failed (return code {app.return_code})"
        raise EventSourceError(msg)

    logger.debug("Picker closed with %d selected", len(result or []))
    return result or []
