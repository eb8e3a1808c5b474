"""
Renderer for the terminal chat interface.

``render_frame`` turns the client state into a list of draw commands without
touching the terminal, ``CursesRenderer`` paints those commands on a curses
window. The screen has two regions: a bottom-anchored scrollback pane and a
one-line input bar under it.
"""

import curses
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

from PollChat.core.message.protocol import Message
from ..utils import INPUT_PROMPT
from .history import HistoryStore
from .text_editor import TextEditor


class Style(Enum):
    """Visual style of a drawn line."""
    NORMAL = "normal"
    INPUT_BAR = "input_bar"


@dataclass(frozen=True)
class DrawText:
    """Write ``text`` starting at ``(row, col)``."""
    row: int
    col: int
    text: str
    style: Style = Style.NORMAL


@dataclass(frozen=True)
class PlaceCursor:
    """Put the terminal cursor at ``(row, col)``."""
    row: int
    col: int


DrawCommand = Union[DrawText, PlaceCursor]


def single_line(text: str) -> str:
    """Flatten text to one screen row, non-printable characters become spaces."""
    return "".join(ch if ch.isprintable() else " " for ch in text)


def scrollback_height(rows: int) -> int:
    """Rows left for history once the input bar has taken the last one."""
    return max(0, rows - 1)


def scrollback_lines(messages: Sequence[Message], height: int) -> List[str]:
    """
    Build the scrollback pane, newest message on the bottom row.

    Fewer messages than rows are padded with blank lines on top. More messages
    than rows keep only the newest ``height`` ones. Each message takes exactly
    one row, line breaks inside it are flattened.

    Args:
        messages: Messages in server order (oldest first)
        height: Number of rows in the pane

    Returns:
        Exactly ``height`` lines
    """
    if height <= 0:
        return []
    visible = messages[-height:]
    padding = [""] * (height - len(visible))
    return padding + [single_line(msg.format()) for msg in visible]


def render_frame(
    size: Tuple[int, int],
    history: HistoryStore,
    editor: TextEditor,
    prompt: str = INPUT_PROMPT,
) -> List[DrawCommand]:
    """
    Draw the full screen for the current state.

    Args:
        size: Terminal size as (rows, cols)
        history: Message snapshot to show
        editor: Input field state
        prompt: Text in front of the input field

    Returns:
        Draw commands, scrollback rows first, then the input bar and cursor
    """
    rows, _ = size
    height = scrollback_height(rows)

    commands: List[DrawCommand] = [
        DrawText(row, 0, line)
        for row, line in enumerate(scrollback_lines(history.messages, height))
    ]

    if rows <= 0:
        return commands

    input_row = rows - 1
    commands.append(DrawText(input_row, 0, f"{prompt}{editor.content}", Style.INPUT_BAR))
    commands.append(PlaceCursor(input_row, len(prompt) + editor.cursor))
    return commands


class CursesRenderer:
    """
    Paints draw commands on a curses window.
    Handles clipping and colors; layout is decided by ``render_frame``.
    """

    INPUT_BAR_PAIR = 1

    def __init__(self, stdscr):
        """
        Initialize renderer with curses window.

        Args:
            stdscr: Main curses window object
        """
        self._stdscr = stdscr
        self._input_attr = curses.A_REVERSE
        self._init_colors()

    def _init_colors(self) -> None:
        """Use black on white for the input bar where colors are available."""
        if not curses.has_colors():
            return
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.INPUT_BAR_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
            self._input_attr = curses.color_pair(self.INPUT_BAR_PAIR)
        except curses.error:
            # Terminal claims colors but refuses the pair, keep A_REVERSE
            pass

    def size(self) -> Tuple[int, int]:
        """Get (rows, cols) of the window."""
        return self._stdscr.getmaxyx()

    def draw(self, commands: Sequence[DrawCommand]) -> None:
        """
        Clear the window and paint a whole frame.

        Args:
            commands: Output of ``render_frame``
        """
        rows, cols = self.size()
        self._stdscr.erase()

        for command in commands:
            if isinstance(command, DrawText):
                self._draw_text(command, rows, cols)
            elif isinstance(command, PlaceCursor):
                self._place_cursor(command, rows, cols)

        self._stdscr.refresh()

    def _draw_text(self, command: DrawText, rows: int, cols: int) -> None:
        if not 0 <= command.row < rows or cols <= 1:
            return
        # Writing the bottom-right cell makes curses raise, stop one short
        width = cols - 1 - command.col
        if width <= 0:
            return
        attr = self._input_attr if command.style is Style.INPUT_BAR else curses.A_NORMAL
        text = command.text[:width]
        try:
            if command.style is Style.INPUT_BAR:
                self._stdscr.addstr(command.row, command.col, text.ljust(width), attr)
            else:
                self._stdscr.addstr(command.row, command.col, text, attr)
        except curses.error:
            pass

    def _place_cursor(self, command: PlaceCursor, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            return
        row = min(max(command.row, 0), rows - 1)
        col = min(max(command.col, 0), cols - 1)
        try:
            self._stdscr.move(row, col)
        except curses.error:
            pass
