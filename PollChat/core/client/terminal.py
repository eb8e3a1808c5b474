"""
Terminal session for the curses client.

Entering the session switches the terminal to the alternate screen and raw
mode (so Ctrl+C reaches the client as a key instead of a signal). Leaving it
restores the normal terminal exactly once, whatever way the session ends.
"""

import curses
from typing import Optional, Sequence, Tuple

from PollChat.core.logging import get_logger
from .input.key_mappings import Key
from .ui.renderer import CursesRenderer, DrawCommand
from .utils import TerminalError

logger = get_logger(__name__)


class TerminalSession:
    """
    Scoped ownership of the terminal.

    Example:
        with TerminalSession() as screen:
            screen.draw(frame)
            key = screen.poll_key(0.016)
    """

    def __init__(self):
        self._stdscr = None
        self._renderer: Optional[CursesRenderer] = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> 'TerminalSession':
        try:
            # initscr() also switches to the alternate screen
            self._stdscr = curses.initscr()
            self._active = True
            curses.raw()
            curses.noecho()
            self._stdscr.keypad(True)
            self._renderer = CursesRenderer(self._stdscr)
        except curses.error as e:
            self._restore()
            raise TerminalError(f"Failed to set up terminal: {e}") from e
        logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            self._restore()
        except TerminalError:
            # Do not mask the exception that ended the session
            if exc_type is None:
                raise
            logger.exception("Terminal restore failed while handling %s", exc_type.__name__)

    def _restore(self) -> None:
        """Give the terminal back, at most once per session."""
        if not self._active:
            return
        self._active = False
        errors = []
        for step in (
            lambda: self._stdscr.keypad(False),
            curses.noraw,
            curses.echo,
            curses.endwin,
        ):
            # Run every step even if an earlier one failed
            try:
                step()
            except curses.error as e:
                errors.append(e)
        self._stdscr = None
        self._renderer = None
        logger.debug("Terminal session ended")
        if errors:
            raise TerminalError(f"Failed to restore terminal: {errors[0]}")

    def _require_active(self) -> None:
        if not self._active:
            raise TerminalError("Terminal session is not active")

    def size(self) -> Tuple[int, int]:
        """Get terminal size as (rows, cols)."""
        self._require_active()
        return self._renderer.size()

    def draw(self, commands: Sequence[DrawCommand]) -> None:
        """Paint one frame."""
        self._require_active()
        self._renderer.draw(commands)

    def poll_key(self, timeout: float) -> Optional[Key]:
        """
        Wait up to ``timeout`` seconds for one key press.

        Returns:
            A character (str), a function key code (int), or None on timeout
        """
        self._require_active()
        self._stdscr.timeout(max(0, int(timeout * 1000)))
        try:
            key = self._stdscr.get_wch()
        except curses.error:
            # get_wch() raises when the timeout expires without input
            return None
        if key == curses.KEY_RESIZE:
            # The next frame reads the new size anyway
            return None
        return key
