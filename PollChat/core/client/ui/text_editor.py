"""
Input field buffer for the terminal client.
Holds the message being typed and a cursor into it.
"""

from typing import Optional

from PollChat.core.logging import get_logger

logger = get_logger(__name__)


class TextEditor:
    """
    Single-line text buffer with a cursor.

    The cursor counts code points, not bytes or terminal cells, and always
    satisfies ``0 <= cursor <= len(content)``. Python strings index by code
    point, so slicing at the cursor never splits a multi-byte character.
    """

    def __init__(self, content: str = "", cursor: Optional[int] = None):
        self._content: str = content
        self._cursor: int = len(content) if cursor is None else cursor
        self._clamp_cursor()

    @property
    def content(self) -> str:
        """Get current input text."""
        return self._content

    @property
    def cursor(self) -> int:
        """Get cursor position in code points."""
        return self._cursor

    def _clamp_cursor(self) -> None:
        """Pull an out-of-range cursor back inside the buffer."""
        upper = len(self._content)
        if 0 <= self._cursor <= upper:
            return
        logger.warning("Editor cursor %d outside [0, %d], clamping", self._cursor, upper)
        self._cursor = min(max(self._cursor, 0), upper)

    def insert_at_cursor(self, char: str) -> None:
        """
        Insert one character at the cursor and advance the cursor past it.

        Args:
            char: A single code point
        """
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._clamp_cursor()
        pos = self._cursor
        self._content = self._content[:pos] + char + self._content[pos:]
        self._cursor = pos + 1

    def remove_before_cursor(self) -> Optional[str]:
        """
        Delete the character left of the cursor (backspace).

        Returns:
            The removed character, or None when the cursor is at the start
        """
        self._clamp_cursor()
        if self._cursor == 0:
            return None
        self._cursor -= 1
        pos = self._cursor
        removed = self._content[pos]
        self._content = self._content[:pos] + self._content[pos + 1:]
        return removed

    def move_cursor_left(self) -> None:
        self._cursor = max(0, self._cursor - 1)
        self._clamp_cursor()

    def move_cursor_right(self) -> None:
        self._cursor = min(len(self._content), self._cursor + 1)
        self._clamp_cursor()

    def take_and_clear(self) -> str:
        """
        Return the current text and reset the editor to empty.

        Called right before a send, so the text is spent even if the send
        later fails.
        """
        text = self._content
        self._content = ""
        self._cursor = 0
        return text
