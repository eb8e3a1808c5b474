"""
Input handler for processing keyboard input in the terminal client.
Applies key presses to the input field and reports submits and quits.
"""

from enum import Enum, auto
from typing import Awaitable, Callable, Optional

from PollChat.core.logging import get_logger
from .key_mappings import InputAction, Key, get_action_for_key
from ..ui.text_editor import TextEditor

logger = get_logger(__name__)


class InputResult(Enum):
    """Result of processing an input action."""
    HANDLED = auto()
    SUBMIT = auto()
    QUIT = auto()


class InputHandler:
    """
    Handles keyboard input processing for the chat client.
    Owns no state of its own besides the editor it writes to.
    """

    def __init__(
        self,
        editor: TextEditor,
        on_submit: Optional[Callable[[str], Awaitable[None]]] = None
    ):
        """
        Initialize input handler.

        Args:
            editor: Input field to edit
            on_submit: Called with the taken text when Enter is pressed
        """
        self._editor = editor
        self._on_submit = on_submit

    @property
    def editor(self) -> TextEditor:
        return self._editor

    async def process_key(self, key: Key) -> InputResult:
        """
        Process a single key press.

        Args:
            key: Value from get_wch()

        Returns:
            InputResult indicating the outcome
        """
        action = get_action_for_key(key)

        match action:
            case InputAction.QUIT:
                return InputResult.QUIT

            case InputAction.TYPE_CHAR:
                self._editor.insert_at_cursor(key)
                return InputResult.HANDLED

            case InputAction.BACKSPACE:
                self._editor.remove_before_cursor()
                return InputResult.HANDLED

            case InputAction.CURSOR_LEFT:
                self._editor.move_cursor_left()
                return InputResult.HANDLED

            case InputAction.CURSOR_RIGHT:
                self._editor.move_cursor_right()
                return InputResult.HANDLED

            case InputAction.SUBMIT:
                if not self._editor.content:
                    return InputResult.HANDLED
                text = self._editor.take_and_clear()
                if self._on_submit:
                    await self._on_submit(text)
                return InputResult.SUBMIT

            case _:
                logger.debug("Ignoring key %r", key)
                return InputResult.HANDLED
