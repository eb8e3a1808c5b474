"""
Key mappings and action definitions for input handling.
Maps values returned by curses ``get_wch()`` to semantic actions.

``get_wch()`` returns a ``str`` for characters (any code point, so multi-byte
input arrives whole) and an ``int`` for function keys such as the arrows.
"""

import curses
from enum import Enum, auto
from typing import Union

from ..utils import BACKSPACE_CHARS, CTRL_C, ENTER_CHARS

Key = Union[str, int]


class InputAction(Enum):
    """Semantic actions that can result from key presses."""
    # Text input
    TYPE_CHAR = auto()
    BACKSPACE = auto()
    SUBMIT = auto()

    # Cursor movement
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()

    # Commands
    QUIT = auto()
    IGNORE = auto()


def is_printable(key: Key) -> bool:
    """
    Check if a key is a character that belongs in the input field.

    Args:
        key: Value from get_wch()

    Returns:
        True for a single printable code point
    """
    return isinstance(key, str) and len(key) == 1 and key.isprintable()


def get_action_for_key(key: Key) -> InputAction:
    """
    Map a key to an input action.

    Args:
        key: Value from get_wch()

    Returns:
        Corresponding input action
    """
    if isinstance(key, str):
        if key == CTRL_C:
            return InputAction.QUIT
        if key in ENTER_CHARS:
            return InputAction.SUBMIT
        if key in BACKSPACE_CHARS:
            return InputAction.BACKSPACE
        if is_printable(key):
            return InputAction.TYPE_CHAR
        return InputAction.IGNORE

    match key:
        case curses.KEY_ENTER:
            return InputAction.SUBMIT
        case curses.KEY_BACKSPACE:
            return InputAction.BACKSPACE
        case curses.KEY_LEFT:
            return InputAction.CURSOR_LEFT
        case curses.KEY_RIGHT:
            return InputAction.CURSOR_RIGHT
        case _:
            return InputAction.IGNORE
