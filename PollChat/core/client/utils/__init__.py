"""
Utility functions and shared components for the terminal client.
"""

from .constants import BACKSPACE_CHARS, CTRL_C, ENTER_CHARS, INPUT_PROMPT
from .exceptions import ClientError, TerminalError, TransportError

__all__ = [
    'ClientError',
    'TerminalError',
    'TransportError',
    'BACKSPACE_CHARS',
    'CTRL_C',
    'ENTER_CHARS',
    'INPUT_PROMPT',
]
