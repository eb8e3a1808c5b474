"""
UI module for the terminal client.
Provides the input field, history cache and rendering components.
"""

from .history import HistoryStore
from .renderer import CursesRenderer, DrawText, PlaceCursor, Style, render_frame, scrollback_lines
from .text_editor import TextEditor

__all__ = [
    'CursesRenderer', 'DrawText', 'HistoryStore', 'PlaceCursor', 'Style',
    'TextEditor', 'render_frame', 'scrollback_lines',
]
