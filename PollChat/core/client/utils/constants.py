"""
Constants for the terminal client.
"""

from PollChat.config import Config

# UI settings
INPUT_PROMPT = Config.INPUT_PROMPT

# Characters delivered by get_wch() in raw mode
CTRL_C = "\x03"        # reserved quit key, never inserted as text
BACKSPACE_CHARS = ("\x7f", "\x08")
ENTER_CHARS = ("\n", "\r")
