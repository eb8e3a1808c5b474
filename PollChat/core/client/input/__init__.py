"""
Input handling module for the terminal client.
Provides keyboard input processing and key-to-action mapping.
"""

from .handler import InputHandler, InputResult
from .key_mappings import InputAction, Key, get_action_for_key, is_printable

__all__ = ['InputHandler', 'InputResult', 'InputAction', 'Key', 'get_action_for_key', 'is_printable']
