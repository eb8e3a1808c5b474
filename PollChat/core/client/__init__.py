"""
Client module for PollChat application.
Provides the interactive curses client and the one-shot command-line client.
"""

from .client_base import Client
from .command_line_client import StandardCommandlineClient
from .curses_client import CursesClient
from .event_loop import EventLoop, SessionState
from .transport import HttpTransport

__all__ = [
    'Client', 'CursesClient', 'EventLoop', 'HttpTransport',
    'SessionState', 'StandardCommandlineClient',
]
