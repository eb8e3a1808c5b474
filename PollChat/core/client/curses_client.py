"""
Curses-based interactive chat client.
Shows the shared message log above a one-line input field.
"""

import asyncio

from PollChat.config import ClientSettings
from PollChat.core.logging import get_logger
from .client_base import Client
from .event_loop import EventLoop
from .terminal import TerminalSession
from .transport import HttpTransport

logger = get_logger(__name__)

__all__ = ['CursesClient']


class CursesClient(Client):
    """
    Interactive terminal client.
    Press Enter to send, Ctrl+C to quit. Unsent input is discarded on exit.
    """

    def __init__(self, settings: ClientSettings):
        super().__init__(settings)

    async def async_run(self) -> None:
        """Run one interactive session until the user quits."""
        async with HttpTransport(self.settings) as transport:
            with TerminalSession() as screen:
                await EventLoop(transport, screen, self.settings).run()

    def run(self) -> None:
        """Start the curses-based client."""
        asyncio.run(self.async_run())
