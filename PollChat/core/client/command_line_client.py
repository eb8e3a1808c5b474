"""
One-shot command-line client.
Sends a single message and/or prints the whole history, then exits.
"""

import asyncio
import sys

from PollChat.config import ClientSettings
from PollChat.core.logging import get_logger
from .client_base import Client
from .transport import HttpTransport
from .utils import TransportError

logger = get_logger(__name__)


class StandardCommandlineClient(Client):
    """
    Non-interactive client for scripts and quick checks.
    """

    def __init__(self, settings: ClientSettings, message: str = None, get_history: bool = False):
        """
        Args:
            settings (ClientSettings): Server URL and timeouts
            message (str): Message to send, if any
            get_history (bool): Print the full history after sending
        """
        super().__init__(settings)
        self.message = message
        self.get_history = get_history

    @staticmethod
    async def send(transport: HttpTransport, text: str) -> None:
        print(f"Sending message:\n\t{text}")
        response = await transport.send(text)
        print(f"Message sent, received response:\n\t{response}")

    @staticmethod
    async def print_history(transport: HttpTransport) -> None:
        messages = await transport.fetch_history()
        print("Message history:")
        for msg in messages:
            print(f"Message {msg.id}: {msg.text}")

    async def async_run(self) -> int:
        """
        Perform the requested actions.

        Returns:
            int: Process exit status, 0 on success
        """
        async with HttpTransport(self.settings) as transport:
            try:
                if self.message is not None:
                    await self.send(transport, self.message)
                if self.get_history:
                    await self.print_history(transport)
            except TransportError as e:
                logger.debug("Request to %s failed: %s", self.settings.url, e)
                print(f"Error: {e}", file=sys.stderr)
                return 1
        return 0

    def run(self) -> int:
        """Start the one-shot client and return its exit status."""
        return asyncio.run(self.async_run())
