"""
Event loop of the interactive client.

One cooperative task drives everything. Each tick:

1. refreshes the history if the refresh interval has elapsed,
2. renders the whole screen,
3. waits a bounded time for one key press,
4. dispatches the key to the input field, or sends, or quits.

Network calls run inline, so a slow server pauses the loop for at most the
request timeout. Transport failures are logged and never end the session.
"""

import time
from enum import Enum, auto
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from PollChat.config import ClientSettings
from PollChat.core.logging import get_logger
from PollChat.core.message.protocol import Message
from .input import InputHandler, InputResult, Key
from .ui import HistoryStore, TextEditor, render_frame
from .ui.renderer import DrawCommand
from .utils import TransportError

logger = get_logger(__name__)


class SessionState(Enum):
    """Lifecycle of one interactive session."""
    RUNNING = auto()
    TERMINATING = auto()


class Screen(Protocol):
    """What the loop needs from the terminal."""

    def size(self) -> Tuple[int, int]:
        ...

    def draw(self, commands: Sequence[DrawCommand]) -> None:
        ...

    def poll_key(self, timeout: float) -> Optional[Key]:
        ...


class Transport(Protocol):
    """What the loop needs from the network."""

    async def send(self, text: str) -> str:
        ...

    async def fetch_history(self) -> List[Message]:
        ...


class EventLoop:
    """
    Single-threaded driver for one chat session.
    Exclusively owns the input field and the history cache.
    """

    def __init__(
        self,
        transport: Transport,
        screen: Screen,
        settings: ClientSettings,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize event loop.

        Args:
            transport: Server connection used for send and history
            screen: Terminal to draw on and read keys from
            settings: Refresh interval, poll timeout and prompt
            clock: Monotonic time source in seconds
        """
        self._transport = transport
        self._screen = screen
        self._settings = settings
        self._clock = clock
        self.editor = TextEditor()
        self.history = HistoryStore(clock=clock)
        self._input = InputHandler(self.editor, on_submit=self._send)
        self.state = SessionState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    async def refresh_history(self) -> bool:
        """
        Refresh the history cache, logging any failure.

        Returns:
            True if the snapshot was replaced
        """
        try:
            await self.history.refresh(self._transport)
        except TransportError as e:
            logger.warning("History refresh failed: %s", e)
            return False
        return True

    async def _send(self, text: str) -> None:
        """Send one message and pull the log right after a success."""
        try:
            await self._transport.send(text)
        except TransportError as e:
            # The text was already taken from the editor and is not requeued
            logger.error("Send failed, message dropped (%d characters): %s", len(text), e)
            return
        logger.info("Message sent")
        await self.refresh_history()

    def render(self) -> None:
        frame = render_frame(self._screen.size(), self.history, self.editor, self._settings.prompt)
        self._screen.draw(frame)

    async def tick(self) -> SessionState:
        """
        Run one loop iteration.

        Returns:
            State after the tick
        """
        if self.history.is_due(self._settings.refresh_interval, self._clock()):
            await self.refresh_history()

        self.render()

        key = self._screen.poll_key(self._settings.poll_timeout)
        if key is None:
            return self.state

        if await self._input.process_key(key) is InputResult.QUIT:
            logger.info("Quit requested")
            self.state = SessionState.TERMINATING
        return self.state

    async def run(self) -> None:
        """Tick until the quit key is pressed."""
        logger.info("Interactive session started against %s", self._settings.url)
        while self.is_running:
            await self.tick()
        logger.info("Interactive session ended")
