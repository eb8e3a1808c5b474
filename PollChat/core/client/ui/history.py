"""
History cache for the terminal client.
Holds the last successfully fetched copy of the server's message log.
"""

import time
from typing import Callable, List, Optional, Protocol

from PollChat.core.logging import get_logger
from PollChat.core.message.protocol import Message

logger = get_logger(__name__)


class HistorySource(Protocol):
    """Anything that can fetch the full message log."""

    async def fetch_history(self) -> List[Message]:
        ...


class HistoryStore:
    """
    Snapshot of the server log used for rendering.

    A refresh replaces the whole snapshot or, on failure, leaves it alone.
    Two timestamps are kept: ``last_refreshed`` moves only on success,
    ``last_attempted`` on every try. Both are stamped when the fetch returns
    or raises. The refresh timer runs off the attempt time, so an unreachable
    or slow server is asked once per interval, not every tick.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._messages: List[Message] = []
        self._clock = clock
        self._last_refreshed: Optional[float] = None
        self._last_attempted: Optional[float] = None

    @property
    def messages(self) -> List[Message]:
        """Get all messages of the current snapshot."""
        return list(self._messages)

    @property
    def last_refreshed(self) -> Optional[float]:
        return self._last_refreshed

    @property
    def last_attempted(self) -> Optional[float]:
        return self._last_attempted

    def __len__(self) -> int:
        return len(self._messages)

    def is_due(self, interval: float, now: Optional[float] = None) -> bool:
        """
        Check whether the refresh interval has elapsed.

        Args:
            interval: Refresh interval in seconds
            now: Current clock reading, read from the clock when omitted

        Returns:
            True if no refresh was tried yet or the last try is older than interval
        """
        if self._last_attempted is None:
            return True
        if now is None:
            now = self._clock()
        return now - self._last_attempted > interval

    async def refresh(self, source: HistorySource) -> None:
        """
        Fetch the full log and swap it in.

        Raises:
            TransportError: Fetch failed, the previous snapshot is kept
        """
        try:
            messages = await source.fetch_history()
        finally:
            # The interval counts from the end of the round trip
            self._last_attempted = self._clock()
        self._messages = list(messages)
        self._last_refreshed = self._last_attempted
        logger.debug("History refreshed: %d messages", len(self._messages))
