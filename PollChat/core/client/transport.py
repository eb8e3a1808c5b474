"""
HTTP transport for the PollChat client.

Two calls make up the whole wire contract:
    POST /  body = raw UTF-8 message text, 200 echoes the text back
    GET  /  200 with a JSON array of {"id": int, "message": str}

Every failure (connection, timeout, status, body) surfaces as TransportError.
Nothing is retried.
"""

import asyncio
from typing import List, Optional

import aiohttp

from PollChat.config import ClientSettings
from PollChat.core.logging import get_logger
from PollChat.core.message.protocol import Message, parse_history
from .utils import TransportError

logger = get_logger(__name__)


class HttpTransport:
    """
    aiohttp client for one chat server.

    One ClientSession is kept for the lifetime of the transport, so repeated
    polls reuse the same connection. Use as an async context manager or call
    ``close()`` when done.
    """

    def __init__(self, settings: ClientSettings):
        """
        Initialize the transport.

        Args:
            settings: Client settings holding the server URL and request timeout
        """
        self.url = settings.url
        self._timeout = aiohttp.ClientTimeout(total=settings.request_timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> 'HttpTransport':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout, trust_env=False)
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def send(self, text: str) -> str:
        """
        Append a message to the server log.

        Args:
            text: Message text

        Returns:
            str: Response body, the echoed text

        Raises:
            TransportError: If the request fails or the status is not 200
        """
        session = self._get_session()
        try:
            async with session.post(
                self.url,
                data=text.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            ) as response:
                body = await response.text(encoding="utf-8")
                if response.status != 200:
                    raise TransportError(
                        f"Send failed with status {response.status}",
                        status=response.status,
                    )
        except aiohttp.ClientError as e:
            raise TransportError(f"Send failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError("Send timed out") from e
        except UnicodeDecodeError as e:
            raise TransportError(f"Malformed send response: {e}") from e

        logger.debug("Sent %d characters", len(text))
        return body

    async def fetch_history(self) -> List[Message]:
        """
        Fetch the whole message log.

        Returns:
            list[Message]: Messages in server order

        Raises:
            TransportError: If the request fails, the status is not 200 or
                the body is not a JSON array of messages
        """
        session = self._get_session()
        try:
            async with session.get(self.url) as response:
                if response.status != 200:
                    raise TransportError(
                        f"History request failed with status {response.status}",
                        status=response.status,
                    )
                # Older servers answer with text/plain, accept any content type
                payload = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise TransportError(f"History request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError("History request timed out") from e
        except ValueError as e:
            raise TransportError(f"Malformed history response: {e}") from e

        try:
            return parse_history(payload)
        except ValueError as e:
            raise TransportError(f"Malformed history response: {e}") from e
