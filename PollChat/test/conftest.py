"""
Test configuration and fixtures for PollChat tests.

Provides:
- Fake terminal, transport and clock for driving the event loop
- A temporary SQLite message log
- A stand-in HTTP server speaking the chat wire contract
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from PollChat.config import ClientSettings
from PollChat.core.client.utils import TransportError
from PollChat.core.message.protocol import Message, serialize_history
from PollChat.core.server import MessageLog


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeScreen:
    """Terminal double: records frames, replays scripted keys."""
    rows: int = 6
    cols: int = 40
    keys: Deque = field(default_factory=deque)
    frames: List[list] = field(default_factory=list)
    poll_timeouts: List[float] = field(default_factory=list)
    clock: Optional[FakeClock] = None

    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def draw(self, commands) -> None:
        self.frames.append(list(commands))

    def poll_key(self, timeout: float):
        self.poll_timeouts.append(timeout)
        if self.clock is not None:
            self.clock.advance(timeout)
        if self.keys:
            return self.keys.popleft()
        return None

    def type(self, *keys) -> None:
        self.keys.extend(keys)


class FakeTransport:
    """In-memory server log with switchable failures and a simulated round trip."""

    def __init__(self, clock: Optional[FakeClock] = None):
        self.clock = clock
        self.fetch_delay = 0.0
        self.log: List[Message] = []
        self.sent: List[str] = []
        self.fetch_count = 0
        self.fail_send = False
        self.fail_fetch = False

    async def send(self, text: str) -> str:
        self.sent.append(text)
        if self.fail_send:
            raise TransportError("connection refused")
        self.log.append(Message(id=len(self.log) + 1, text=text))
        return text

    async def fetch_history(self) -> List[Message]:
        self.fetch_count += 1
        if self.clock is not None:
            self.clock.advance(self.fetch_delay)
        if self.fail_fetch:
            raise TransportError("connection refused")
        return list(self.log)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def screen(clock: FakeClock) -> FakeScreen:
    return FakeScreen(clock=clock)


@pytest.fixture
def transport(clock: FakeClock) -> FakeTransport:
    return FakeTransport(clock=clock)


@pytest.fixture
def client_settings() -> ClientSettings:
    return ClientSettings(
        url="http://chat.test/",
        refresh_interval=1.0,
        poll_timeout=0.016,
        request_timeout=2.0,
    )


@pytest.fixture
def message_log(tmp_path):
    log = MessageLog(str(tmp_path / "chat" / "pollchat.db"))
    yield log
    log.close()


class StandInServer:
    """aiohttp app speaking the chat wire contract, with knobs for failure."""

    def __init__(self):
        self.messages: List[Message] = []
        self.status = 200
        self.history_body: Optional[str] = None
        self.received: List[bytes] = []
        self.app = web.Application()
        self.app.router.add_get("/", self._get)
        self.app.router.add_post("/", self._post)

    async def _get(self, request: web.Request) -> web.Response:
        if self.status != 200:
            return web.Response(status=self.status, text="nope")
        body = self.history_body if self.history_body is not None else serialize_history(self.messages)
        # Plain text content type, like older servers
        return web.Response(text=body)

    async def _post(self, request: web.Request) -> web.Response:
        raw = await request.read()
        self.received.append(raw)
        if self.status != 200:
            return web.Response(status=self.status, text="nope")
        text = raw.decode("utf-8")
        self.messages.append(Message(id=len(self.messages) + 1, text=text))
        return web.Response(text=text)


@pytest_asyncio.fixture
async def stand_in_server():
    stand_in = StandInServer()
    server = TestServer(stand_in.app)
    await server.start_server()
    stand_in.url = str(server.make_url("/"))
    yield stand_in
    await server.close()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
