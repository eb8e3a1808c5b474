"""
Configuration module for PollChat application.
Stores default settings and builds the explicit settings objects handed to
the client and server at startup.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    """Application configuration class."""

    # Client Configuration
    DEFAULT_SERVER_URL = os.environ.get("POLLCHAT_URL", "http://127.0.0.1:32123")
    REFRESH_INTERVAL_SECONDS = _env_float("POLLCHAT_REFRESH_INTERVAL", 1.0)
    POLL_TIMEOUT_SECONDS = _env_float("POLLCHAT_POLL_TIMEOUT", 0.016)  # ~60Hz
    REQUEST_TIMEOUT_SECONDS = _env_float("POLLCHAT_REQUEST_TIMEOUT", 5.0)
    INPUT_PROMPT = "> "

    # Server Configuration
    DEFAULT_HOST = os.environ.get("POLLCHAT_HOST", "0.0.0.0")
    DEFAULT_SERVER_PORT = _env_int("POLLCHAT_PORT", 32123)

    # SQLite database (append-only message log)
    SQLITE_DB_FILE = os.environ.get("POLLCHAT_DB", "pollchat.db")


@dataclass(frozen=True)
class ClientSettings:
    """
    Settings for one client session, built once at startup.

    Attributes:
        url: Base URL of the chat server
        refresh_interval: Seconds between background history refreshes
        poll_timeout: Seconds to wait for a key press on each tick
        request_timeout: Upper bound for one request, None for no bound
        prompt: Text shown in front of the input field
    """
    url: str = Config.DEFAULT_SERVER_URL
    refresh_interval: float = Config.REFRESH_INTERVAL_SECONDS
    poll_timeout: float = Config.POLL_TIMEOUT_SECONDS
    request_timeout: Optional[float] = Config.REQUEST_TIMEOUT_SECONDS or None
    prompt: str = Config.INPUT_PROMPT

    @classmethod
    def from_config(cls, url: Optional[str] = None) -> 'ClientSettings':
        """Build settings from Config defaults, optionally overriding the URL."""
        return cls(url=url or Config.DEFAULT_SERVER_URL)


@dataclass(frozen=True)
class ServerSettings:
    """Settings for the message log server."""
    host: str = Config.DEFAULT_HOST
    port: int = Config.DEFAULT_SERVER_PORT
    db_path: str = Config.SQLITE_DB_FILE


# Create config instance
config = Config()
