"""
Custom exceptions for the PollChat client.
"""

from typing import Optional


class ClientError(Exception):
    """Base exception for client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class TransportError(ClientError):
    """
    A send or history fetch failed: connection problem, timeout, non-success
    status or an unreadable response body.
    """

    def __init__(self, message: str, status: Optional[int] = None, details: dict = None):
        super().__init__(message, details)
        self.status = status


class TerminalError(ClientError):
    """Entering or leaving raw mode / the alternate screen failed."""
    pass
