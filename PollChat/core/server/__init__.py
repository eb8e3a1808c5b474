"""
Server-side components for PollChat.
"""

from .storage_sqlite import MessageLog

__all__ = ['MessageLog']
