from .message.protocol import Message

__all__ = ['Message']
