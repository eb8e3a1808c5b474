from .protocol import Message, parse_history, serialize_history

__all__ = ['Message', 'parse_history', 'serialize_history']
