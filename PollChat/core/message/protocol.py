"""
Message protocol module for PollChat application.
Defines the message record shared by client and server and its JSON form.

Wire form of one message: {"id": <integer>, "message": <string>}.
The history endpoint returns a JSON array of these, ascending by id.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class Message:
    """
    A chat message as stored in the server log.

    Attributes:
        id (int): Server-assigned sequence number, strictly increasing
        text (str): Message content
    """
    id: int
    text: str

    def format(self) -> str:
        """Format message for display."""
        return f"{self.id}: {self.text}"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "message": self.text}

    @classmethod
    def from_dict(cls, obj: Any) -> 'Message':
        """
        Create a Message from its decoded JSON object.

        Raises:
            ValueError: If the object does not have the expected shape
        """
        if not isinstance(obj, dict):
            raise ValueError(f"expected a JSON object, got {type(obj).__name__}")
        try:
            msg_id = obj["id"]
            text = obj["message"]
        except KeyError as e:
            raise ValueError(f"missing field {e.args[0]!r}") from None
        # bool is an int subclass
        if isinstance(msg_id, bool) or not isinstance(msg_id, int) or msg_id < 0:
            raise ValueError(f"invalid message id: {msg_id!r}")
        if not isinstance(text, str):
            raise ValueError(f"invalid message text for id {msg_id}")
        return cls(id=msg_id, text=text)


def parse_history(payload: Union[str, bytes, List[Any]]) -> List[Message]:
    """
    Decode a full history payload.

    Args:
        payload: Raw JSON text, or the already decoded array

    Returns:
        list[Message]: Messages in payload order

    Raises:
        ValueError: If the payload is not a JSON array of messages
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"history is not valid JSON: {e}") from e
    if not isinstance(payload, list):
        raise ValueError(f"history must be a JSON array, got {type(payload).__name__}")
    return [Message.from_dict(item) for item in payload]


def serialize_history(messages: List[Message]) -> str:
    return json.dumps([m.to_dict() for m in messages], ensure_ascii=False)
