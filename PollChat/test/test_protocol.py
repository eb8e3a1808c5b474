"""
Unit tests for the message wire model.
"""

import pytest

from PollChat.core.message.protocol import Message, parse_history, serialize_history


class TestMessage:
    """Tests for Message."""

    def test_format(self):
        assert Message(7, "hi there").format() == "7: hi there"

    def test_from_dict(self):
        assert Message.from_dict({"id": 3, "message": "ok"}) == Message(3, "ok")

    @pytest.mark.parametrize("obj", [
        {"id": True, "message": "bool id"},
        {"id": -1, "message": "negative"},
        {"id": 1.5, "message": "float"},
        {"id": 1, "message": None},
        {"message": "no id"},
        ["not", "a", "dict"],
    ])
    def test_from_dict_rejects_bad_shapes(self, obj):
        with pytest.raises(ValueError):
            Message.from_dict(obj)


class TestHistory:
    """Tests for parse_history / serialize_history."""

    def test_parse_keeps_payload_order(self):
        payload = '[{"id": 1, "message": "a"}, {"id": 2, "message": "b"}]'

        assert parse_history(payload) == [Message(1, "a"), Message(2, "b")]

    def test_parse_accepts_decoded_list(self):
        assert parse_history([{"id": 1, "message": "a"}]) == [Message(1, "a")]

    def test_serialize_keeps_non_ascii(self):
        body = serialize_history([Message(1, "😀")])

        assert "😀" in body
        assert parse_history(body) == [Message(1, "😀")]

    @pytest.mark.parametrize("payload", ["", "{}", "[1, 2]", "null"])
    def test_parse_rejects_non_history(self, payload):
        with pytest.raises(ValueError):
            parse_history(payload)
