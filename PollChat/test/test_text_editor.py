"""
Unit tests for the input field buffer.

Tests cover:
- Insertion at start, middle and end, including multi-byte characters
- Backspace at and away from the start
- Cursor movement saturation
- take_and_clear semantics
- Cursor bounds after arbitrary edit sequences
"""

import random

import pytest

from PollChat.core.client.ui.text_editor import TextEditor


def assert_cursor_in_bounds(editor: TextEditor) -> None:
    assert 0 <= editor.cursor <= len(editor.content)


class TestInsert:
    """Tests for insert_at_cursor."""

    def test_insert_into_empty_buffer(self):
        editor = TextEditor()
        editor.insert_at_cursor("a")

        assert editor.content == "a"
        assert editor.cursor == 1

    def test_insert_appends_at_end(self):
        editor = TextEditor("ab")
        editor.insert_at_cursor("c")

        assert editor.content == "abc"
        assert editor.cursor == 3

    def test_insert_at_start(self):
        editor = TextEditor("bc", cursor=0)
        editor.insert_at_cursor("a")

        assert editor.content == "abc"
        assert editor.cursor == 1

    def test_insert_in_middle_after_multibyte_text(self):
        """Cursor counts code points, so text after 'é' lands in the right place."""
        editor = TextEditor("héllo", cursor=2)
        editor.insert_at_cursor("X")

        assert editor.content == "héXllo"
        assert editor.cursor == 3

    @pytest.mark.parametrize("char", ["é", "ß", "漢", "😀"])
    @pytest.mark.parametrize("cursor", [0, 1, 3, 4])
    def test_multibyte_insert_grows_by_one(self, char, cursor):
        editor = TextEditor("a😀bc", cursor=cursor)
        before = len(editor.content)

        editor.insert_at_cursor(char)

        assert len(editor.content) == before + 1
        assert editor.cursor == cursor + 1
        assert editor.content[cursor] == char

    def test_insert_rejects_more_than_one_character(self):
        editor = TextEditor()
        with pytest.raises(ValueError):
            editor.insert_at_cursor("ab")


class TestRemove:
    """Tests for remove_before_cursor."""

    def test_remove_on_empty_buffer(self):
        editor = TextEditor()

        assert editor.remove_before_cursor() is None
        assert editor.content == ""
        assert editor.cursor == 0

    def test_remove_with_cursor_at_start(self):
        editor = TextEditor("abc", cursor=0)

        assert editor.remove_before_cursor() is None
        assert editor.content == "abc"
        assert editor.cursor == 0

    def test_remove_at_end(self):
        editor = TextEditor("abc")

        assert editor.remove_before_cursor() == "c"
        assert editor.content == "ab"
        assert editor.cursor == 2

    def test_remove_multibyte_in_middle(self):
        editor = TextEditor("a😀b", cursor=2)

        assert editor.remove_before_cursor() == "😀"
        assert editor.content == "ab"
        assert editor.cursor == 1


class TestCursorMovement:
    """Tests for cursor movement saturation."""

    def test_left_saturates_at_zero(self):
        editor = TextEditor("ab", cursor=0)
        editor.move_cursor_left()

        assert editor.cursor == 0

    def test_right_saturates_at_end(self):
        editor = TextEditor("ab")
        editor.move_cursor_right()

        assert editor.cursor == 2

    def test_moves_by_code_point(self):
        editor = TextEditor("ü😀")
        editor.move_cursor_left()
        assert editor.cursor == 1
        editor.move_cursor_left()
        assert editor.cursor == 0
        editor.move_cursor_right()
        assert editor.cursor == 1

    def test_out_of_range_cursor_is_clamped(self):
        editor = TextEditor("abc", cursor=10)

        assert editor.cursor == 3


class TestTakeAndClear:
    """Tests for take_and_clear."""

    def test_returns_content_and_resets(self):
        editor = TextEditor("héllo 😀", cursor=3)

        assert editor.take_and_clear() == "héllo 😀"
        assert editor.content == ""
        assert editor.cursor == 0

    def test_on_empty_buffer(self):
        editor = TextEditor()

        assert editor.take_and_clear() == ""
        assert editor.cursor == 0


class TestInvariant:
    """Cursor stays in bounds through random edit sequences."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_operations_keep_cursor_in_bounds(self, seed):
        rng = random.Random(seed)
        alphabet = ["a", "Z", " ", "é", "漢", "😀"]
        editor = TextEditor()

        for _ in range(200):
            op = rng.choice(["insert", "remove", "left", "right", "take"])
            if op == "insert":
                before = (len(editor.content), editor.cursor)
                editor.insert_at_cursor(rng.choice(alphabet))
                assert (len(editor.content), editor.cursor) == (before[0] + 1, before[1] + 1)
            elif op == "remove":
                editor.remove_before_cursor()
            elif op == "left":
                editor.move_cursor_left()
            elif op == "right":
                editor.move_cursor_right()
            elif rng.random() < 0.1:
                editor.take_and_clear()
            assert_cursor_in_bounds(editor)
