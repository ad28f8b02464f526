"""Unit tests for value object validation."""

import pytest
from pydantic import ValidationError

from engage.domain.value import Avatar, CommentText, LikerId, UserName


class TestUserName:
    """Tests for UserName."""

    @pytest.mark.parametrize("name", ["alice", "Naruto99", "a", "x" * 16])
    def test_accepts_letters_and_digits(self, name):
        assert UserName(name).root == name

    @pytest.mark.parametrize("name", ["john_doe", "", "x" * 17, "bob smith", "émile"])
    def test_rejects_other_names(self, name):
        with pytest.raises(ValidationError):
            UserName(name)


class TestCommentText:
    """Tests for CommentText sanitization."""

    def test_strips_surrounding_whitespace(self):
        assert CommentText("  hello  ").root == "hello"

    def test_removes_control_characters_but_keeps_newlines(self):
        assert CommentText("line\x00one\nline\x07two").root == "lineone\nlinetwo"

    def test_accepts_600_characters(self):
        assert len(CommentText("a" * 600).root) == 600

    def test_rejects_601_characters(self):
        with pytest.raises(ValidationError, match="too long"):
            CommentText("a" * 601)

    def test_length_is_checked_after_sanitizing(self):
        """Padding doesn't count toward the limit."""
        assert len(CommentText("   " + "a" * 600 + "\n\n").root) == 600

    @pytest.mark.parametrize("text", ["", "   ", "\x00\x01"])
    def test_rejects_empty_after_sanitizing(self, text):
        with pytest.raises(ValidationError, match="empty"):
            CommentText(text)


class TestLikerId:
    """Tests for LikerId."""

    def test_accepts_up_to_32_characters(self):
        assert LikerId("u" * 32).root == "u" * 32

    @pytest.mark.parametrize("value", ["", "u" * 33])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError):
            LikerId(value)


class TestAvatar:
    """Tests for Avatar."""

    def test_default_is_first_icon(self):
        assert Avatar.default() == Avatar.ICON_01

    def test_parses_identifier(self):
        assert Avatar("icon_04") is Avatar.ICON_04

    def test_rejects_unknown_identifier(self):
        with pytest.raises(ValueError):
            Avatar("icon_99")
