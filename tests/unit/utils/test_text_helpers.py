"""Tests for blocktree.utils string helpers."""

from __future__ import annotations

import pytest

from blocktree.utils import camel_case, collapse_control_whitespace, is_blank


class TestIsBlank:
    @pytest.mark.parametrize("markup", [" ", "\n", "\n\n", " \t\r\n "])
    def test_whitespace_only(self, markup):
        assert is_blank(markup)

    def test_empty_string_is_not_blank(self):
        assert not is_blank("")

    @pytest.mark.parametrize("markup", ["<p></p>", " x ", "\nx\n"])
    def test_content_is_not_blank(self, markup):
        assert not is_blank(markup)


class TestCollapseControlWhitespace:
    def test_each_character_becomes_one_space(self):
        assert collapse_control_whitespace("<p>a</p>\n\n<p>b</p>") == "<p>a</p>  <p>b</p>"

    def test_tabs_and_carriage_returns(self):
        assert collapse_control_whitespace("a\tb\r\nc") == "a b  c"

    def test_spaces_untouched(self):
        assert collapse_control_whitespace("a   b") == "a   b"


class TestCamelCase:
    @pytest.mark.parametrize(("key", "expected"), [
        ("post_id", "postId"),
        ("id", "id"),
        ("ID", "iD"),
        ("font__size", "fontSize"),
        ("trailing_", "trailing"),
        ("", ""),
    ])
    def test_transform(self, key, expected):
        assert camel_case(key) == expected
