"""Small string predicates and normalizers for block markup."""

from __future__ import annotations

import re

_BLANK_RE = re.compile(r"^\s+$")
_CONTROL_WHITESPACE_RE = re.compile(r"[\n\r\t]")


def is_blank(markup: str) -> bool:
    """Return ``True`` when *markup* is non-empty and whitespace only.

    The empty string is *not* blank; the pre-filter decides on empty markup
    by looking at the block name.
    """
    return _BLANK_RE.match(markup) is not None


def collapse_control_whitespace(markup: str) -> str:
    """Replace each ``\\n``, ``\\r`` or ``\\t`` character with a single space."""
    return _CONTROL_WHITESPACE_RE.sub(" ", markup)
