"""Key casing helpers used by component serialization."""

from __future__ import annotations


def camel_case(key: str) -> str:
    """Convert a snake_case config key to camelCase.

    Each underscore-separated fragment has its first character upper-cased
    (the rest of the fragment is left as is), the fragments are joined, and
    the first character of the result is lower-cased.

    >>> camel_case("post_id")
    'postId'
    >>> camel_case("id")
    'id'
    >>> camel_case("ID")
    'iD'
    """
    joined = "".join(word[:1].upper() + word[1:] for word in key.split("_"))
    return joined[:1].lower() + joined[1:]
