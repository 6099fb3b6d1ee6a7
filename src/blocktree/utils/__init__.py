from .casing import camel_case
from .text import collapse_control_whitespace, is_blank

__all__ = [
    "camel_case",
    "collapse_control_whitespace",
    "is_blank",
]
