"""Built-in formats."""

from .base import AbstractFormat
from .inline import Bold, Code, Italic, Link, Strike

__all__ = [
    "AbstractFormat",
    "Link",
    "Bold",
    "Italic",
    "Code",
    "Strike",
]
