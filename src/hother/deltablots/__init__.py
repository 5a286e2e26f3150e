"""
Deltablots - Rich text delta parsing for Python

Turns a flat sequence of rich text delta operations into ordered groups of
blots (paragraphs, list items, blockquotes, code blocks, headings, embeds)
ready to be handed to a renderer.
"""

import importlib.metadata

from .blots import (
    AbstractBlot,
    BlockquoteLineBlot,
    CodeBlockBlot,
    EmojiBlot,
    ExternalBlot,
    HeadingBlot,
    ListLineBlot,
    MentionBlot,
    NullBlot,
    SpoilerLineBlot,
    TextBlot,
)
from .core.exceptions import DeltaBlotsError, RegistrationError
from .core.group import BlotGroup, GroupEntry
from .core.models import BREAKPOINT, BlotSnapshot, Breakpoint, Operation
from .core.parser import DeltaParser, parse, parse_into_test_data, parse_mention_usernames
from .core.registry import BlotVariant, FormatVariant, ParserRegistry, get_default_registry
from .formats import AbstractFormat, Bold, Code, Italic, Link, Strike
from .utils.concurrency import parse_many

try:
    __version__ = importlib.metadata.version("hother-deltablots")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    # Models
    "Operation",
    "Breakpoint",
    "BREAKPOINT",
    "BlotSnapshot",
    "BlotGroup",
    "GroupEntry",
    # Registry
    "ParserRegistry",
    "BlotVariant",
    "FormatVariant",
    "get_default_registry",
    # Parsing
    "DeltaParser",
    "parse",
    "parse_mention_usernames",
    "parse_into_test_data",
    "parse_many",
    # Blots
    "AbstractBlot",
    "ExternalBlot",
    "MentionBlot",
    "EmojiBlot",
    "SpoilerLineBlot",
    "BlockquoteLineBlot",
    "ListLineBlot",
    "CodeBlockBlot",
    "HeadingBlot",
    "TextBlot",
    "NullBlot",
    # Formats
    "AbstractFormat",
    "Link",
    "Bold",
    "Italic",
    "Code",
    "Strike",
    # Exceptions
    "DeltaBlotsError",
    "RegistrationError",
]
