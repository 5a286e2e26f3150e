"""Built-in blots."""

from .base import AbstractBlot
from .blocks import AbstractBlockBlot, CodeBlockBlot, HeadingBlot
from .embeds import AbstractEmbedBlot, EmojiBlot, ExternalBlot, MentionBlot
from .lines import AbstractLineBlot, BlockquoteLineBlot, ListLineBlot, SpoilerLineBlot
from .text import NullBlot, TextBlot

__all__ = [
    # Bases
    "AbstractBlot",
    "AbstractBlockBlot",
    "AbstractEmbedBlot",
    "AbstractLineBlot",
    # Embeds
    "ExternalBlot",
    "MentionBlot",
    "EmojiBlot",
    # Lines
    "SpoilerLineBlot",
    "BlockquoteLineBlot",
    "ListLineBlot",
    # Blocks
    "CodeBlockBlot",
    "HeadingBlot",
    # Fallbacks
    "TextBlot",
    "NullBlot",
]
