"""
Blot and format variant registry.

A registry is an immutable value. Registering a variant returns a new
registry, so a registry handed to a parser can never change underneath it.
"""

import inspect
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hother.deltablots.blots.base import AbstractBlot
from hother.deltablots.formats.base import AbstractFormat
from hother.deltablots.utils.logging import get_logger

from .exceptions import RegistrationError
from .models import Operation

logger = get_logger(__name__)


class BlotVariant(BaseModel):
    """A blot match predicate paired with the factory that builds the blot."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str = Field(..., description="Kind of blot produced")
    matches: Callable[..., bool] = Field(..., description="Predicate over (current, next)")
    factory: Callable[..., Any] = Field(..., description="Builds the blot from (current, previous, next)")
    is_line_terminator: bool = Field(default=False, description="Whether a match closes a line structure")
    provides_mentions: bool = Field(default=False, description="Whether the blot can report mentioned usernames")

    @classmethod
    def from_blot(cls, blot_class: type[AbstractBlot]) -> "BlotVariant":
        """
        Create a variant from a blot class.

        Args:
            blot_class: A concrete AbstractBlot subclass

        Returns:
            The variant

        Raises:
            RegistrationError: If the class does not implement the blot contract
        """
        if not (isinstance(blot_class, type) and issubclass(blot_class, AbstractBlot)) or inspect.isabstract(blot_class):
            raise RegistrationError(blot_class)
        return cls(
            kind=blot_class.kind,
            matches=blot_class.matches,
            factory=blot_class,
            is_line_terminator=blot_class.is_line_terminator,
            provides_mentions=blot_class.provides_mentions,
        )


class FormatVariant(BaseModel):
    """A format match predicate paired with the factory that builds the format."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str = Field(..., description="Kind of format produced")
    matches: Callable[..., bool] = Field(..., description="Predicate over the current operation")
    factory: Callable[..., Any] = Field(..., description="Builds the format from (current, previous, next)")

    @classmethod
    def from_format(cls, format_class: type[AbstractFormat]) -> "FormatVariant":
        """
        Create a variant from a format class.

        Raises:
            RegistrationError: If the class does not implement the format contract
        """
        if (
            not (isinstance(format_class, type) and issubclass(format_class, AbstractFormat))
            or format_class.kind == AbstractFormat.kind
        ):
            raise RegistrationError(format_class)
        return cls(kind=format_class.kind, matches=format_class.matches, factory=format_class)


class ParserRegistry(BaseModel):
    """
    Ordered blot and format variants used by the parser.

    Blot order is match priority: the first variant whose predicate accepts an
    operation window wins. Format order only affects the order in which
    formats are attached.
    """

    model_config = ConfigDict(frozen=True)

    blots: tuple[BlotVariant, ...] = Field(default=(), description="Blot variants in priority order")
    formats: tuple[FormatVariant, ...] = Field(default=(), description="Format variants")

    @property
    def blot_kinds(self) -> list[str]:
        return [variant.kind for variant in self.blots]

    @property
    def format_kinds(self) -> list[str]:
        return [variant.kind for variant in self.formats]

    @property
    def provides_mentions(self) -> bool:
        """Whether any registered blot variant can report mentions."""
        return any(variant.provides_mentions for variant in self.blots)

    def is_line_terminator(self, operation: Operation) -> bool:
        """
        Check if an operation closes a registered line structure.

        Args:
            operation: The operation to check on its own

        Returns:
            True if a line terminating variant matches it
        """
        return any(variant.matches(operation) for variant in self.blots if variant.is_line_terminator)

    def with_blot(self, blot: type[AbstractBlot] | BlotVariant) -> "ParserRegistry":
        """
        Register a blot variant with the lowest priority so far.

        Args:
            blot: A blot class or a ready made variant

        Returns:
            A new registry with the variant appended
        """
        variant = blot if isinstance(blot, BlotVariant) else BlotVariant.from_blot(blot)
        if variant.kind in self.blot_kinds:
            logger.warning(f"Blot kind already registered, earlier variant keeps priority: {variant.kind}")
        logger.info("Registered blot variant", kind=variant.kind, priority=len(self.blots))
        return self.model_copy(update={"blots": (*self.blots, variant)})

    def with_format(self, fmt: type[AbstractFormat] | FormatVariant) -> "ParserRegistry":
        """
        Register a format variant.

        Args:
            fmt: A format class or a ready made variant

        Returns:
            A new registry with the variant appended
        """
        variant = fmt if isinstance(fmt, FormatVariant) else FormatVariant.from_format(fmt)
        if variant.kind in self.format_kinds:
            logger.warning(f"Format kind already registered: {variant.kind}")
        logger.info("Registered format variant", kind=variant.kind)
        return self.model_copy(update={"formats": (*self.formats, variant)})

    def with_core_blots_and_formats(self) -> "ParserRegistry":
        """
        Register all of the built-in blots and formats.

        Embeds must come first, otherwise a blockquote holding only a mention
        matches as a blockquote instead of as a mention. Text must be last.
        """
        from hother.deltablots.blots import (
            BlockquoteLineBlot,
            CodeBlockBlot,
            EmojiBlot,
            ExternalBlot,
            HeadingBlot,
            ListLineBlot,
            MentionBlot,
            SpoilerLineBlot,
            TextBlot,
        )
        from hother.deltablots.formats import Bold, Code, Italic, Link, Strike

        registry = self
        for blot in (
            ExternalBlot,
            MentionBlot,
            EmojiBlot,
            SpoilerLineBlot,
            BlockquoteLineBlot,
            ListLineBlot,
            CodeBlockBlot,
            HeadingBlot,
            TextBlot,
        ):
            registry = registry.with_blot(blot)
        for fmt in (Link, Bold, Italic, Code, Strike):
            registry = registry.with_format(fmt)
        return registry

    @classmethod
    def empty(cls) -> "ParserRegistry":
        """Create a registry with nothing registered."""
        return cls()

    @classmethod
    def create_default(cls) -> "ParserRegistry":
        """Create registry with the built-in blots and formats."""
        return cls().with_core_blots_and_formats()


@lru_cache(maxsize=1)
def get_default_registry() -> ParserRegistry:
    """Get the shared registry of built-in variants, built on first use."""
    return ParserRegistry.create_default()
