"""
Blot and format matching over an operation window.
"""

from hother.deltablots.blots.base import AbstractBlot
from hother.deltablots.blots.text import NullBlot, TextBlot
from hother.deltablots.formats.base import AbstractFormat

from .models import Operation
from .registry import ParserRegistry


def match_blot(
    registry: ParserRegistry,
    current: Operation,
    previous: Operation | None = None,
    next_op: Operation | None = None,
) -> AbstractBlot:
    """
    Get the matching blot for an operation window.

    Variants are tried in registry order and only see ``(current, next)``.
    When none matches, falls back to a TextBlot for string inserts and to a
    NullBlot otherwise, so this never fails on unexpected input.

    Args:
        registry: Registry to match against
        current: The current operation
        previous: The previous operation
        next_op: The next operation

    Returns:
        The blot built from the window
    """
    previous = previous if previous is not None else Operation.empty()
    next_op = next_op if next_op is not None else Operation.empty()

    for variant in registry.blots:
        if variant.matches(current, next_op):
            return variant.factory(current, previous, next_op)

    fallback = TextBlot if TextBlot.matches(current) else NullBlot
    return fallback(current, previous, next_op)


def match_formats(
    registry: ParserRegistry,
    current: Operation,
    previous: Operation | None = None,
    next_op: Operation | None = None,
) -> list[AbstractFormat]:
    """
    Get every format applying to the current operation.

    Args:
        registry: Registry to match against
        current: The current operation
        previous: The previous operation
        next_op: The next operation

    Returns:
        The matching formats, possibly none
    """
    previous = previous if previous is not None else Operation.empty()
    next_op = next_op if next_op is not None else Operation.empty()

    return [variant.factory(current, previous, next_op) for variant in registry.formats if variant.matches(current)]
