"""
Parsing of delta operations into blot groups.

See https://github.com/quilljs/delta for the operation format.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from hother.deltablots.blots.base import AbstractBlot
from hother.deltablots.formats.base import AbstractFormat
from hother.deltablots.utils.logging import get_logger

from .cursor import OperationCursor
from .group import BlotGroup
from .matching import match_blot, match_formats
from .models import BREAKPOINT, BlotSnapshot, NormalizedOperation, Operation
from .normalizer import OperationNormalizer
from .registry import ParserRegistry, get_default_registry

logger = get_logger(__name__)


class DeltaParser:
    """
    Parses delta operations into an ordered list of BlotGroups.

    The parser only reads its registry, so one instance can be shared
    between threads.
    """

    def __init__(self, registry: ParserRegistry | None = None):
        """
        Initialize parser.

        Args:
            registry: Registered variants. Defaults to the built-in ones
        """
        self.registry = registry if registry is not None else get_default_registry()
        self.normalizer = OperationNormalizer(self.registry)

    def parse(self, operations: Iterable[Any]) -> list[BlotGroup]:
        """
        Parse the operations into groups.

        Args:
            operations: Raw delta mappings or Operation instances

        Returns:
            Non-empty groups, in document order
        """
        normalized = self.normalizer.normalize(operations)
        groups = self.create_blot_groups(normalized)
        logger.debug("Parsed operations", operation_count=len(normalized), group_count=len(groups))
        return groups

    def parse_mention_usernames(self, operations: Iterable[Any]) -> list[str]:
        """
        Parse out the usernames of everyone mentioned.

        Skips parsing entirely when no mention capable blot is registered.

        Args:
            operations: Raw delta mappings or Operation instances

        Returns:
            Usernames in document order
        """
        if not self.registry.provides_mentions:
            return []

        usernames: list[str] = []
        for group in self.parse(operations):
            usernames.extend(group.get_mention_usernames())
        return usernames

    def parse_into_test_data(self, operations: Iterable[Any]) -> list[list[BlotSnapshot]]:
        """Parse, then simplify each group into its snapshot."""
        return [group.get_test_data() for group in self.parse(operations)]

    def get_blot_for_operations(
        self,
        current: Operation,
        previous: Operation | None = None,
        next_op: Operation | None = None,
    ) -> AbstractBlot:
        return match_blot(self.registry, current, previous, next_op)

    def get_formats_for_operations(
        self,
        current: Operation,
        previous: Operation | None = None,
        next_op: Operation | None = None,
    ) -> list[AbstractFormat]:
        return match_formats(self.registry, current, previous, next_op)

    def create_blot_groups(self, operations: Sequence[NormalizedOperation]) -> list[BlotGroup]:
        """
        Group normalized operations.

        Args:
            operations: Output of the normalizer

        Returns:
            Non-empty groups, in order
        """
        groups: list[BlotGroup] = []
        group = BlotGroup()
        cursor = OperationCursor(operations)

        def flush() -> BlotGroup:
            if not group.is_empty():
                logger.debug("Emitting group", group_index=len(groups), **group.log_context())
                groups.append(group)
                return BlotGroup()
            return group

        while cursor.has_current():
            current = cursor.current()

            # Breakpoints only close the group, they never become blots.
            if current is BREAKPOINT:
                group = flush()
                cursor.advance()
                continue

            previous, next_op = cursor.neighbours()
            blot = self.get_blot_for_operations(current, previous, next_op)

            if blot.should_clear_current_group(group):
                group = flush()

            group.push_blot(blot, self.get_formats_for_operations(current, previous, next_op))

            # Some block blots get a group all to themselves.
            if blot.is_own_group():
                group = flush()

            # A blot that absorbed the next operation must not see it again.
            cursor.advance(2 if blot.has_consumed_next_op() else 1)

        flush()
        return groups


def parse(operations: Iterable[Any], registry: ParserRegistry | None = None) -> list[BlotGroup]:
    """Parse operations into groups. See DeltaParser.parse."""
    return DeltaParser(registry).parse(operations)


def parse_mention_usernames(operations: Iterable[Any], registry: ParserRegistry | None = None) -> list[str]:
    """Get mentioned usernames. See DeltaParser.parse_mention_usernames."""
    return DeltaParser(registry).parse_mention_usernames(operations)


def parse_into_test_data(operations: Iterable[Any], registry: ParserRegistry | None = None) -> list[list[BlotSnapshot]]:
    """Get group snapshots. See DeltaParser.parse_into_test_data."""
    return DeltaParser(registry).parse_into_test_data(operations)
