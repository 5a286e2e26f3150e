"""
Operation normalization.

Makes line boundaries inside plain text explicit before grouping: multi-line
bare inserts are split into one operation per line and per newline, and
newlines that end a paragraph become breakpoints.
"""

import re
from collections.abc import Iterable, Sequence
from typing import Any

from hother.deltablots.utils.logging import get_logger

from .models import BREAKPOINT, NormalizedOperation, Operation
from .registry import ParserRegistry

logger = get_logger(__name__)

# Single newlines, or runs of anything else.
SUB_INSERT_PATTERN = re.compile(r"(\n)|([^\n]+)")


class OperationNormalizer:
    """Rewrites a raw operation sequence into a new, normalized one."""

    def __init__(self, registry: ParserRegistry):
        """
        Initialize normalizer.

        Args:
            registry: Registry used to recognize line terminators
        """
        self.registry = registry

    def normalize(self, operations: Iterable[Any]) -> list[NormalizedOperation]:
        """
        Normalize raw operations.

        The input is never modified.

        Args:
            operations: Raw delta mappings or Operation instances

        Returns:
            New list of operations and breakpoints
        """
        coerced = [Operation.coerce(op) for op in operations]
        normalized = self.insert_breakpoints(self.split_plain_text_newlines(coerced))
        logger.debug("Normalized operations", input_count=len(coerced), output_count=len(normalized))
        return normalized

    def split_plain_text_newlines(self, operations: Sequence[Operation]) -> list[NormalizedOperation]:
        """
        Split bare inserts containing newlines into their own operations.

        Other inserts are never split, their blots handle them.

        Args:
            operations: The operations to split

        Returns:
            New list of operations, possibly with breakpoints
        """
        result: list[NormalizedOperation] = []
        previous: Operation | None = None

        for op in operations:
            sub_inserts = SUB_INSERT_PATTERN.findall(op.insert) if op.is_bare_insert else []
            if len(sub_inserts) <= 1:
                result.append(op)
                previous = op
                continue

            tokens = [newline or text for newline, text in sub_inserts]

            # Text directly after a line structure would otherwise be absorbed into its group.
            if previous is not None and tokens[0] != "\n" and self.registry.is_line_terminator(previous):
                result.append(BREAKPOINT)

            result.extend(Operation(insert=token) for token in tokens)
            previous = op

        return result

    def insert_breakpoints(self, operations: Sequence[NormalizedOperation]) -> list[NormalizedOperation]:
        """
        Replace paragraph ending newlines with breakpoints.

        A lone newline after content that did not end in a newline ends a
        paragraph. A lone newline after another newline is an empty line and
        stays as content.

        Args:
            operations: Operations after newline splitting

        Returns:
            New list with breakpoints substituted
        """
        result: list[NormalizedOperation] = []
        last_ends_in_newline = False

        for op in operations:
            if not isinstance(op, Operation):
                result.append(op)
                last_ends_in_newline = False
                continue

            if op.is_bare_insert and op.insert == "\n" and not last_ends_in_newline:
                result.append(BREAKPOINT)
            else:
                result.append(op)

            last_ends_in_newline = op.ends_in_newline

        return result
