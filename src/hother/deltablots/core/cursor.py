"""
Cursor over a normalized operation sequence.
"""

from collections.abc import Sequence

from .models import NormalizedOperation, Operation


class OperationCursor:
    """
    Forward-only cursor with bounded lookbehind and lookahead.

    Peeking outside the sequence returns None instead of raising.
    """

    def __init__(self, operations: Sequence[NormalizedOperation]):
        self._operations = tuple(operations)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def has_current(self) -> bool:
        return self._index < len(self._operations)

    def current(self) -> NormalizedOperation:
        """
        Get the item under the cursor.

        Raises:
            IndexError: If the cursor is past the end
        """
        if not self.has_current():
            raise IndexError("Cursor is past the end of the operations")
        return self._operations[self._index]

    def peek_behind(self, distance: int = 1) -> NormalizedOperation | None:
        index = self._index - distance
        if distance < 1 or index < 0:
            return None
        return self._operations[index]

    def peek_ahead(self, distance: int = 1) -> NormalizedOperation | None:
        index = self._index + distance
        if distance < 1 or index >= len(self._operations):
            return None
        return self._operations[index]

    def neighbours(self) -> tuple[Operation, Operation]:
        """
        Get the previous and next operations for a blot window.

        Missing neighbours and breakpoints become empty operations.

        Returns:
            Tuple of (previous, next)
        """
        return _as_window_slot(self.peek_behind()), _as_window_slot(self.peek_ahead())

    def advance(self, steps: int = 1) -> None:
        """
        Move the cursor forward.

        Args:
            steps: Number of items to move past

        Raises:
            ValueError: If steps is not positive
        """
        if steps < 1:
            raise ValueError(f"Cursor can only move forward, got {steps} steps")
        self._index = min(self._index + steps, len(self._operations))


def _as_window_slot(item: NormalizedOperation | None) -> Operation:
    return item if isinstance(item, Operation) else Operation.empty()
