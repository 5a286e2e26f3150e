"""
Base interfaces for blots.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field, PrivateAttr

from hother.deltablots.core.models import BlotSnapshot, Operation, OperationWindow

if TYPE_CHECKING:
    from hother.deltablots.core.group import BlotGroup


class AbstractBlot(OperationWindow, ABC):
    """
    Base class for all blots.

    A blot is built from an operation window and tells the grouping engine
    where it belongs: whether it closes the open group before joining it,
    whether it needs a group to itself, and whether it folded the next
    operation into its own content.
    """

    kind: ClassVar[str] = "abstract"
    is_block: ClassVar[bool] = False
    is_embed: ClassVar[bool] = False
    is_line_terminator: ClassVar[bool] = False
    provides_mentions: ClassVar[bool] = False
    accepts_inline_content: ClassVar[bool] = True

    content: str = Field(default="", description="Textual content of the blot")

    _consumed_next_op: bool = PrivateAttr(default=False)

    def __init__(self, current_operation: Any, previous_operation: Any = None, next_operation: Any = None, **data: Any):
        super().__init__(current_operation, previous_operation, next_operation, **data)
        self._consumed_next_op = self._should_consume_next_op()
        if "content" not in data:
            self.content = self._extract_content()

    @classmethod
    @abstractmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        """
        Determine if this blot claims the current operation.

        Args:
            current: The operation being matched
            next_op: The operation after it, if any

        Returns:
            True if this blot type should be built for the window
        """

    def _extract_content(self) -> str:
        return ""

    def _should_consume_next_op(self) -> bool:
        return False

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        """Whether the open group must be emitted before this blot joins."""
        return False

    def is_own_group(self) -> bool:
        """Whether the group must be emitted right after this blot joins."""
        return False

    def has_consumed_next_op(self) -> bool:
        """Whether the next operation was folded into this blot."""
        return self._consumed_next_op

    def get_mention_usernames(self) -> list[str]:
        """Usernames mentioned by this blot. Only embeds return any."""
        return []

    def snapshot(self) -> BlotSnapshot:
        """Get a simplified, comparable representation of the blot."""
        return BlotSnapshot(kind=self.kind, content=self.content)

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        return {
            "blot_kind": self.kind,
            "content_length": len(self.content),
            "consumed_next_op": self._consumed_next_op,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"Blot[{self.kind}:{self.content!r}]"
