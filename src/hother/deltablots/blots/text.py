"""
Plain text and empty blots.
"""

from typing import TYPE_CHECKING, ClassVar

from hother.deltablots.core.models import Operation

from .base import AbstractBlot

if TYPE_CHECKING:
    from hother.deltablots.core.group import BlotGroup


class TextBlot(AbstractBlot):
    """A run of plain text. The fallback for every string insert."""

    kind: ClassVar[str] = "text"

    @classmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        return isinstance(current.insert, str)

    def _extract_content(self) -> str:
        return self.current_operation.text or ""

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        # Text never joins a code block.
        return not group.accepts_inline_content()


class NullBlot(AbstractBlot):
    """Renders nothing. Used when no other blot can handle an operation."""

    kind: ClassVar[str] = "null"

    @classmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        return False
