"""
Blots that terminate a line through an attribute on its newline.

In a delta the line format lives on the newline that ends the line::

    {"insert": "Some code"}, {"insert": "\\n", "attributes": {"code-block": True}}

The text operation matches through its next operation and absorbs it, so the
newline is never processed on its own.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from hother.deltablots.core.models import Operation

from .text import TextBlot

if TYPE_CHECKING:
    from hother.deltablots.core.group import BlotGroup


class AbstractBlockBlot(TextBlot):
    """Base class for blots keyed on a line attribute."""

    is_block: ClassVar[bool] = True
    attribute_key: ClassVar[str] = ""

    @classmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        return any(op is not None and op.has_attribute(cls.attribute_key) for op in (current, next_op))

    @property
    def terminator(self) -> Operation:
        """The operation carrying the line attribute."""
        if self._consumed_next_op:
            return self.next_operation
        return self.current_operation

    @property
    def line_value(self) -> Any:
        return self.terminator.attribute(self.attribute_key)

    def _should_consume_next_op(self) -> bool:
        return not self.current_operation.has_attribute(self.attribute_key) and self.next_operation.has_attribute(
            self.attribute_key
        )

    def _extract_content(self) -> str:
        text = self.current_operation.text or ""
        if self.current_operation.has_attribute(self.attribute_key):
            return text.rstrip("\n")
        return text


class CodeBlockBlot(AbstractBlockBlot):
    """A line of a code block. Consecutive lines share one group."""

    kind: ClassVar[str] = "code-block"
    attribute_key: ClassVar[str] = "code-block"
    accepts_inline_content: ClassVar[bool] = False

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        if group.is_empty():
            return False
        return not isinstance(group.get_overriding_blot(), CodeBlockBlot)


class HeadingBlot(AbstractBlockBlot):
    """A heading line. Always gets a group to itself."""

    kind: ClassVar[str] = "heading"
    attribute_key: ClassVar[str] = "header"

    @property
    def level(self) -> int:
        value = self.line_value
        if isinstance(value, Mapping):
            value = value.get("level")
        try:
            return int(value)
        except (TypeError, ValueError):
            return 1

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        return group.get_overriding_blot() is not None

    def is_own_group(self) -> bool:
        return True
