"""
Line structure blots: spoilers, blockquotes and lists.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from .blocks import AbstractBlockBlot

if TYPE_CHECKING:
    from hother.deltablots.core.group import BlotGroup


class AbstractLineBlot(AbstractBlockBlot):
    """
    Base class for multi-line structures.

    Consecutive lines of the same structure share a group. Inline content
    before the terminating newline (formatted runs, mentions) joins the line.
    """

    is_line_terminator: ClassVar[bool] = True

    @property
    def line_type(self) -> Any:
        """Value two lines must share to live in the same group."""
        return self.kind

    def continues_structure(self, other: object) -> bool:
        return type(other) is type(self) and other.line_type == self.line_type

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        overriding = group.get_overriding_blot()
        if overriding is None:
            return False
        return not self.continues_structure(overriding)


class SpoilerLineBlot(AbstractLineBlot):
    kind: ClassVar[str] = "spoiler-line"
    attribute_key: ClassVar[str] = "spoiler-line"


class BlockquoteLineBlot(AbstractLineBlot):
    kind: ClassVar[str] = "blockquote-line"
    attribute_key: ClassVar[str] = "blockquote-line"


class ListLineBlot(AbstractLineBlot):
    """
    A list item.

    The ``list`` attribute is either a plain type (``"bullet"``, ``"ordered"``)
    or a mapping with ``type`` and ``depth``. Items of different types never
    share a group; depth is left to the renderer.
    """

    kind: ClassVar[str] = "list-line"
    attribute_key: ClassVar[str] = "list"

    @property
    def list_type(self) -> str:
        value = self.line_value
        if isinstance(value, Mapping):
            value = value.get("type")
        return str(value) if value else "bullet"

    @property
    def depth(self) -> int:
        value = self.line_value
        if isinstance(value, Mapping):
            depth = value.get("depth", 0)
        else:
            depth = self.terminator.attribute("indent", 0)
        try:
            return int(depth)
        except (TypeError, ValueError):
            return 0

    @property
    def line_type(self) -> Any:
        return self.list_type
