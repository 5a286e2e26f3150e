"""
Inline formats: link, bold, italic, inline code and strikethrough.
"""

from typing import ClassVar

from hother.deltablots.core.models import Operation

from .base import AbstractFormat


class Link(AbstractFormat):
    """A hyperlink. Adjacent runs only merge when they point at the same target."""

    kind: ClassVar[str] = "link"
    attribute_key: ClassVar[str] = "link"

    @classmethod
    def matches(cls, current: Operation) -> bool:
        href = current.attribute(cls.attribute_key)
        return isinstance(href, str) and bool(href.strip())

    @property
    def href(self) -> str:
        return self.current_operation.attribute(self.attribute_key, "").strip()

    def _same_format(self, operation: Operation) -> bool:
        return Link.matches(operation) and operation.attribute(self.attribute_key).strip() == self.href


class Bold(AbstractFormat):
    kind: ClassVar[str] = "bold"
    attribute_key: ClassVar[str] = "bold"


class Italic(AbstractFormat):
    kind: ClassVar[str] = "italic"
    attribute_key: ClassVar[str] = "italic"


class Code(AbstractFormat):
    kind: ClassVar[str] = "code"
    attribute_key: ClassVar[str] = "code"


class Strike(AbstractFormat):
    kind: ClassVar[str] = "strike"
    attribute_key: ClassVar[str] = "strike"
