"""
Base interface for formats.
"""

from typing import Any, ClassVar

from hother.deltablots.core.models import Operation, OperationWindow


class AbstractFormat(OperationWindow):
    """
    An attribute driven style wrapping the content of a blot.

    Any number of formats may attach to the same operation. The neighbouring
    operations are kept so a renderer can merge the wrappers of adjacent runs
    carrying the same format.
    """

    kind: ClassVar[str] = "abstract"
    attribute_key: ClassVar[str] = ""

    @classmethod
    def matches(cls, current: Operation) -> bool:
        """
        Determine if this format applies to an operation.

        Args:
            current: The operation to check

        Returns:
            True if the attribute for this format is set
        """
        return current.has_attribute(cls.attribute_key)

    @property
    def value(self) -> Any:
        return self.current_operation.attribute(self.attribute_key)

    def _same_format(self, operation: Operation) -> bool:
        return type(self).matches(operation)

    def is_continued_from_previous(self) -> bool:
        """Whether the previous operation carries the same format."""
        return self._same_format(self.previous_operation)

    def continues_into_next(self) -> bool:
        """Whether the next operation carries the same format."""
        return self._same_format(self.next_operation)

    def __str__(self) -> str:
        return f"Format[{self.kind}]"
