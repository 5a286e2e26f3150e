"""
Core models for delta operations and parse results.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Operation(BaseModel):
    """
    A single delta operation.

    Operations are immutable. Whether ``attributes`` was supplied at all is
    tracked through ``model_fields_set``: an operation carrying an empty
    attributes mapping is not a bare insert.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    insert: Any = Field(default=None, description="Inserted text or embed value")
    attributes: Any = Field(default=None, description="Formatting flags keyed by name")

    @classmethod
    def coerce(cls, raw: Any) -> "Operation":
        """
        Build an operation from a raw delta mapping.

        No schema validation is performed. Anything that is not a mapping
        becomes an empty operation, which later renders as nothing.

        Args:
            raw: An Operation, or a mapping with ``insert`` and optional ``attributes``

        Returns:
            The operation
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            return cls()
        return cls(**{key: raw[key] for key in ("insert", "attributes") if key in raw})

    @classmethod
    def empty(cls) -> "Operation":
        """Operation used when a window slot has nothing in it."""
        return cls()

    @property
    def attrs(self) -> dict[str, Any]:
        """Attributes as a dict, empty when absent or malformed."""
        if isinstance(self.attributes, Mapping):
            return dict(self.attributes)
        return {}

    @property
    def text(self) -> str | None:
        """The insert if it is a string, None otherwise."""
        return self.insert if isinstance(self.insert, str) else None

    @property
    def is_bare_insert(self) -> bool:
        """A string insert with no attributes key."""
        return isinstance(self.insert, str) and "attributes" not in self.model_fields_set

    @property
    def ends_in_newline(self) -> bool:
        return isinstance(self.insert, str) and self.insert.endswith("\n")

    def attribute(self, key: str, default: Any = None) -> Any:
        """Get a single attribute value."""
        return self.attrs.get(key, default)

    def has_attribute(self, key: str, expected: Any = None) -> bool:
        """
        Check for a formatting flag.

        Args:
            key: Attribute name
            expected: Required value. If None, any truthy value matches

        Returns:
            True if the attribute is present with a matching value
        """
        value = self.attrs.get(key)
        if expected is None:
            return bool(value)
        return value == expected

    def embed(self, key: str) -> Any:
        """Get the value of an embed insert (``{"insert": {key: value}}``)."""
        if isinstance(self.insert, Mapping):
            return self.insert.get(key)
        return None


class Breakpoint:
    """
    Sentinel marking a forced group boundary.

    Only produced by normalization. It is never an Operation and never ends up
    inside a group.
    """

    _instance: Optional["Breakpoint"] = None

    def __new__(cls) -> "Breakpoint":
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "BREAKPOINT"


BREAKPOINT = Breakpoint()

NormalizedOperation = Union[Operation, Breakpoint]


class BlotSnapshot(BaseModel):
    """Simplified, comparable view of a blot and the formats attached to it."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Kind of the blot")
    content: str = Field(default="", description="Textual content of the blot")
    formats: tuple[str, ...] = Field(default=(), description="Kinds of the attached formats")


class OperationWindow(BaseModel):
    """
    Base for values built from a (current, previous, next) operation window.

    Raw mappings are accepted and coerced. A missing neighbour is an empty
    operation.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    current_operation: Operation = Field(..., description="The operation being matched")
    previous_operation: Operation = Field(default_factory=Operation.empty, description="Operation before the current one")
    next_operation: Operation = Field(default_factory=Operation.empty, description="Operation after the current one")

    def __init__(self, current_operation: Any, previous_operation: Any = None, next_operation: Any = None, **data: Any):
        super().__init__(
            current_operation=Operation.coerce(current_operation),
            previous_operation=Operation.coerce(previous_operation),
            next_operation=Operation.coerce(next_operation),
            **data,
        )
