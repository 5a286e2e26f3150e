"""
Groups of blots rendered together.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hother.deltablots.blots.base import AbstractBlot
from hother.deltablots.formats.base import AbstractFormat

from .models import BlotSnapshot


class GroupEntry(BaseModel):
    """A blot and the formats attached to it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    blot: AbstractBlot
    formats: tuple[AbstractFormat, ...] = ()

    @property
    def format_kinds(self) -> tuple[str, ...]:
        return tuple(fmt.kind for fmt in self.formats)

    def snapshot(self) -> BlotSnapshot:
        return self.blot.snapshot().model_copy(update={"formats": self.format_kinds})


class BlotGroup(BaseModel):
    """
    An ordered bundle of blots, e.g. every item of one list.

    A group returned by the parser is never empty.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    entries: list[GroupEntry] = Field(default_factory=list, description="Blots with their formats, in order")

    def push_blot(self, blot: AbstractBlot, formats: Iterable[AbstractFormat] = ()) -> None:
        """
        Add a blot to the end of the group.

        Args:
            blot: The blot to add
            formats: Formats attached to the blot
        """
        self.entries.append(GroupEntry(blot=blot, formats=tuple(formats)))

    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def blots(self) -> list[AbstractBlot]:
        return [entry.blot for entry in self.entries]

    def get_overriding_blot(self) -> AbstractBlot | None:
        """
        Get the first block level blot (line, code block, heading).

        That blot decides what the whole group renders as.
        """
        for entry in self.entries:
            if entry.blot.is_block:
                return entry.blot
        return None

    def get_primary_blot(self) -> AbstractBlot | None:
        """Get the overriding blot, or the first blot of a plain group."""
        overriding = self.get_overriding_blot()
        if overriding is not None:
            return overriding
        return self.entries[0].blot if self.entries else None

    def accepts_inline_content(self) -> bool:
        """Whether text and inline embeds may join this group."""
        overriding = self.get_overriding_blot()
        return overriding is None or overriding.accepts_inline_content

    def get_mention_usernames(self) -> list[str]:
        """Get the usernames mentioned in the group, in order."""
        usernames: list[str] = []
        for entry in self.entries:
            usernames.extend(entry.blot.get_mention_usernames())
        return usernames

    def get_test_data(self) -> list[BlotSnapshot]:
        """Simplify the group into comparable snapshots, one per blot."""
        return [entry.snapshot() for entry in self.entries]

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        primary = self.get_primary_blot()
        return {
            "primary_kind": primary.kind if primary is not None else None,
            "blot_count": len(self.entries),
        }
