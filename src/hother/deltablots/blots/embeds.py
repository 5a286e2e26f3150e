"""
Embed blots: external content cards, user mentions and emoji.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from hother.deltablots.core.models import Operation

from .base import AbstractBlot

if TYPE_CHECKING:
    from hother.deltablots.core.group import BlotGroup


class AbstractEmbedBlot(AbstractBlot):
    """Base class for blots built from an embed insert (``{"insert": {key: value}}``)."""

    is_embed: ClassVar[bool] = True
    embed_key: ClassVar[str] = ""

    @classmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        return current.embed(cls.embed_key) is not None

    @property
    def embed_value(self) -> dict[str, Any]:
        value = self.current_operation.embed(self.embed_key)
        return dict(value) if isinstance(value, Mapping) else {}

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        return not group.accepts_inline_content()


class ExternalBlot(AbstractEmbedBlot):
    """A block level embed (link card, video, image). Always alone in its group."""

    kind: ClassVar[str] = "external"
    embed_key: ClassVar[str] = "embed-external"

    @property
    def data(self) -> dict[str, Any]:
        data = self.embed_value.get("data")
        return dict(data) if isinstance(data, Mapping) else {}

    def _extract_content(self) -> str:
        url = self.data.get("url")
        return url if isinstance(url, str) else ""

    def should_clear_current_group(self, group: "BlotGroup") -> bool:
        return not group.is_empty()

    def is_own_group(self) -> bool:
        return True


class MentionBlot(AbstractEmbedBlot):
    """
    A user mention.

    Matches either an embed insert ``{"insert": {"mention": {"name": ...}}}``
    or a text run carrying the mention as an attribute
    ``{"insert": "@name", "attributes": {"mention": {"name": ...}}}``.
    """

    kind: ClassVar[str] = "mention"
    embed_key: ClassVar[str] = "mention"
    provides_mentions: ClassVar[bool] = True

    @classmethod
    def matches(cls, current: Operation, next_op: Operation | None = None) -> bool:
        if isinstance(current.embed(cls.embed_key), Mapping):
            return True
        return isinstance(current.insert, str) and isinstance(current.attribute(cls.embed_key), Mapping)

    @property
    def mention(self) -> dict[str, Any]:
        if self.embed_value:
            return self.embed_value
        value = self.current_operation.attribute(self.embed_key)
        return dict(value) if isinstance(value, Mapping) else {}

    @property
    def username(self) -> str | None:
        name = self.mention.get("name")
        return str(name) if name else None

    @property
    def user_id(self) -> Any:
        return self.mention.get("userID")

    def _extract_content(self) -> str:
        if isinstance(self.current_operation.insert, str):
            return self.current_operation.insert
        return f"@{self.username}" if self.username else ""

    def get_mention_usernames(self) -> list[str]:
        return [self.username] if self.username else []


class EmojiBlot(AbstractEmbedBlot):
    kind: ClassVar[str] = "emoji"
    embed_key: ClassVar[str] = "emoji"

    def _extract_content(self) -> str:
        chars = self.embed_value.get("emojiChars")
        return chars if isinstance(chars, str) else ""
