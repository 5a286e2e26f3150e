"""Tests for blot groups."""

from hother.deltablots import (
    BlotGroup,
    BlotSnapshot,
    Bold,
    CodeBlockBlot,
    ListLineBlot,
    MentionBlot,
    Operation,
    TextBlot,
)


class TestBlotGroup:
    """Test BlotGroup."""

    def test_empty(self):
        """Test a new group is empty."""
        group = BlotGroup()
        assert group.is_empty()
        assert len(group) == 0
        assert group.get_primary_blot() is None
        assert group.get_overriding_blot() is None
        assert group.accepts_inline_content()

    def test_push_blot(self):
        """Test adding blots keeps their order."""
        group = BlotGroup()
        first = TextBlot(Operation(insert="a"))
        second = TextBlot(Operation(insert="b"))
        group.push_blot(first)
        group.push_blot(second)

        assert not group.is_empty()
        assert group.blots == [first, second]
        assert group.get_primary_blot() is first

    def test_overriding_blot(self):
        """Test the first block level blot decides the group."""
        group = BlotGroup()
        group.push_blot(TextBlot(Operation(insert="lead")))
        item = ListLineBlot(Operation(insert="item"), None, Operation(insert="\n", attributes={"list": "bullet"}))
        group.push_blot(item)

        assert group.get_overriding_blot() is item
        assert group.get_primary_blot() is item
        assert group.accepts_inline_content()

    def test_code_group_rejects_inline(self):
        """Test code groups refuse inline content."""
        group = BlotGroup()
        group.push_blot(CodeBlockBlot(Operation(insert="x"), None, Operation(insert="\n", attributes={"code-block": True})))
        assert not group.accepts_inline_content()

    def test_mention_usernames(self):
        """Test mentions are gathered in order from embed blots only."""
        group = BlotGroup()
        group.push_blot(MentionBlot(Operation(insert={"mention": {"name": "alice"}})))
        group.push_blot(TextBlot(Operation(insert=" and ")))
        group.push_blot(MentionBlot(Operation(insert={"mention": {"name": "bob"}})))
        assert group.get_mention_usernames() == ["alice", "bob"]

    def test_test_data(self):
        """Test snapshots include the attached format kinds."""
        op = Operation(insert="strong", attributes={"bold": True})
        group = BlotGroup()
        group.push_blot(TextBlot(op), [Bold(op)])
        assert group.get_test_data() == [BlotSnapshot(kind="text", content="strong", formats=("bold",))]

    def test_log_context(self):
        """Test log context generation."""
        group = BlotGroup()
        group.push_blot(TextBlot(Operation(insert="a")))
        context = group.log_context()
        assert context["primary_kind"] == "text"
        assert context["blot_count"] == 1
