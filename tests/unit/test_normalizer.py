"""Tests for operation normalization."""

import copy

from hother.deltablots import BREAKPOINT, Operation, ParserRegistry, TextBlot
from hother.deltablots.core.normalizer import OperationNormalizer


def inserts(operations):
    """Simplify normalized operations for comparison."""
    return [BREAKPOINT if op is BREAKPOINT else op.insert for op in operations]


class TestSplitPlainTextNewlines:
    """Test newline splitting."""

    def test_split_multiline_text(self, registry):
        """Test a bare insert is split into lines and newlines."""
        normalizer = OperationNormalizer(registry)
        result = normalizer.split_plain_text_newlines([Operation(insert="Line1\nLine2\n")])
        assert inserts(result) == ["Line1", "\n", "Line2", "\n"]

    def test_consecutive_newlines_are_separate(self, registry):
        """Test each newline becomes its own operation."""
        normalizer = OperationNormalizer(registry)
        result = normalizer.split_plain_text_newlines([Operation(insert="a\n\nb")])
        assert inserts(result) == ["a", "\n", "\n", "b"]

    def test_single_token_unchanged(self, registry):
        """Test an insert without embedded newlines is kept as is."""
        normalizer = OperationNormalizer(registry)
        op = Operation(insert="just text")
        assert normalizer.split_plain_text_newlines([op])[0] is op

    def test_formatted_text_not_split(self, registry):
        """Test inserts with attributes are left for their blots."""
        normalizer = OperationNormalizer(registry)
        op = Operation(insert="a\nb", attributes={"bold": True})
        assert normalizer.split_plain_text_newlines([op]) == [op]

    def test_break_after_line_terminator(self, registry):
        """Test text following a list item gets its own group boundary."""
        normalizer = OperationNormalizer(registry)
        ops = [
            Operation(insert="item"),
            Operation(insert="\n", attributes={"list": "bullet"}),
            Operation(insert="Paragraph\n"),
        ]
        result = normalizer.split_plain_text_newlines(ops)
        assert inserts(result) == ["item", "\n", BREAKPOINT, "Paragraph", "\n"]

    def test_no_break_when_text_starts_with_newline(self, registry):
        """Test no extra break when the split text opens with a newline."""
        normalizer = OperationNormalizer(registry)
        ops = [
            Operation(insert="item"),
            Operation(insert="\n", attributes={"list": "bullet"}),
            Operation(insert="\nNext"),
        ]
        result = normalizer.split_plain_text_newlines(ops)
        assert BREAKPOINT not in result

    def test_no_break_without_line_blots_registered(self):
        """Test line terminators are only recognized when registered."""
        normalizer = OperationNormalizer(ParserRegistry.empty().with_blot(TextBlot))
        ops = [
            Operation(insert="item"),
            Operation(insert="\n", attributes={"list": "bullet"}),
            Operation(insert="Paragraph\n"),
        ]
        assert BREAKPOINT not in normalizer.split_plain_text_newlines(ops)


class TestInsertBreakpoints:
    """Test breakpoint insertion."""

    def test_newline_after_text_is_break(self, registry):
        """Test a lone newline after text ends the paragraph."""
        normalizer = OperationNormalizer(registry)
        result = normalizer.insert_breakpoints([Operation(insert="a"), Operation(insert="\n")])
        assert inserts(result) == ["a", BREAKPOINT]

    def test_newline_after_newline_is_content(self, registry):
        """Test a blank line stays as content."""
        normalizer = OperationNormalizer(registry)
        ops = [Operation(insert="a"), Operation(insert="\n"), Operation(insert="\n")]
        assert inserts(normalizer.insert_breakpoints(ops)) == ["a", BREAKPOINT, "\n"]

    def test_leading_newline_is_break(self, registry):
        """Test a newline at the start of the document is a break."""
        normalizer = OperationNormalizer(registry)
        assert normalizer.insert_breakpoints([Operation(insert="\n")]) == [BREAKPOINT]

    def test_formatted_newline_untouched(self, registry):
        """Test newlines carrying line formats are never replaced."""
        normalizer = OperationNormalizer(registry)
        ops = [Operation(insert="a"), Operation(insert="\n", attributes={"list": "bullet"})]
        assert normalizer.insert_breakpoints(ops) == ops

    def test_newline_after_breakpoint_is_break(self, registry):
        """Test a breakpoint does not count as ending in a newline."""
        normalizer = OperationNormalizer(registry)
        result = normalizer.insert_breakpoints([BREAKPOINT, Operation(insert="\n")])
        assert result == [BREAKPOINT, BREAKPOINT]


class TestNormalize:
    """Test the full normalization pass."""

    def test_input_not_mutated(self, registry):
        """Test the raw operations are left untouched."""
        raw = [{"insert": "Line1\nLine2\n"}, {"insert": "x", "attributes": {"bold": True}}]
        original = copy.deepcopy(raw)
        OperationNormalizer(registry).normalize(raw)
        assert raw == original

    def test_multiline_document(self, registry):
        """Test lines separated by breakpoints."""
        result = OperationNormalizer(registry).normalize([{"insert": "Line1\nLine2\n"}])
        assert inserts(result) == ["Line1", BREAKPOINT, "Line2", BREAKPOINT]

    def test_blank_line_kept(self, registry):
        """Test a blank line between paragraphs survives as content."""
        result = OperationNormalizer(registry).normalize([{"insert": "A\n\nB\n"}])
        assert inserts(result) == ["A", BREAKPOINT, "\n", "B", BREAKPOINT]
