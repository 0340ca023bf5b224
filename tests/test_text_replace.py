"""Tests for text_replace module."""

from rename_core import DiffKind, DiffSegment, ReplacementSpan
from rename_core.diff_text import modified_text, original_text
from rename_core.text_match import compile_pattern
from rename_core.text_replace import parse_template, replace_text


def regex(find_text):
    return compile_pattern(find_text, case_sensitive=True, regex_mode=True)


class TestLiteralReplace:
    """Tests for literal replacement."""

    def test_simple(self):
        """Test a literal word replacement and its segments."""
        result = replace_text("report.txt", compile_pattern("report"), "summary")
        assert result.new_text == "summary.txt"
        assert result.match_count == 1
        assert result.segments == (
            DiffSegment(DiffKind.REMOVED, "report"),
            DiffSegment(DiffKind.ADDED, "summary"),
            DiffSegment(DiffKind.UNCHANGED, ".txt"),
        )

    def test_all_occurrences(self):
        """Test every match is replaced by default."""
        assert replace_text("aaa", compile_pattern("a"), "b").new_text == "bbb"

    def test_first_only(self):
        """Test only the leftmost match is replaced."""
        result = replace_text("aaa", compile_pattern("a"), "b", first_only=True)
        assert result.new_text == "baa"
        assert result.match_count == 1

    def test_deletion(self):
        """Test an empty template removes the match."""
        result = replace_text("photo.realcugan.png", compile_pattern(".realcugan"), "")
        assert result.new_text == "photo.png"
        assert result.inserted == ()

    def test_no_match(self):
        """Test text without matches is returned unchanged."""
        result = replace_text("abc", compile_pattern("z"), "y")
        assert result.new_text == "abc"
        assert result.match_count == 0
        assert result.segments == (DiffSegment(DiffKind.UNCHANGED, "abc"),)

    def test_segments_rebuild_both_names(self):
        """Test segments reconstruct the original and the new text."""
        text = "a-b-c-d"
        result = replace_text(text, compile_pattern("-"), "__")
        assert original_text(result.segments) == text
        assert modified_text(result.segments) == result.new_text


class TestTemplate:
    """Tests for replacement template handling."""

    def test_backreferences(self):
        """Test numbered groups and the inserted spans they produce."""
        result = replace_text("IMG_202301.jpg", regex(r"(\d{4})(\d{2})"), "$1-$2")
        assert result.new_text == "IMG_2023-01.jpg"
        assert result.inserted == (
            ReplacementSpan(4, 8, "2023", 1),
            ReplacementSpan(8, 9, "-", -1),
            ReplacementSpan(9, 11, "01", 2),
        )

    def test_missing_group_stays_literal(self):
        """Test a reference to a group the pattern lacks is kept as text."""
        assert replace_text("a", regex("(a)"), "$5").new_text == "$5"

    def test_dollar_escape(self):
        """Test $$ inserts a single dollar sign."""
        assert replace_text("a", regex("(a)"), "$$1").new_text == "$1"

    def test_single_digit_fallback(self):
        """Test $10 with one group is group 1 followed by 0."""
        assert replace_text("a", regex("(a)"), "$10").new_text == "a0"

    def test_two_digit_group(self):
        """Test $10 resolves to group 10 when it exists."""
        pattern = regex("(a)(b)(c)(d)(e)(f)(g)(h)(i)(j)")
        assert replace_text("abcdefghij", pattern, "$10").new_text == "j"

    def test_whole_match(self):
        """Test $& inserts the whole match."""
        result = replace_text("abc", compile_pattern("b"), "[$&]")
        assert result.new_text == "a[b]c"
        assert ReplacementSpan(2, 3, "b", 0) in result.inserted

    def test_before_and_after(self):
        """Test $` and $' insert the text around the match."""
        assert replace_text("abc", compile_pattern("b"), "$'").new_text == "acc"
        assert replace_text("abc", compile_pattern("b"), "$`").new_text == "aac"

    def test_named_group(self):
        """Test $<name> inserts a named group."""
        assert replace_text("2023", regex(r"(?P<year>\d{4})"), "y$<year>").new_text == "y2023"

    def test_unmatched_optional_group(self):
        """Test an optional group that did not take part inserts nothing."""
        assert replace_text("b", regex("(a)?b"), "[$1]").new_text == "[]"

    def test_trailing_dollar(self):
        """Test a lone trailing dollar is literal."""
        assert replace_text("a", compile_pattern("a"), "x$").new_text == "x$"

    def test_parse_template_tokens(self):
        """Test literal runs merge while $$ stays a token of its own."""
        tokens = parse_template("ab$$c$1", regex("(x)"))
        assert [(t.kind, t.text, t.group) for t in tokens] == [
            ("literal", "ab", 0),
            ("literal", "$", 0),
            ("literal", "c", 0),
            ("group", "", 1),
        ]
