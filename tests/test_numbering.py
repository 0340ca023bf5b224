"""Tests for numbering module."""

import pytest

from rename_core import NumberingInfo, NumberingOptions, NumberingPosition
from rename_core.numbering import (
    apply_numbering,
    format_number,
    numbering_info,
    sequence_value,
)


def options(**kwargs) -> NumberingOptions:
    kwargs.setdefault("enabled", True)
    kwargs.setdefault("position", NumberingPosition.END)
    return NumberingOptions(**kwargs)


class TestFormatNumber:
    """Tests for format_number function."""

    @pytest.mark.parametrize("value,padding,expected", [
        (1, 3, "001"),
        (1234, 3, "1234"),
        (7, 0, "7"),
        (-5, 3, "-005"),
        (0, 1, "0"),
    ])
    def test_padding(self, value, padding, expected):
        """Test zero padding without truncation."""
        assert format_number(value, padding) == expected

    def test_sequence_value(self):
        """Test start plus index times increment."""
        assert sequence_value(2, NumberingOptions(start_at=10, increment=5)) == 20
        assert sequence_value(3, NumberingOptions(start_at=1, increment=-1)) == -2


class TestApplyNumbering:
    """Tests for apply_numbering function."""

    def test_padded_sequence(self):
        """Test indices 0, 1, 2 give 001, 002, 003."""
        opts = options(start_at=1, increment=1, padding=3)
        assert [apply_numbering("file", i, opts) for i in range(3)] == [
            "file001", "file002", "file003",
        ]

    def test_start_position(self):
        """Test numbering before the name."""
        opts = options(position=NumberingPosition.START, separator="_")
        assert apply_numbering("file", 0, opts) == "1_file"

    def test_suffix_before_extension(self):
        """Test the number goes before the extension when it is excluded."""
        opts = options(separator="_", padding=2)
        assert apply_numbering("photo.jpg", 0, opts, include_extension=False) == "photo_01.jpg"

    def test_suffix_after_extension(self):
        """Test the number goes at the very end when the extension is included."""
        opts = options(separator="_", padding=2)
        assert apply_numbering("photo.jpg", 0, opts, include_extension=True) == "photo.jpg_01"

    def test_start_keeps_extension(self):
        """Test prefix numbering with the extension excluded."""
        opts = options(position=NumberingPosition.START, separator="-")
        assert apply_numbering("photo.jpg", 4, opts, include_extension=False) == "5-photo.jpg"

    def test_index_position(self):
        """Test an index inside the name gets separators on both sides."""
        opts = options(position=NumberingPosition.INDEX, insert_index=2, separator="-")
        assert apply_numbering("abcd", 0, opts) == "ab-1-cd"

    def test_index_at_edges(self):
        """Test index 0 acts as start and a large index acts as end."""
        first = options(position=NumberingPosition.INDEX, insert_index=0, separator="-")
        past_end = options(position=NumberingPosition.INDEX, insert_index=10, separator="-")
        assert apply_numbering("abcd", 0, first) == "1-abcd"
        assert apply_numbering("abcd", 0, past_end) == "abcd-1"

    def test_empty_base_has_no_separator(self):
        """Test the separator is left out when there is no text to separate."""
        assert apply_numbering("", 0, options(separator="_")) == "1"

    def test_disabled(self):
        """Test disabled numbering passes the name through."""
        assert apply_numbering("file.txt", 3, NumberingOptions()) == "file.txt"

    def test_default_position_is_start(self):
        """Test enabled numbering with no other options prefixes the name."""
        opts = NumberingOptions(enabled=True)
        assert opts.position is NumberingPosition.START
        assert apply_numbering("photo.jpg", 0, opts) == "1photo.jpg"


class TestNumberingInfo:
    """Tests for numbering_info function."""

    def test_disabled(self):
        """Test disabled numbering has no info."""
        assert numbering_info("file.txt", 0, NumberingOptions()) is None

    @pytest.mark.parametrize("opts,include_extension", [
        (options(separator="_", padding=3), False),
        (options(separator="_", padding=3), True),
        (options(position=NumberingPosition.START, separator=" - "), False),
        (options(position=NumberingPosition.INDEX, insert_index=3, separator="."), False),
        (options(start_at=-7, padding=3), False),
    ])
    def test_span_locates_number(self, opts, include_extension):
        """Test the span points at the formatted number in the final name."""
        name = "photo.jpg"
        numbered = apply_numbering(name, 0, opts, include_extension)
        info = numbering_info(name, 0, opts, include_extension)
        assert numbered[info.start:info.end] == info.formatted_number

    def test_fields(self):
        """Test the recorded options."""
        opts = options(separator="_", padding=3)
        info = numbering_info("photo.jpg", 1, opts)
        assert info.formatted_number == "002"
        assert info.separator == "_"
        assert info.position is NumberingPosition.END
        assert (info.start, info.end) == (6, 9)


class TestPaddingLength:
    """Tests for NumberingInfo.padding_length."""

    @pytest.mark.parametrize("formatted,expected", [
        ("007", 2),
        ("100", 0),
        ("000", 2),
        ("-007", 2),
        ("0", 0),
    ])
    def test_leading_zeros(self, formatted, expected):
        """Test leading zeros are counted, never the last digit."""
        info = NumberingInfo(formatted, "", NumberingPosition.END, 0, 0, len(formatted))
        assert info.padding_length == expected
