"""
numbering.py - Sequential Numbering

Inserts a zero-padded sequence number into a name. Numbering always runs on
the name produced by find/replace, never on the original.
"""

import logging
from typing import Optional, Tuple

from .models_fs import NumberingInfo, NumberingOptions, NumberingPosition
from .text_match import split_extension

logger = logging.getLogger(__name__)


def sequence_value(index: int, options: NumberingOptions) -> int:
    """Sequence value for the item at the given ordinal index"""
    return options.start_at + index * options.increment


def format_number(value: int, padding: int) -> str:
    """
    Left-pad the digits of value with zeros

    Args:
        value: Sequence value
        padding: Minimum number of digits (wider numbers are not truncated)

    Returns:
        Formatted number, sign first for negative values
    """
    digits = str(abs(value))
    if padding > 0:
        digits = digits.zfill(padding)
    return f"-{digits}" if value < 0 else digits


def _compose(base: str, number: str, options: NumberingOptions) -> Tuple[str, int]:
    """
    Insert number into base

    Returns:
        (numbered base, offset of the number inside it)
    """
    sep = options.separator if base else ""
    position = options.position

    if position is NumberingPosition.INDEX:
        index = max(0, options.insert_index)
        if index == 0:
            position = NumberingPosition.START
        elif index >= len(base):
            position = NumberingPosition.END
        else:
            before = base[:index] + sep
            return before + number + sep + base[index:], len(before)

    if position is NumberingPosition.START:
        return number + sep + base, 0

    before = base + sep
    return before + number, len(before)


def numbering_info(
    name: str,
    index: int,
    options: NumberingOptions,
    include_extension: bool = False
) -> Optional[NumberingInfo]:
    """
    Describe where the number goes in the numbered name

    Args:
        name: Name after find/replace
        index: Ordinal index of the item
        options: Numbering options
        include_extension: Treat the extension as part of the base name

    Returns:
        Numbering info, or None when numbering is disabled
    """
    if not options.enabled:
        return None

    base = name if include_extension else split_extension(name)[0]
    number = format_number(sequence_value(index, options), options.padding)
    _, offset = _compose(base, number, options)

    return NumberingInfo(
        formatted_number=number,
        separator=options.separator if base else "",
        position=options.position,
        insert_index=options.insert_index,
        start=offset,
        end=offset + len(number),
    )


def apply_numbering(
    name: str,
    index: int,
    options: NumberingOptions,
    include_extension: bool = False
) -> str:
    """
    Insert the sequence number into name

    Args:
        name: Name after find/replace
        index: Ordinal index of the item
        options: Numbering options
        include_extension: Number after the extension instead of before it

    Returns:
        Numbered name (unchanged when numbering is disabled)
    """
    if not options.enabled:
        return name

    if include_extension:
        base, extension = name, ""
    else:
        base, extension = split_extension(name)

    number = format_number(sequence_value(index, options), options.padding)
    numbered, _ = _compose(base, number, options)
    logger.debug("Numbered %r as %r (index %d)", name, numbered + extension, index)
    return numbered + extension
