"""
text_match.py - Text Matching Tools

Provides pattern compilation, match spans and regex highlighting
"""

import logging
import re
from typing import List, Tuple

from .errors import PatternError
from .models_fs import MatchSpan, RegexSegment

logger = logging.getLogger(__name__)


def compile_pattern(
    find_text: str,
    case_sensitive: bool = False,
    regex_mode: bool = False
) -> re.Pattern:
    """
    Compile the find text into a pattern

    Args:
        find_text: Text or regex to find
        case_sensitive: Whether case-sensitive
        regex_mode: Whether find_text is a regex (otherwise matched literally)

    Returns:
        Compiled pattern

    Raises:
        PatternError: If regex_mode is set and find_text is not a valid regex
    """
    flags = 0 if case_sensitive else re.IGNORECASE

    if not regex_mode:
        return re.compile(re.escape(find_text), flags)

    try:
        return re.compile(find_text, flags)
    except re.error as e:
        logger.warning("Invalid regex pattern %r: %s", find_text, e)
        raise PatternError(find_text, str(e)) from e


def find_matches(text: str, pattern: re.Pattern, first_only: bool = False) -> List[MatchSpan]:
    """
    Find all non-overlapping matches

    Args:
        text: Text to search
        pattern: Compiled pattern
        first_only: Only return the leftmost match

    Returns:
        Match spans in order
    """
    spans = []
    for match in pattern.finditer(text):
        spans.append(MatchSpan(match.start(), match.end(), match.group()))
        if first_only:
            break
    return spans


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split a name into base and extension

    The extension starts at the last dot, unless that dot is the first
    character (dotfiles have no extension).

    Returns:
        (base, extension including the dot)
    """
    index = name.rfind(".")
    if index <= 0:
        return name, ""
    return name[:index], name[index:]


def match_target(name: str, include_extension: bool) -> Tuple[str, str]:
    """
    Get the part of a name that matching operates on

    Returns:
        (target, untouched tail)
    """
    if include_extension:
        return name, ""
    return split_extension(name)


def regex_highlights(text: str, pattern: re.Pattern) -> List[RegexSegment]:
    """
    Segment text into plain text and highlighted matches

    When the pattern has capture groups each group becomes its own segment
    (nested or overlapping groups are skipped so no text is duplicated);
    otherwise the whole match is group 0.

    Args:
        text: Text to segment
        pattern: Compiled pattern

    Returns:
        Segments covering the whole text
    """
    segments: List[RegexSegment] = []
    last = 0

    for match in pattern.finditer(text):
        start, end = match.span()
        if start > last:
            segments.append(RegexSegment(text[last:start]))

        if pattern.groups:
            inner = start
            for group_id in range(1, pattern.groups + 1):
                g_start, g_end = match.span(group_id)
                # Unmatched optional group, or nested inside a previous one
                if g_start < 0 or g_start < inner:
                    continue
                if g_start > inner:
                    segments.append(RegexSegment(text[inner:g_start]))
                segments.append(RegexSegment(text[g_start:g_end], group_id))
                inner = g_end
            if inner < end:
                segments.append(RegexSegment(text[inner:end]))
        else:
            segments.append(RegexSegment(match.group(), 0))

        last = end

    if last < len(text):
        segments.append(RegexSegment(text[last:]))

    return segments


def has_capture_groups(find_text: str) -> bool:
    """
    Check if a regex has at least one capture group

    Non-capturing groups, escaped parentheses and invalid patterns all
    count as no groups.
    """
    try:
        return re.compile(find_text).groups > 0
    except re.error:
        return False
