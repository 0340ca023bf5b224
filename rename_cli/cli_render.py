"""
cli_render.py - Terminal Rendering

Colors names in the preview with ANSI escapes: matched text in the original
name, inserted text and the sequence number in the new name.
"""

from typing import Iterable, List, Sequence, Tuple

from rename_core import (
    DiffKind, DiffSegment, RenameItem, compute_diff
)

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
STRIKE = "\033[9m"

# Capture group colors, cycled
GROUP_COLORS = ["\033[34m", "\033[35m", "\033[33m", "\033[36m", "\033[32m", "\033[31m"]


def _style(text: str, style: str, color: bool) -> str:
    if not color or not style or not text:
        return text
    return f"{style}{text}{RESET}"


def _join_styled(chars: Sequence[Tuple[str, str]], color: bool) -> str:
    """Group consecutive characters of the same style"""
    out: List[str] = []
    run: List[str] = []
    current = None
    for char, style in chars:
        if style != current and run:
            out.append(_style("".join(run), current, color))
            run = []
        current = style
        run.append(char)
    if run:
        out.append(_style("".join(run), current, color))
    return "".join(out)


def group_color(group_id: int) -> str:
    if group_id <= 0:
        return BOLD
    return GROUP_COLORS[(group_id - 1) % len(GROUP_COLORS)]


def render_diff(segments: Iterable[DiffSegment], color: bool = True) -> str:
    """Render a diff inline: removed struck through in red, added in green"""
    parts = []
    for segment in segments:
        if segment.kind is DiffKind.ADDED:
            parts.append(_style(segment.text, GREEN + BOLD, color) if color else f"{{+{segment.text}+}}")
        elif segment.kind is DiffKind.REMOVED:
            parts.append(_style(segment.text, RED + STRIKE, color) if color else f"[-{segment.text}-]")
        else:
            parts.append(segment.text)
    return "".join(parts)


def render_original(item: RenameItem, color: bool = True) -> str:
    """Original name with matched text highlighted"""
    if not color:
        return item.original_name
    chars = [(char, "") for char in item.original_name]
    for span in item.match_spans:
        for offset in range(span.start, span.end):
            chars[offset] = (chars[offset][0], YELLOW + BOLD)
    return _join_styled(chars, color)


def render_new(item: RenameItem, color: bool = True) -> str:
    """New name with inserted text in green and the sequence number in cyan"""
    if not color:
        return item.new_name

    styles = [""] * len(item.new_name)
    info = item.numbering_info

    if info is None and item.inserted_spans:
        for span in item.inserted_spans:
            style = GREEN + BOLD if span.is_literal else group_color(span.group_index)
            for offset in range(span.start, span.end):
                styles[offset] = style
    else:
        offset = 0
        for segment in compute_diff(item.original_name, item.new_name):
            if segment.kind is DiffKind.REMOVED:
                continue
            if segment.kind is DiffKind.ADDED:
                for i in range(offset, offset + len(segment.text)):
                    styles[i] = GREEN + BOLD
            offset += len(segment.text)

    if info is not None:
        sign = 1 if info.formatted_number.startswith("-") else 0
        padding_end = info.start + sign + info.padding_length
        for i in range(info.start, info.end):
            styles[i] = DIM + CYAN if info.start + sign <= i < padding_end else CYAN + BOLD

    return _join_styled(list(zip(item.new_name, styles)), color)
