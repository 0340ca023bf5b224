"""
text_replace.py - Template Replacement

Applies a compiled pattern with a replacement template and records which
parts of the result were copied and which were inserted.

Template syntax:
    $1 .. $99   capture group (two digits preferred when that group exists)
    $&          whole match
    $`          text before the match
    $'          text after the match
    $$          literal dollar sign
    $<name>     named group (only when the pattern defines named groups)

A reference to a group the pattern does not have stays literal text, and an
optional group that did not participate inserts nothing.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from .diff_text import merge_runs
from .models_fs import DiffKind, DiffSegment, ReplacementSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateToken:
    """One parsed piece of a replacement template"""
    kind: str                       # "literal", "group", "before", "after"
    text: str = ""
    group: int = 0


@dataclass(frozen=True)
class ReplacementResult:
    """Outcome of a replacement"""
    new_text: str
    segments: Tuple[DiffSegment, ...] = ()
    inserted: Tuple[ReplacementSpan, ...] = ()
    match_count: int = 0


def parse_template(template: str, pattern: re.Pattern) -> List[TemplateToken]:
    """
    Tokenize a replacement template for the given pattern

    Runs of plain characters become a single literal token; "$$" and
    unresolvable group references are literal tokens of their own.
    """
    tokens: List[TemplateToken] = []
    plain: List[str] = []
    group_count = pattern.groups
    named = pattern.groupindex

    def flush():
        if plain:
            tokens.append(TemplateToken("literal", "".join(plain)))
            plain.clear()

    i = 0
    length = len(template)
    while i < length:
        char = template[i]
        nxt = template[i + 1] if i + 1 < length else ""

        if char != "$" or not nxt:
            plain.append(char)
            i += 1
            continue

        if nxt == "$":
            flush()
            tokens.append(TemplateToken("literal", "$"))
            i += 2
        elif nxt == "&":
            flush()
            tokens.append(TemplateToken("group", group=0))
            i += 2
        elif nxt == "`":
            flush()
            tokens.append(TemplateToken("before"))
            i += 2
        elif nxt == "'":
            flush()
            tokens.append(TemplateToken("after"))
            i += 2
        elif nxt.isdigit():
            flush()
            two = template[i + 1:i + 3]
            if len(two) == 2 and two.isdigit() and 1 <= int(two) <= group_count:
                tokens.append(TemplateToken("group", group=int(two)))
                i += 3
            elif 1 <= int(nxt) <= group_count:
                tokens.append(TemplateToken("group", group=int(nxt)))
                i += 2
            else:
                tokens.append(TemplateToken("literal", "$" + nxt))
                i += 2
        elif nxt == "<" and named:
            close = template.find(">", i + 2)
            if close < 0:
                plain.append("$<")
                i += 2
                continue
            flush()
            name = template[i + 2:close]
            if name in named:
                tokens.append(TemplateToken("group", group=named[name]))
            i = close + 1
        else:
            plain.append(char)
            i += 1

    flush()
    return tokens


def replace_text(
    text: str,
    pattern: re.Pattern,
    template: str,
    first_only: bool = False
) -> ReplacementResult:
    """
    Replace matches of pattern in text

    Args:
        text: Original text
        pattern: Compiled pattern
        template: Replacement template
        first_only: Only replace the leftmost match

    Returns:
        New text, diff segments (unchanged/removed/added) and the spans of
        inserted text inside the new text
    """
    tokens = parse_template(template, pattern)

    output: List[str] = []
    position = 0                    # Length of output so far
    steps: List[Tuple[DiffKind, str]] = []
    inserted: List[ReplacementSpan] = []
    last = 0
    count = 0

    for match in pattern.finditer(text):
        start, end = match.span()
        unchanged = text[last:start]
        output.append(unchanged)
        position += len(unchanged)
        steps.append((DiffKind.UNCHANGED, unchanged))
        steps.append((DiffKind.REMOVED, match.group()))

        pieces: List[str] = []
        for token in tokens:
            if token.kind == "literal":
                value = token.text
                group_index = -1
            elif token.kind == "group":
                value = match.group(token.group) or ""
                group_index = token.group
            elif token.kind == "before":
                value = text[:start]
                group_index = None
            else:
                value = text[end:]
                group_index = None

            if not value:
                continue
            if group_index is not None:
                inserted.append(ReplacementSpan(position, position + len(value), value, group_index))
            pieces.append(value)
            position += len(value)

        substituted = "".join(pieces)
        output.append(substituted)
        steps.append((DiffKind.ADDED, substituted))

        last = end
        count += 1
        if first_only:
            break

    tail = text[last:]
    output.append(tail)
    steps.append((DiffKind.UNCHANGED, tail))

    new_text = "".join(output)
    logger.debug("Replaced %d match(es): %r -> %r", count, text, new_text)
    return ReplacementResult(
        new_text=new_text,
        segments=tuple(merge_runs(steps)),
        inserted=tuple(inserted),
        match_count=count,
    )
