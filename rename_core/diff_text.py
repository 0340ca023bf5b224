"""
diff_text.py - Character Diff

Computes a character-level diff between two strings for highlighting.

Short inputs use an exact longest-common-subsequence table. Long inputs fall
back to a common prefix/suffix split, which keeps the cost linear.
"""

from typing import Iterable, List, Tuple

from .models_fs import DiffKind, DiffSegment

# Combined length above which the LCS table is not built
MAX_EXACT_DIFF_LENGTH = 500


def compute_diff(original: str, modified: str) -> List[DiffSegment]:
    """
    Compute a character diff

    Args:
        original: Original string
        modified: Modified string

    Returns:
        Ordered segments; unchanged+removed rebuild original,
        unchanged+added rebuild modified
    """
    if original == modified:
        return [DiffSegment(DiffKind.UNCHANGED, original)]

    if len(original) + len(modified) > MAX_EXACT_DIFF_LENGTH:
        return _prefix_suffix_diff(original, modified)

    return _lcs_diff(original, modified)


def _prefix_suffix_diff(original: str, modified: str) -> List[DiffSegment]:
    """Bounded fallback: unchanged prefix, removed/added middle, unchanged suffix"""
    limit = min(len(original), len(modified))

    prefix = 0
    while prefix < limit and original[prefix] == modified[prefix]:
        prefix += 1

    # Suffix may not overlap the prefix on either side
    suffix = 0
    while (suffix < limit - prefix
           and original[len(original) - 1 - suffix] == modified[len(modified) - 1 - suffix]):
        suffix += 1

    runs = [
        (DiffKind.UNCHANGED, original[:prefix]),
        (DiffKind.REMOVED, original[prefix:len(original) - suffix]),
        (DiffKind.ADDED, modified[prefix:len(modified) - suffix]),
        (DiffKind.UNCHANGED, original[len(original) - suffix:]),
    ]
    return [DiffSegment(kind, text) for kind, text in runs if text]


def _lcs_diff(original: str, modified: str) -> List[DiffSegment]:
    """Exact diff from a full LCS table, insert-biased on ties"""
    m = len(original)
    n = len(modified)

    lcs = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row = lcs[i]
        prev = lcs[i - 1]
        char = original[i - 1]
        for j in range(1, n + 1):
            if char == modified[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    # Backtrack from the bottom-right cell, collecting one step per character
    steps: List[Tuple[DiffKind, str]] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and original[i - 1] == modified[j - 1]:
            steps.append((DiffKind.UNCHANGED, original[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or lcs[i][j - 1] >= lcs[i - 1][j]):
            steps.append((DiffKind.ADDED, modified[j - 1]))
            j -= 1
        else:
            steps.append((DiffKind.REMOVED, original[i - 1]))
            i -= 1

    steps.reverse()
    return merge_runs(steps)


def merge_runs(steps: Iterable[Tuple[DiffKind, str]]) -> List[DiffSegment]:
    """
    Merge consecutive steps of the same kind into maximal segments

    Empty texts are dropped.
    """
    segments: List[DiffSegment] = []
    kind = None
    buffer: List[str] = []
    for step_kind, text in steps:
        if not text:
            continue
        if step_kind is not kind and buffer:
            segments.append(DiffSegment(kind, "".join(buffer)))
            buffer = []
        kind = step_kind
        buffer.append(text)
    if buffer:
        segments.append(DiffSegment(kind, "".join(buffer)))
    return segments


def original_text(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the original string from unchanged and removed segments"""
    return "".join(s.text for s in segments if s.kind is not DiffKind.ADDED)


def modified_text(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the modified string from unchanged and added segments"""
    return "".join(s.text for s in segments if s.kind is not DiffKind.REMOVED)
