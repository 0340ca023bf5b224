"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Rename (old_path, new_path) pairs on disk in two phases, so chains and
  swaps (a -> b, b -> c) never overwrite a file still waiting to move
- Refuse targets that already exist outside the batch
- Report success or failure per pair, never aborting the batch
- Stream progress events to an optional callback and stop on request

Failed pairs are reported, not retried. Files moved aside for a failed or
cancelled pair go back to their old path when it is still free.
"""

import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import ApplyFailure
from .models_fs import RenamePhase, RenameProgress

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[RenameProgress], None]
CancelCheck = Callable[[], bool]

TEMP_PREFIX = ".__tmp_rename__"


@dataclass(frozen=True)
class RenameOutcome:
    """Outcome of a single pair"""
    old_path: str
    new_path: str
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RenameResult:
    """Rename execution result"""
    outcomes: List[RenameOutcome] = field(default_factory=list)
    cancelled: bool = False         # Pairs without an outcome were left at their old path

    @property
    def renamed(self) -> List[str]:
        """New paths of successfully renamed pairs"""
        return [o.new_path for o in self.outcomes if o.success]

    @property
    def failures(self) -> List[ApplyFailure]:
        return [
            ApplyFailure(o.old_path, o.new_path, o.error)
            for o in self.outcomes if not o.success
        ]

    @property
    def success_count(self) -> int:
        return len(self.renamed)

    @property
    def failed_count(self) -> int:
        return len(self.outcomes) - self.success_count

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.cancelled:
            lines.append("  - Cancelled before all files were renamed")
        failures = self.failures
        if failures:
            lines.append("Failure Details:")
            for failure in failures[:10]:  # Show at most 10
                lines.append(f"  - {failure}")
            if len(failures) > 10:
                lines.append(f"  ... and {len(failures) - 10} more failures")
        return "\n".join(lines)


def _temp_path(path: str) -> str:
    """Hidden temporary name next to the original"""
    head, name = os.path.split(path)
    return os.path.join(head, f"{TEMP_PREFIX}{uuid.uuid4().hex[:8]}__{name}")


def _same_file(old_path: str, new_path: str) -> bool:
    """Whether both paths name one file (case-only renames on case-insensitive filesystems)"""
    try:
        return os.path.samefile(old_path, new_path)
    except OSError:
        return False


def check_pairs(pairs: Sequence[Tuple[str, str]]) -> Dict[int, str]:
    """
    Find pairs that cannot be renamed safely

    A target may only exist on disk when it is itself a source in the batch
    (it moves away first), and no two pairs may share a target.

    Returns:
        Error message per pair index
    """
    sources = {old for old, _ in pairs}
    claimed = set()
    errors: Dict[int, str] = {}

    for index, (old_path, new_path) in enumerate(pairs):
        if not os.path.lexists(old_path):
            errors[index] = "Source file does not exist"
        elif new_path in claimed:
            errors[index] = "Another file in the batch has the same target"
        elif (os.path.lexists(new_path) and new_path not in sources
              and not _same_file(old_path, new_path)):
            errors[index] = "Target already exists"
        claimed.add(new_path)

    return errors


def _move_back(old_path: str, temp_path: str) -> Optional[str]:
    """
    Put a file back at its old path after phase 1

    Returns:
        Error message, or None on success
    """
    if os.path.lexists(old_path):
        return f"Left at temporary path {temp_path}: {old_path} is taken"
    try:
        os.rename(temp_path, old_path)
        return None
    except OSError as e:
        logger.error("Left %s at temporary path %s: %s", old_path, temp_path, e)
        return f"Left at temporary path {temp_path}: {e}"


def execute_rename(
    pairs: Sequence[Tuple[str, str]],
    progress_callback: Optional[ProgressCallback] = None,
    should_cancel: Optional[CancelCheck] = None
) -> RenameResult:
    """
    Rename each pair on disk (two-phase)

    Phase 1 moves every source to a temporary name, phase 2 moves the
    temporary names to their targets. Cancellation is checked before each
    pair of phase 2; pending files go back to their old paths.

    Args:
        pairs: (old_path, new_path) pairs, in order
        progress_callback: Receives RenameProgress events
        should_cancel: Polled between pairs; True stops the batch

    Returns:
        Per-pair outcomes (only for pairs that were processed)
    """
    pairs = list(pairs)
    result = RenameResult()
    total = len(pairs)

    def emit(event: RenameProgress):
        if progress_callback:
            progress_callback(event)

    def cancelled() -> bool:
        return bool(should_cancel and should_cancel())

    emit(RenameProgress(RenamePhase.STARTED, total=total))

    if cancelled():
        result.cancelled = True
        emit(RenameProgress(RenamePhase.CANCELLED, total=total))
        return result

    errors = check_pairs(pairs)

    # Phase 1: Move sources out of the way
    temp_paths: Dict[int, str] = {}
    for index, (old_path, new_path) in enumerate(pairs):
        if index in errors:
            continue
        temp_path = _temp_path(old_path)
        try:
            os.rename(old_path, temp_path)
            temp_paths[index] = temp_path
        except OSError as e:
            errors[index] = f"Phase 1 failed: {e}"

    # Phase 2: Move temporary names to targets, in input order
    for index, (old_path, new_path) in enumerate(pairs):
        if cancelled():
            result.cancelled = True
            _restore_pending(pairs, temp_paths, index, result)
            break

        if index in temp_paths:
            temp_path = temp_paths.pop(index)
            try:
                os.rename(temp_path, new_path)
                result.outcomes.append(RenameOutcome(old_path, new_path))
            except OSError as e:
                problem = _move_back(old_path, temp_path)
                errors[index] = f"Phase 2 failed: {e}" + (f"; {problem}" if problem else " (restored)")

        if index in errors:
            logger.error("Failed to rename %s -> %s: %s", old_path, new_path, errors[index])
            result.outcomes.append(RenameOutcome(old_path, new_path, errors[index]))

        emit(RenameProgress(
            RenamePhase.PROGRESS,
            current=index + 1,
            total=total,
            current_path=new_path,
        ))

    final = RenamePhase.CANCELLED if result.cancelled else RenamePhase.COMPLETED
    emit(RenameProgress(
        final,
        total=total,
        successful=result.success_count,
        failed=result.failed_count,
    ))
    logger.info("Renamed %d of %d file(s)", result.success_count, total)
    return result


def _restore_pending(
    pairs: Sequence[Tuple[str, str]],
    temp_paths: Dict[int, str],
    start: int,
    result: RenameResult
) -> None:
    """
    Undo phase 1 for pairs not yet processed

    A pair whose old path was taken by an earlier pair of a chain cannot go
    back, so its rename is completed and recorded instead.
    """
    for index in sorted(i for i in temp_paths if i >= start):
        old_path, new_path = pairs[index]
        temp_path = temp_paths.pop(index)
        if not os.path.lexists(old_path):
            problem = _move_back(old_path, temp_path)
            if problem:
                result.outcomes.append(RenameOutcome(old_path, new_path, problem))
            continue
        if os.path.lexists(new_path):
            message = f"Left at temporary path {temp_path}: {old_path} and {new_path} are taken"
            logger.error(message)
            result.outcomes.append(RenameOutcome(old_path, new_path, message))
            continue
        try:
            os.rename(temp_path, new_path)
            result.outcomes.append(RenameOutcome(old_path, new_path))
        except OSError as e:
            logger.error("Left %s at temporary path %s: %s", old_path, temp_path, e)
            result.outcomes.append(RenameOutcome(old_path, new_path, f"Left at temporary path {temp_path}: {e}"))
