"""
models_fs.py - Core Data Structure Definitions

Contains:
- DiffSegment / DiffKind: Character diff output
- MatchSpan / RegexSegment / ReplacementSpan: Highlight spans
- NumberingOptions / NumberingInfo: Sequential numbering configuration and placement
- RenameConfiguration: Find/replace configuration
- RenameItem / RenamePlan: Derived per-item results and set-level decision
- ListProgress / RenameProgress: Progress events streamed by the services
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import BlockReason


class DiffKind(Enum):
    """Kind of a diff segment"""
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class DiffSegment:
    """A run of characters sharing one diff kind"""
    kind: DiffKind
    text: str


@dataclass(frozen=True)
class MatchSpan:
    """Half-open [start, end) range of one match"""
    start: int
    end: int
    text: str = ""

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class RegexSegment:
    """Plain text (group_id None) or a highlighted match/capture group"""
    text: str
    group_id: Optional[int] = None

    @property
    def is_group(self) -> bool:
        return self.group_id is not None


@dataclass(frozen=True)
class ReplacementSpan:
    """Inserted text inside the new name"""
    start: int
    end: int
    text: str
    group_index: int = -1           # -1 literal, 0 whole match, n capture group

    @property
    def is_literal(self) -> bool:
        return self.group_index < 0


class NumberingPosition(Enum):
    """Where the sequence number goes"""
    START = "start"
    END = "end"
    INDEX = "index"


@dataclass(frozen=True)
class NumberingOptions:
    """Sequential numbering configuration"""
    enabled: bool = False
    start_at: int = 1
    increment: int = 1
    padding: int = 0                # Minimum digits (0 means no padding)
    position: NumberingPosition = NumberingPosition.START
    insert_index: int = 0           # Only used with NumberingPosition.INDEX
    separator: str = ""


@dataclass(frozen=True)
class NumberingInfo:
    """Where the formatted number lives inside a numbered name"""
    formatted_number: str
    separator: str
    position: NumberingPosition
    insert_index: int
    start: int
    end: int

    @property
    def padding_length(self) -> int:
        """Number of leading padding zeros (the last digit is never padding)"""
        digits = self.formatted_number.lstrip("-")
        count = 0
        for char in digits[:-1]:
            if char != "0":
                break
            count += 1
        return count


@dataclass(frozen=True)
class RenameConfiguration:
    """Find/replace and numbering configuration"""
    find_text: str = ""
    replace_text: str = ""
    case_sensitive: bool = False
    regex_mode: bool = False
    replace_first_only: bool = False
    include_extension: bool = True
    numbering: NumberingOptions = field(default_factory=NumberingOptions)

    def with_changes(self, **changes) -> "RenameConfiguration":
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)


class ItemStatus(Enum):
    """Apply status of a single path"""
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class RenameItem:
    """Derived rename result for one input path"""
    original_path: str
    original_name: str
    new_name: str
    new_path: str
    name_after_replace: str = ""    # Name after find/replace, before numbering
    error: Optional[str] = None
    match_spans: Tuple[MatchSpan, ...] = ()
    replacement_segments: Tuple[DiffSegment, ...] = ()
    inserted_spans: Tuple[ReplacementSpan, ...] = ()
    numbering_info: Optional[NumberingInfo] = None
    has_collision: bool = False

    @property
    def is_changed(self) -> bool:
        """Whether the new name differs from the original"""
        return self.new_name != self.original_name


REASON_MESSAGES = {
    BlockReason.INVALID_PATTERN: "Invalid regex: {detail}",
    BlockReason.NO_CHANGES: "No changes to apply",
    BlockReason.COLLISION: "{detail} files would have duplicate names",
}


@dataclass(frozen=True)
class RenamePlan:
    """Derived state for the whole list"""
    items: Tuple[RenameItem, ...] = ()
    collisions: Tuple[Tuple[str, int], ...] = ()     # (target path, item count) per target
    can_apply: bool = False
    reason: Optional[BlockReason] = None
    pattern_error: Optional[str] = None

    @property
    def changed_items(self) -> List[RenameItem]:
        return [item for item in self.items if item.is_changed]

    @property
    def collision_counts(self) -> Dict[str, int]:
        """Item count per target path"""
        return dict(self.collisions)

    @property
    def collision_count(self) -> int:
        """Number of items whose target path is shared with another item"""
        return sum(1 for item in self.items if item.has_collision)

    @property
    def message(self) -> str:
        """Human-readable refusal reason (empty when the plan can be applied)"""
        if self.reason is None:
            return ""
        if self.reason is BlockReason.INVALID_PATTERN:
            detail = self.pattern_error or ""
        elif self.reason is BlockReason.COLLISION:
            detail = str(self.collision_count)
        else:
            detail = ""
        return REASON_MESSAGES[self.reason].format(detail=detail)

    def rename_pairs(self) -> List[Tuple[str, str]]:
        """(old_path, new_path) pairs for items whose name changed"""
        return [(item.original_path, item.new_path) for item in self.changed_items]

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Rename Plan Summary:",
            f"  - Files: {len(self.items)}",
            f"  - Changed: {len(self.changed_items)}",
            f"  - Collisions: {self.collision_count}",
        ]
        if not self.can_apply:
            lines.append(f"  - Blocked: {self.message}")
        return "\n".join(lines)


class ListPhase(Enum):
    """Phases of a directory listing"""
    STARTED = "started"
    SCANNING = "scanning"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RenamePhase(Enum):
    """Phases of a batch rename"""
    STARTED = "started"
    PROGRESS = "progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ListProgress:
    """Progress event of the listing service"""
    phase: ListPhase
    base_path: str = ""
    current_dir: Optional[str] = None
    files_found: int = 0
    total_files: int = 0

    def to_dict(self) -> dict:
        data = {"type": self.phase.value}
        if self.phase is ListPhase.STARTED:
            data["basePath"] = self.base_path
        elif self.phase is ListPhase.SCANNING:
            data["currentDir"] = self.current_dir
            data["filesFound"] = self.files_found
        elif self.phase is ListPhase.COMPLETED:
            data["totalFiles"] = self.total_files
        return data


@dataclass(frozen=True)
class RenameProgress:
    """Progress event of the rename service"""
    phase: RenamePhase
    current: int = 0
    total: int = 0
    current_path: Optional[str] = None
    successful: int = 0
    failed: int = 0

    def to_dict(self) -> dict:
        data = {"type": self.phase.value}
        if self.phase is RenamePhase.STARTED:
            data["totalFiles"] = self.total
        elif self.phase is RenamePhase.PROGRESS:
            data["current"] = self.current
            data["total"] = self.total
            data["currentPath"] = self.current_path
        elif self.phase is RenamePhase.COMPLETED:
            data["successful"] = self.successful
            data["failed"] = self.failed
        return data
