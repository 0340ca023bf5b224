"""
errors.py - Error Types

Contains:
- RenameToolError: Base exception
- PatternError: Find pattern does not compile
- ConfigLoadError: Configuration preset cannot be loaded
- BlockReason: Non-exception reasons a plan cannot be applied
- ApplyFailure: Per-pair failure reported by the rename service
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RenameToolError(Exception):
    """Base class for errors raised by the rename tool"""


class PatternError(RenameToolError, ValueError):
    """Raised when the find pattern fails to compile as a regex"""

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid regex {pattern!r}: {message}")


class ConfigLoadError(RenameToolError):
    """Raised when a configuration preset cannot be loaded"""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class BlockReason(Enum):
    """Reason a rename plan is refused, in priority order"""
    INVALID_PATTERN = "invalid_pattern"
    NO_CHANGES = "no_changes"
    COLLISION = "collision"


@dataclass(frozen=True)
class ApplyFailure:
    """A single pair the rename service could not rename"""
    old_path: str
    new_path: str
    message: str

    def __str__(self) -> str:
        return f"Failed to rename {self.old_path}: {self.message}"
