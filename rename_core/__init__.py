"""
rename_core - Bulk Rename Preview Core Module

Provides the pure rename transformation (find/replace, numbering, collision
detection), the character diff used for highlighting, and the filesystem
rename/listing services the presentation layer calls.
"""

from .errors import (
    RenameToolError,
    PatternError,
    ConfigLoadError,
    BlockReason,
    ApplyFailure,
)

from .models_fs import (
    DiffKind,
    DiffSegment,
    MatchSpan,
    RegexSegment,
    ReplacementSpan,
    NumberingPosition,
    NumberingOptions,
    NumberingInfo,
    RenameConfiguration,
    RenameItem,
    RenamePlan,
    ItemStatus,
    ListPhase,
    ListProgress,
    RenamePhase,
    RenameProgress,
)

from .path_utils import (
    file_name,
    directory,
    separator,
    join,
    replace_name,
)

from .diff_text import (
    compute_diff,
    original_text,
    modified_text,
    MAX_EXACT_DIFF_LENGTH,
)

from .text_match import (
    compile_pattern,
    find_matches,
    split_extension,
    regex_highlights,
    has_capture_groups,
)

from .text_replace import (
    replace_text,
    parse_template,
    ReplacementResult,
)

from .numbering import (
    apply_numbering,
    numbering_info,
    format_number,
    sequence_value,
)

from .plan_rename import (
    plan_rename,
    compile_configuration,
    apply_results,
    CompiledConfiguration,
    RenamePreview,
)

from .exec_rename import (
    execute_rename,
    check_pairs,
    RenameOutcome,
    RenameResult,
)

from .scan_files import (
    list_files_recursive,
)

from .config_manager import (
    load_configuration,
    save_configuration,
)

__all__ = [
    # Errors
    "RenameToolError",
    "PatternError",
    "ConfigLoadError",
    "BlockReason",
    "ApplyFailure",

    # Data models
    "DiffKind",
    "DiffSegment",
    "MatchSpan",
    "RegexSegment",
    "ReplacementSpan",
    "NumberingPosition",
    "NumberingOptions",
    "NumberingInfo",
    "RenameConfiguration",
    "RenameItem",
    "RenamePlan",
    "ItemStatus",
    "ListPhase",
    "ListProgress",
    "RenamePhase",
    "RenameProgress",

    # Paths
    "file_name",
    "directory",
    "separator",
    "join",
    "replace_name",

    # Diff
    "compute_diff",
    "original_text",
    "modified_text",
    "MAX_EXACT_DIFF_LENGTH",

    # Matching and replacement
    "compile_pattern",
    "find_matches",
    "split_extension",
    "regex_highlights",
    "has_capture_groups",
    "replace_text",
    "parse_template",
    "ReplacementResult",

    # Numbering
    "apply_numbering",
    "numbering_info",
    "format_number",
    "sequence_value",

    # Planning
    "plan_rename",
    "compile_configuration",
    "apply_results",
    "CompiledConfiguration",
    "RenamePreview",

    # Services
    "execute_rename",
    "check_pairs",
    "RenameOutcome",
    "RenameResult",
    "list_files_recursive",

    # Configuration
    "load_configuration",
    "save_configuration",
]
