"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Derive each item's new name (find/replace, then numbering)
- Rebuild target paths and detect collisions across the whole list
- Decide whether the plan may be applied, with one reason when it may not
- Fold rename service outcomes back into the input list
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .diff_text import merge_runs
from .errors import BlockReason, PatternError
from .exec_rename import RenameResult
from .models_fs import (
    DiffKind, ItemStatus, RenameConfiguration, RenameItem, RenamePlan
)
from .numbering import apply_numbering, numbering_info
from .path_utils import file_name, replace_name
from .text_match import compile_pattern, find_matches, match_target
from .text_replace import replace_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledConfiguration:
    """A configuration with its find pattern compiled once"""
    config: RenameConfiguration
    pattern: Optional[re.Pattern] = None
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def compile_configuration(config: RenameConfiguration) -> CompiledConfiguration:
    """
    Compile the find pattern of a configuration

    An empty find text compiles to no pattern. An invalid regex is recorded
    as an error instead of raised.
    """
    if not config.find_text:
        return CompiledConfiguration(config)
    try:
        pattern = compile_pattern(config.find_text, config.case_sensitive, config.regex_mode)
    except PatternError as e:
        return CompiledConfiguration(config, error=e.message)
    return CompiledConfiguration(config, pattern=pattern)


def build_item(path: str, index: int, compiled: CompiledConfiguration) -> RenameItem:
    """
    Derive the rename result of one path

    Args:
        path: Original path
        index: Ordinal index in the list (numbering counter)
        compiled: Compiled configuration

    Returns:
        Rename item (collision flag not yet set)
    """
    config = compiled.config
    name = file_name(path)
    after_replace = name
    spans = ()
    segments = ()
    inserted = ()

    if compiled.pattern is not None:
        target, tail = match_target(name, config.include_extension)
        first_only = config.replace_first_only
        spans = tuple(find_matches(target, compiled.pattern, first_only))
        result = replace_text(target, compiled.pattern, config.replace_text, first_only)
        after_replace = result.new_text + tail
        steps = [(s.kind, s.text) for s in result.segments]
        steps.append((DiffKind.UNCHANGED, tail))
        segments = tuple(merge_runs(steps))
        inserted = result.inserted

    options = config.numbering
    new_name = apply_numbering(after_replace, index, options, config.include_extension)

    return RenameItem(
        original_path=path,
        original_name=name,
        new_name=new_name,
        new_path=replace_name(path, new_name),
        name_after_replace=after_replace,
        error=compiled.error,
        match_spans=spans,
        replacement_segments=segments,
        inserted_spans=inserted,
        numbering_info=numbering_info(after_replace, index, options, config.include_extension),
    )


def find_collisions(items: Sequence[RenameItem]) -> Dict[str, int]:
    """Count items per target path"""
    return dict(Counter(item.new_path for item in items))


def decide(
    items: Sequence[RenameItem],
    collisions: Dict[str, int],
    pattern_error: Optional[str]
) -> Optional[BlockReason]:
    """
    Pick the reason a plan is refused

    Checked in priority order: invalid pattern, no changes, collisions.

    Returns:
        The first applicable reason, or None if the plan can be applied
    """
    if pattern_error is not None:
        return BlockReason.INVALID_PATTERN
    if not any(item.is_changed for item in items):
        return BlockReason.NO_CHANGES
    if any(count > 1 for count in collisions.values()):
        return BlockReason.COLLISION
    return None


def finalize_plan(items: Sequence[RenameItem], pattern_error: Optional[str] = None) -> RenamePlan:
    """Flag collisions over the whole list and decide the plan"""
    collisions = find_collisions(items)
    flagged = tuple(
        replace(item, has_collision=collisions[item.new_path] > 1)
        for item in items
    )
    reason = decide(flagged, collisions, pattern_error)
    return RenamePlan(
        items=flagged,
        collisions=tuple(collisions.items()),
        can_apply=reason is None,
        reason=reason,
        pattern_error=pattern_error,
    )


def plan_rename(
    paths: Sequence[str],
    config: RenameConfiguration,
    compiled: Optional[CompiledConfiguration] = None
) -> RenamePlan:
    """
    Generate a rename plan

    Args:
        paths: Original paths, in list order
        config: Rename configuration
        compiled: Pre-compiled configuration (compiled here when omitted)

    Returns:
        Rename plan
    """
    if compiled is None or compiled.config != config:
        compiled = compile_configuration(config)

    items = [build_item(path, index, compiled) for index, path in enumerate(paths)]
    plan = finalize_plan(items, compiled.error)
    logger.debug(
        "Planned %d item(s): %d changed, can_apply=%s",
        len(plan.items), len(plan.changed_items), plan.can_apply,
    )
    return plan


def apply_results(
    paths: Sequence[str],
    result: RenameResult
) -> Tuple[List[str], Dict[str, ItemStatus]]:
    """
    Fold rename service outcomes back into the input list

    Renamed items move to their new path and are marked SUCCESS; failed items
    keep their old path and are marked ERROR. Nothing is rolled back.

    Args:
        paths: Input list the plan was built from
        result: Outcome reported by the rename service

    Returns:
        (updated paths, status per path)
    """
    renamed = {o.old_path: o.new_path for o in result.outcomes if o.success}
    failed = {o.old_path for o in result.outcomes if not o.success}

    updated: List[str] = []
    statuses: Dict[str, ItemStatus] = {}
    for path in paths:
        if path in renamed:
            new_path = renamed[path]
            updated.append(new_path)
            statuses[new_path] = ItemStatus.SUCCESS
        else:
            updated.append(path)
            if path in failed:
                statuses[path] = ItemStatus.ERROR
    return updated, statuses


class RenamePreview:
    """
    Recomputes the plan whenever the paths or the configuration change

    Keeps the compiled pattern cached per configuration, the last valid items
    for when the pattern becomes invalid, and the apply status of each path
    (cleared by any configuration change).
    """

    def __init__(self):
        self._compiled: Optional[CompiledConfiguration] = None
        self._last_valid: Dict[str, RenameItem] = {}
        self.plan = RenamePlan()
        self.statuses: Dict[str, ItemStatus] = {}

    def recompute(self, paths: Sequence[str], config: RenameConfiguration) -> RenamePlan:
        """Rebuild the plan for the current paths and configuration"""
        if self._compiled is None or self._compiled.config != config:
            self._compiled = compile_configuration(config)
            self.statuses = {}

        plan = plan_rename(paths, config, self._compiled)
        if plan.pattern_error is None:
            self._last_valid = {item.original_path: item for item in plan.items}
        else:
            plan = self._keep_last_valid(plan)

        self.plan = plan
        return plan

    def _keep_last_valid(self, plan: RenamePlan) -> RenamePlan:
        """Carry over the last valid new names, annotated with the pattern error"""
        items = []
        for item in plan.items:
            previous = self._last_valid.get(item.original_path)
            if previous is not None:
                item = replace(previous, error=plan.pattern_error)
            items.append(item)
        return finalize_plan(items, plan.pattern_error)

    def status(self, path: str) -> ItemStatus:
        return self.statuses.get(path, ItemStatus.IDLE)

    def record_results(self, paths: Sequence[str], result: RenameResult) -> List[str]:
        """Apply service outcomes; returns the updated path list"""
        updated, statuses = apply_results(paths, result)
        self.statuses = statuses
        return updated
