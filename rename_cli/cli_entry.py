"""
cli_entry.py - CLI Entry Point

Subcommands:
- list: List files beneath a directory
- preview: Show the rename plan with highlighting
- apply: Preview, confirm and rename
- diff: Show the character diff between two strings
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from rename_core import (
    ConfigLoadError, ListPhase, ListProgress, NumberingPosition,
    RenameConfiguration, RenamePhase, RenamePlan,
    RenameProgress, compute_diff, execute_rename, list_files_recursive,
    load_configuration, plan_rename, save_configuration,
)

from .cli_render import render_diff, render_new, render_original

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 20


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="rename-preview",
        description="Bulk rename with preview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview a literal replacement
  rename-preview preview ./photos --find "IMG" --replace "photo"

  # Regex with backreferences, numbered at the end
  rename-preview preview ./photos -x -f "(\\d{4})(\\d{2})" -r "$1-$2" --number --position end --padding 3 --separator _

  # Apply without confirmation
  rename-preview apply ./photos -f ".realcugan" -r "" -y

  # Show a character diff
  rename-preview diff report.txt summary_report.txt
"""
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # list subcommand
    list_parser = subparsers.add_parser("list", help="List files recursively")
    list_parser.add_argument("directory", type=str, help="Directory to list")

    # Shared rename options
    rename_options = argparse.ArgumentParser(add_help=False)
    rename_options.add_argument("paths", nargs="+", help="Files or directories (directories are listed recursively)")
    rename_options.add_argument("--config", type=str, help="Load a JSON preset")
    rename_options.add_argument("--save-config", type=str, help="Save the effective configuration to a JSON preset")
    rename_options.add_argument("--find", "-f", type=str, help="Text to find")
    rename_options.add_argument("--replace", "-r", type=str, help="Replacement text ($1, $&, ... in regex mode)")
    rename_options.add_argument("--case-sensitive", "-c", action="store_true", default=None, help="Case-sensitive")
    rename_options.add_argument("--regex", "-x", action="store_true", default=None, help="Treat find text as a regex")
    rename_options.add_argument("--first-only", action="store_true", default=None, help="Replace only the first match")
    rename_options.add_argument("--exclude-extension", action="store_true", default=None,
                                help="Leave the extension out of matching and numbering")
    rename_options.add_argument("--number", "-n", action="store_true", default=None, help="Enable numbering")
    rename_options.add_argument("--start", type=int, help="Starting number")
    rename_options.add_argument("--increment", type=int, help="Number increment")
    rename_options.add_argument("--padding", type=int, help="Zero-padding digits")
    rename_options.add_argument("--position", choices=[p.value for p in NumberingPosition], help="Number position")
    rename_options.add_argument("--index", type=int, help="Insert position for --position index")
    rename_options.add_argument("--separator", type=str, help="Separator between name and number")

    # preview subcommand
    subparsers.add_parser("preview", parents=[rename_options], help="Preview renames")

    # apply subcommand
    apply_parser = subparsers.add_parser("apply", parents=[rename_options], help="Apply renames")
    apply_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    # diff subcommand
    diff_parser = subparsers.add_parser("diff", help="Show character diff")
    diff_parser.add_argument("original", type=str, help="Original text")
    diff_parser.add_argument("modified", type=str, help="Modified text")

    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_configuration(args) -> RenameConfiguration:
    """Start from the preset (if any) and apply command-line overrides"""
    config = load_configuration(Path(args.config).expanduser()) if args.config else RenameConfiguration()

    overrides = {
        "find_text": args.find,
        "replace_text": args.replace,
        "case_sensitive": args.case_sensitive,
        "regex_mode": args.regex,
        "replace_first_only": args.first_only,
        "include_extension": False if args.exclude_extension else None,
    }
    config = config.with_changes(**{k: v for k, v in overrides.items() if v is not None})

    numbering_overrides = {
        "enabled": args.number,
        "start_at": args.start,
        "increment": args.increment,
        "padding": args.padding,
        "position": NumberingPosition(args.position) if args.position else None,
        "insert_index": args.index,
        "separator": args.separator,
    }
    numbering_overrides = {k: v for k, v in numbering_overrides.items() if v is not None}
    if numbering_overrides:
        numbering = replace(config.numbering, **numbering_overrides)
        config = config.with_changes(numbering=numbering)

    return config


def print_list_progress(event: ListProgress) -> None:
    if event.phase is ListPhase.SCANNING:
        print(f"  ... {event.files_found} files found ({event.current_dir})")


def collect_paths(arguments: List[str]) -> List[str]:
    """Expand directory arguments into their files"""
    paths: List[str] = []
    for argument in arguments:
        if Path(argument).is_dir():
            print(f"Listing directory: {argument}")
            paths.extend(list_files_recursive(argument, progress_callback=print_list_progress))
        else:
            paths.append(argument)
    return paths


def print_plan(plan: RenamePlan, color: bool) -> None:
    """Print the changed items of a plan"""
    changed = plan.changed_items
    print()
    print(f"{len(changed)} of {len(plan.items)} files will be renamed:")
    print("-" * 80)
    for item in changed[:PREVIEW_LIMIT]:
        note = "  (duplicate name)" if item.has_collision else ""
        original = render_original(item, color)
        padding = " " * max(0, 40 - len(item.original_name))
        print(f"  {original}{padding} -> {render_new(item, color)}{note}")
    if len(changed) > PREVIEW_LIMIT:
        print(f"  ... and {len(changed) - PREVIEW_LIMIT} more operations")
    print("-" * 80)
    if not plan.can_apply:
        print(f"Cannot apply: {plan.message}")


def cmd_list(args) -> int:
    """Handle list command"""
    try:
        files = list_files_recursive(args.directory, progress_callback=print_list_progress)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not files:
        print("No files found")
        return 0

    print(f"Found {len(files)} files:")
    for path in files:
        print(f"  {path}")
    return 0


def cmd_plan(args, apply: bool) -> int:
    """Handle preview and apply commands"""
    try:
        config = build_configuration(args)
    except ConfigLoadError as exc:
        print(f"Configuration error: {exc}")
        print(f"Fix or remove '{exc.path}' (it's JSON) and rerun.")
        return 2

    if args.save_config:
        saved = save_configuration(config, Path(args.save_config).expanduser())
        print(f"Configuration saved to {saved}")

    try:
        paths = collect_paths(args.paths)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not paths:
        print("No files found")
        return 0

    plan = plan_rename(paths, config)
    color = not args.no_color and sys.stdout.isatty()
    print_plan(plan, color)

    if not plan.can_apply:
        return 1

    if not apply:
        print("\n[Preview mode] Will not actually execute")
        return 0

    if not args.yes:
        confirm = input("\nConfirm execution? (y/N): ").strip().lower()
        if confirm != 'y':
            print("Cancelled")
            return 0

    def progress_callback(event: RenameProgress):
        if event.phase is RenamePhase.PROGRESS:
            logger.info("[%d/%d] %s", event.current, event.total, event.current_path)

    print("\nExecuting...")
    result = execute_rename(plan.rename_pairs(), progress_callback=progress_callback)
    print(result.summary())

    return 0 if result.failed_count == 0 else 1


def cmd_diff(args) -> int:
    """Handle diff command"""
    segments = compute_diff(args.original, args.modified)
    color = not args.no_color and sys.stdout.isatty()
    print(render_diff(segments, color))
    for segment in segments:
        print(f"  {segment.kind.value:<10} {segment.text!r}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Handle subcommands
    if args.command == "list":
        return cmd_list(args)
    elif args.command == "preview":
        return cmd_plan(args, apply=False)
    elif args.command == "apply":
        return cmd_plan(args, apply=True)
    elif args.command == "diff":
        return cmd_diff(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
