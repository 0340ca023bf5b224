"""
path_utils.py - Path String Helpers

Splits and joins path strings using either separator style. The style is
inferred per string and kept as-is; nothing is normalized.
"""

import re

_SEPARATORS = re.compile(r"[/\\]")


def separator(path: str) -> str:
    """Backslash if the path contains one, otherwise forward slash"""
    return "\\" if "\\" in path else "/"


def has_separator(path: str) -> bool:
    """Whether the path contains any separator"""
    return "/" in path or "\\" in path


def file_name(path: str) -> str:
    """
    Get the last path component

    Args:
        path: Full path

    Returns:
        File name (empty for an empty path or one ending in a separator)
    """
    return _SEPARATORS.split(path)[-1]


def directory(path: str) -> str:
    """
    Get everything before the last separator

    Args:
        path: Full path

    Returns:
        Directory part without trailing separator (empty if there is none)
    """
    index = path.rfind(separator(path))
    if index < 0:
        return ""
    return path[:index]


def join(directory_path: str, name: str) -> str:
    """Join directory and name with the directory's own separator"""
    return f"{directory_path}{separator(directory_path)}{name}"


def replace_name(path: str, new_name: str) -> str:
    """
    Rebuild a path with a different file name

    The separator is taken from the full path, so "C:\\a.txt" keeps its
    backslash even though its directory part "C:" has none. A path without
    any separator is a bare name and stays one.
    """
    if not has_separator(path):
        return new_name
    return f"{directory(path)}{separator(path)}{new_name}"
