"""
scan_files.py - File Listing Module

Recursively lists the files beneath a directory, streaming progress
"""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from .models_fs import ListPhase, ListProgress

logger = logging.getLogger(__name__)

ListCallback = Callable[[ListProgress], None]


def list_files_recursive(
    directory: Union[str, Path],
    progress_callback: Optional[ListCallback] = None,
    progress_interval: int = 50
) -> List[str]:
    """
    Recursively list files (directories themselves are not included)

    Args:
        directory: Root directory
        progress_callback: Receives ListProgress events
        progress_interval: Send a scanning event every this many files,
            only when the current directory changed since the last one

    Returns:
        File paths, in sorted walk order

    Raises:
        ValueError: If the path does not exist or is not a directory
    """
    root = Path(directory)
    if not root.exists():
        raise ValueError(f"Path does not exist: {directory}")
    if not root.is_dir():
        raise ValueError(f"Path is not a directory: {directory}")

    def emit(event: ListProgress):
        if progress_callback:
            progress_callback(event)

    emit(ListProgress(ListPhase.STARTED, base_path=str(directory)))

    files: List[str] = []
    last_progress_dir = ""

    for dirpath, dirnames, filenames in os.walk(root):
        # Sorting dirnames in place fixes the order os.walk descends in
        dirnames.sort()
        for filename in sorted(filenames):
            filepath = os.path.join(dirpath, filename)
            if not os.path.isfile(filepath):
                continue
            files.append(filepath)

            if progress_interval > 0 and len(files) % progress_interval == 0:
                if dirpath != last_progress_dir:
                    last_progress_dir = dirpath
                    emit(ListProgress(
                        ListPhase.SCANNING,
                        current_dir=dirpath,
                        files_found=len(files),
                    ))

    emit(ListProgress(ListPhase.COMPLETED, total_files=len(files)))
    logger.info("Found %d file(s) under %s", len(files), directory)
    return files
