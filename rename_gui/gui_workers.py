"""
gui_workers.py - GUI Worker Threads

Runs the listing and rename services, and plan recomputation for large
lists, off the UI thread. Service progress events are forwarded as signals.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from PySide6.QtCore import QThread, Signal, QObject

from rename_core import (
    ListPhase, ListProgress, RenameConfiguration,
    execute_rename, list_files_recursive, plan_rename,
)

logger = logging.getLogger(__name__)


class ListWorker(QThread):
    """Directory listing worker thread"""

    # Signals
    progress = Signal(object)       # ListProgress
    finished = Signal(list)         # Complete, returns file paths
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Union[str, Path],
        progress_interval: int = 50,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.progress_interval = progress_interval
        self._cancelled = False

    def cancel(self):
        """Cancel listing"""
        self._cancelled = True

    def run(self):
        try:
            def progress_callback(event: ListProgress):
                if self._cancelled:
                    raise InterruptedError("Listing cancelled")
                self.progress.emit(event)

            files = list_files_recursive(
                self.directory,
                progress_callback=progress_callback,
                progress_interval=self.progress_interval,
            )

            if not self._cancelled:
                self.finished.emit(files)
        except InterruptedError:
            logger.info("Listing of %s cancelled", self.directory)
            self.progress.emit(ListProgress(ListPhase.CANCELLED))
            self.finished.emit([])
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(object)       # RenameProgress
    finished = Signal(object)       # RenameResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        pairs: Sequence[Tuple[str, str]],
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.pairs = list(pairs)
        self._cancelled = False

    def cancel(self):
        """Stop after the pair being renamed; finished pairs stay renamed"""
        self._cancelled = True

    def run(self):
        try:
            result = execute_rename(
                self.pairs,
                progress_callback=self.progress.emit,
                should_cancel=lambda: self._cancelled,
            )
            if result.cancelled:
                logger.info("Rename cancelled after %d pair(s)", len(result.outcomes))
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    finished = Signal(object)       # RenamePlan
    error = Signal(str)             # Error message

    def __init__(
        self,
        paths: List[str],
        config: RenameConfiguration,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.paths = list(paths)
        self.config = config

    def run(self):
        try:
            self.finished.emit(plan_rename(self.paths, self.config))
        except Exception as e:
            self.error.emit(str(e))
