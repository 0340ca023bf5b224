"""
rename_gui - Qt background workers for Bulk Rename Preview
"""

from .gui_workers import ListWorker, RenameWorker, PlanWorker

__all__ = ["ListWorker", "RenameWorker", "PlanWorker"]
