"""
rename_cli - Command Line Interface for Bulk Rename Preview
"""

from .cli_entry import main

__all__ = ["main"]
