#!/usr/bin/env python3
"""
Bulk Rename Preview - Main Entry

Usage:
    python main.py list ./dir
    python main.py preview ./dir --find IMG --replace photo
    python main.py apply ./dir -x -f "(\\d+)" -r "n$1" --number
    python main.py diff old.txt new.txt
"""

import sys

from rename_cli import main


if __name__ == "__main__":
    sys.exit(main())
