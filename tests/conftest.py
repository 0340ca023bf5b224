"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from rename_core import NumberingOptions, NumberingPosition, RenameConfiguration


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_files(temp_dir: Path) -> Path:
    """Create report files for rename testing."""
    (temp_dir / "report.txt").write_text("a")
    (temp_dir / "report_old.txt").write_text("b")
    (temp_dir / "notes.md").write_text("c")
    return temp_dir


@pytest.fixture
def sample_tree(temp_dir: Path) -> Path:
    """Create a nested directory tree for listing."""
    (temp_dir / "a.txt").touch()
    (temp_dir / "b.txt").touch()
    (temp_dir / "sub" / "deeper").mkdir(parents=True)
    (temp_dir / "sub" / "c.txt").touch()
    (temp_dir / "sub" / "deeper" / "d.txt").touch()
    (temp_dir / "empty").mkdir()
    return temp_dir


@pytest.fixture
def numbered_config() -> RenameConfiguration:
    """Configuration with padded suffix numbering before the extension."""
    return RenameConfiguration(
        include_extension=False,
        numbering=NumberingOptions(
            enabled=True,
            padding=2,
            position=NumberingPosition.END,
            separator="_",
        ),
    )
