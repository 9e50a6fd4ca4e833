"""
Pytest configuration and fixtures for dir_organizer tests.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator, Iterable

import pytest

from dir_organizer.reporting import RecordingReporter


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """Empty source directory inside the temp dir."""
    path = temp_dir / "source"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    """Output directory path (not created)."""
    return temp_dir / "output"


@pytest.fixture
def make_files(source_dir: Path) -> Callable[[Iterable[str]], Path]:
    """Return a helper that creates files with their own name as content."""

    def _make(names: Iterable[str]) -> Path:
        for name in names:
            (source_dir / name).write_text(f"{name} content")
        return source_dir

    return _make


@pytest.fixture
def reporter() -> RecordingReporter:
    """Reporter that keeps every message."""
    return RecordingReporter()


@pytest.fixture
def snapshot() -> Callable[[Path], dict]:
    """Return a helper mapping every path under a root to its content."""

    def _snapshot(root: Path) -> dict:
        return {
            str(p.relative_to(root)): (None if p.is_dir() else p.read_bytes())
            for p in sorted(root.rglob("*"))
        }

    return _snapshot
