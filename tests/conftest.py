"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def presets_path(temp_dir: Path) -> Path:
    """A project presets file with one extra chord and one extra scale."""
    path = temp_dir / "presets.yaml"
    path.write_text(
        "chords:\n"
        "  sus4:\n"
        "    intervals: [P4, M2]\n"
        "    description: Suspended fourth\n"
        "scales:\n"
        "  harmonic_minor:\n"
        "    intervals: [M2, m2, M2, M2, m2, A2, m2]\n"
    )
    return path
