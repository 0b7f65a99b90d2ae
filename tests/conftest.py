"""
Pytest configuration and shared fixtures for motionpath tests.
"""

import logging
from pathlib import Path

import pytest

from motionpath.config import PROGRAM_EXTENSION

logger = logging.getLogger(__name__)

SAMPLE_PROGRAM = """\
; square-ish path with one arc
LIN X3.0 Y4.0 Z0.0
CW X0 Y0 R5.0 A90.0
LIN X3.0 Y4.0 Z2.0
"""


@pytest.fixture
def write_program(tmp_path: Path):
    """Factory fixture writing program text to a temporary file."""

    def _write(text: str, name: str = f"program{PROGRAM_EXTENSION}") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote test program {path}")
        return str(path)

    return _write


@pytest.fixture
def sample_program(write_program) -> str:
    """Path to a small valid program."""
    return write_program(SAMPLE_PROGRAM)
