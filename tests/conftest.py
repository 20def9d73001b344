"""Pytest fixtures and utilities for hson tests."""

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner

from hson.source import CharacterSource


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner for testing."""
    return CliRunner()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str | bytes], Path]:
    """Factory writing text or bytes to a file under tmp_path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


class CountingSource(CharacterSource):
    """CharacterSource over a string that records how many chars were taken."""

    def __init__(self, text: str):
        super().__init__()
        self._text = text
        self.taken = 0
        self.closed = False

    def next_char(self) -> str | None:
        if self.taken >= len(self._text):
            return None
        char = self._text[self.taken]
        self.taken += 1
        return char

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def counting_source() -> Callable[[str], CountingSource]:
    """Factory for sources that count characters pulled."""
    return CountingSource
