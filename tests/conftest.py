"""Shared fixtures for freqs tests."""

import pytest

from freqs import AlphabetTable


@pytest.fixture(scope="session")
def table():
    """The default Latin + Cyrillic table."""
    return AlphabetTable()


@pytest.fixture
def write_input(tmp_path):
    """Write bytes (or UTF-8 text) to a file under tmp_path, return its path."""

    def _write(content, name="input.txt"):
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write
