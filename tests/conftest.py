"""Shared fixtures for bytepy tests."""

import pytest

from bytepy.core.editor import HexEditor


@pytest.fixture
def zero_file(tmp_path):
    """A file holding 20 zero bytes."""
    path = tmp_path / "zeros.bin"
    path.write_bytes(b"\x00" * 20)
    return path


@pytest.fixture
def make_file(tmp_path):
    """Factory writing the given bytes to a fresh file."""
    counter = {"n": 0}

    def _make(data: bytes):
        counter["n"] += 1
        path = tmp_path / f"data{counter['n']}.bin"
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def editor():
    """A HexEditor that is closed after the test."""
    with HexEditor() as ed:
        yield ed
