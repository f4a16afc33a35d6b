"""Pytest fixtures for inidoc tests."""

import io

import pytest


@pytest.fixture
def stream_of():
    """Build a binary stream from text, like an opened file."""
    def _make(text: str, encoding: str = 'utf-8') -> io.BytesIO:
        return io.BytesIO(text.encode(encoding))
    return _make


@pytest.fixture
def sample_ini():
    return '''; generated by the map editor
Name = Untitled

[General]
Theater = TEMPERATE
MaxPlayer = 8

# nothing here yet
[Houses]

[Basic]
Name  =  Operation: Iron  Curtain
Percent = 50%
'''


@pytest.fixture
def ini_file(tmp_path, sample_ini):
    path = tmp_path / 'map.ini'
    path.write_text(sample_ini, encoding='ascii')
    return path
