"""Shared pytest fixtures for all tests."""

import httpx
import pytest
from pathlib import Path

from cli.config import Config
from session.client import ConverterClient
from session.controller import UploadSessionController
from session.models import FileEntry

PNG_MAGIC = b'\x89PNG\r\n\x1a\n'


def make_png_entry(name: str, size: int) -> FileEntry:
    """Create an in-memory file entry of the given size that starts like a PNG."""
    return FileEntry.from_bytes(name, PNG_MAGIC + b'\0' * (size - len(PNG_MAGIC)))


def make_pdf(size: int) -> bytes:
    """Create a fake PDF body of exactly `size` bytes."""
    header = b'%PDF-1.4\n'
    return header + b'0' * (size - len(header))


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .snapmerge directory
    """
    config_dir = tmp_path / '.snapmerge'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def scratch_dir(tmp_path):
    """Directory for artifact scratch files."""
    path = tmp_path / 'scratch'
    path.mkdir()
    return path


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample image file for testing selection.

    Returns:
        Path to sample PNG file
    """
    file_path = tmp_path / 'photo.png'
    file_path.write_bytes(PNG_MAGIC + b'sample image data')
    return file_path


@pytest.fixture
def multiple_sample_files(tmp_path):
    """
    Create sample files of mixed types for testing bulk selection.

    Returns:
        List of Paths to sample files
    """
    files = []
    for name in ('scan1.png', 'letter.pdf', 'notes.txt'):
        file_path = tmp_path / name
        file_path.write_bytes(f'content of {name}'.encode())
        files.append(file_path)
    return files


@pytest.fixture
def make_controller(scratch_dir):
    """
    Factory for controllers whose client talks to a mock conversion service.

    Usage:
        controller = make_controller(handler)

    The handler receives an httpx.Request and returns an httpx.Response
    (or a coroutine resolving to one).
    """
    def _make(handler) -> UploadSessionController:
        client = ConverterClient('http://test', transport=httpx.MockTransport(handler))
        return UploadSessionController(client, scratch_dir=str(scratch_dir))

    return _make


@pytest.fixture
def pdf_handler():
    """Mock service handler that always returns a 50 KiB PDF and records requests."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(
            200,
            content=make_pdf(50 * 1024),
            headers={
                'Content-Type': 'application/pdf',
                'X-Processed-Images': '1',
                'X-Total-Files': '1',
                'X-Skipped-Files': '0',
            },
        )

    handler.requests = requests
    return handler
