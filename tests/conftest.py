"""Pytest configuration and fixtures for neo-upload tests."""

import pytest

from neo_upload.core.entities import UploadCollection, UploadRecord
from neo_upload.core.value_objects import UploadErrorCode


# Minimal PNG: signature followed by an IHDR chunk
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"
    b"\x1f\x15\xc4\x89"
)

TEXT_BYTES = b"Hello, World! This is a test file for upload validation.\n"


class StubMimeDetector:
    """MIME detector returning a fixed type and counting calls."""

    def __init__(self, mime_type: str = "image/png"):
        self.mime_type = mime_type
        self.calls = 0

    def detect(self, path: str) -> str:
        self.calls += 1
        return self.mime_type


@pytest.fixture
def upload_dir(tmp_path):
    """Empty, writable upload destination directory."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def tmp_upload_dir(tmp_path):
    """Directory playing the host's temporary upload folder."""
    directory = tmp_path / "tmp"
    directory.mkdir()
    return directory


@pytest.fixture
def make_record(tmp_upload_dir):
    """Factory writing a temporary upload and returning its record."""
    counter = {"n": 0}

    def _make_record(name="photo.png", content=PNG_BYTES, error=UploadErrorCode.OK, size=None):
        if error != UploadErrorCode.OK:
            return UploadRecord(name=name, error=error, size=size or 0)

        counter["n"] += 1
        tmp_file = tmp_upload_dir / f"upload_{counter['n']}"
        tmp_file.write_bytes(content)
        return UploadRecord(
            name=name,
            error=error,
            size=len(content) if size is None else size,
            tmp_name=str(tmp_file),
        )

    return _make_record


@pytest.fixture
def make_uploads(make_record):
    """Factory building an UploadCollection from keyword records."""

    def _make_uploads(**records):
        return UploadCollection({
            key: record if isinstance(record, UploadRecord) else make_record(**record)
            for key, record in records.items()
        })

    return _make_uploads


@pytest.fixture
def stub_detector():
    """MIME detector that reports image/png."""
    return StubMimeDetector()


@pytest.fixture
def detector_factory():
    """StubMimeDetector class, for tests needing a specific MIME type."""
    return StubMimeDetector


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def text_bytes():
    return TEXT_BYTES
