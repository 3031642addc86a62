"""neo-upload value objects.

Immutable values used across the library: file sizes with their
human-readable conversions and the host's upload error codes.
"""

from .file_size import (
    FileSize,
    UNITS,
    bytes_to_human_readable,
    human_readable_to_bytes,
)
from .upload_error_code import UploadErrorCode, UPLOAD_ERROR_MESSAGES

__all__ = [
    "FileSize",
    "UNITS",
    "bytes_to_human_readable",
    "human_readable_to_bytes",
    "UploadErrorCode",
    "UPLOAD_ERROR_MESSAGES",
]
