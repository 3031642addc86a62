"""neo-upload exceptions.

Precondition errors are raised; validation problems with the uploaded file
are collected as messages on the file instead.
"""

from .base import NeoUploadError, create_error_response
from .upload import (
    UploadConfigurationError,
    KeyNotFound,
    DirectoryNotFound,
    DirectoryNotWritable,
    MissingUploadDir,
    InvalidUnit,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    # Base Exception
    "NeoUploadError",

    # Upload Exceptions
    "UploadConfigurationError",
    "KeyNotFound",
    "DirectoryNotFound",
    "DirectoryNotWritable",
    "MissingUploadDir",
    "InvalidUnit",

    # Utility Functions
    "HTTP_STATUS_MAP",
    "get_http_status_code",
    "create_error_response",
]
