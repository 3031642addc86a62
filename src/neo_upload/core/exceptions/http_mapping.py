"""HTTP status code mapping for neo-upload exceptions."""

from typing import Dict, Type

from .base import NeoUploadError
from .upload import (
    UploadConfigurationError,
    KeyNotFound,
    DirectoryNotFound,
    DirectoryNotWritable,
    MissingUploadDir,
    InvalidUnit,
)


# Static HTTP Status Code mapping for exceptions
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    KeyNotFound: 400,
    InvalidUnit: 400,

    # 500 Internal Server Error
    UploadConfigurationError: 500,
    DirectoryNotFound: 500,
    DirectoryNotWritable: 500,
    MissingUploadDir: 500,
    NeoUploadError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit their parent's status.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
