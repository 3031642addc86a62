"""Neo-Upload - uploaded file validation and placement for FastAPI services.

Wraps the host framework's uploaded files: reads each file's metadata, runs
declarative constraints (extension, MIME type, size) and moves the temporary
file into an upload directory under an optional new name.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import UploadSettings, get_settings, get_logger

from .core.exceptions import (
    NeoUploadError,
    UploadConfigurationError,
    KeyNotFound,
    DirectoryNotFound,
    DirectoryNotWritable,
    MissingUploadDir,
    InvalidUnit,
    create_error_response,
    get_http_status_code,
)

from .core.value_objects import (
    FileSize,
    UploadErrorCode,
    UPLOAD_ERROR_MESSAGES,
    bytes_to_human_readable,
    human_readable_to_bytes,
)

from .core.protocols import Constraint, MimeDetector

from .core.entities import (
    UploadRecord,
    UploadCollection,
    UploadedFile,
    get_current_uploads,
    use_uploads,
)

from .application.validators import (
    ExtensionConstraint,
    MimeTypeConstraint,
    SizeConstraint,
)

__all__ = [
    "__version__",

    # Configuration
    "UploadSettings",
    "get_settings",
    "get_logger",
    "setup_logging",

    # Exceptions
    "NeoUploadError",
    "UploadConfigurationError",
    "KeyNotFound",
    "DirectoryNotFound",
    "DirectoryNotWritable",
    "MissingUploadDir",
    "InvalidUnit",
    "create_error_response",
    "get_http_status_code",

    # Value Objects
    "FileSize",
    "UploadErrorCode",
    "UPLOAD_ERROR_MESSAGES",
    "bytes_to_human_readable",
    "human_readable_to_bytes",

    # Protocols
    "Constraint",
    "MimeDetector",

    # Entities
    "UploadRecord",
    "UploadCollection",
    "UploadedFile",
    "get_current_uploads",
    "use_uploads",

    # Constraints
    "ExtensionConstraint",
    "MimeTypeConstraint",
    "SizeConstraint",
]
