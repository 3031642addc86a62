"""Upload-specific exceptions for neo-upload.

These represent misuse of the library (unknown field key, unusable upload
directory, bad size unit) rather than problems with the end user's file.
Problems with the file itself are collected as validation messages.
"""

from .base import NeoUploadError


class UploadConfigurationError(NeoUploadError):
    """Raised when an upload is set up with invalid parameters."""
    pass


class KeyNotFound(UploadConfigurationError):
    """Raised when the upload collection has no entry for a field key."""

    def __init__(self, key: str):
        super().__init__(
            message=f"No file was found with key: {key}",
            error_code="UPLOAD_KEY_NOT_FOUND",
            details={"key": key}
        )
        self.key = key


class DirectoryNotFound(UploadConfigurationError):
    """Raised when the upload directory does not exist."""

    def __init__(self, directory: str):
        super().__init__(
            message="Directory does not exist",
            error_code="UPLOAD_DIRECTORY_NOT_FOUND",
            details={"directory": str(directory)}
        )
        self.directory = directory


class DirectoryNotWritable(UploadConfigurationError):
    """Raised when the upload directory exists but is not writable."""

    def __init__(self, directory: str):
        super().__init__(
            message="Directory is not writable",
            error_code="UPLOAD_DIRECTORY_NOT_WRITABLE",
            details={"directory": str(directory)}
        )
        self.directory = directory


class MissingUploadDir(UploadConfigurationError):
    """Raised when upload() is called before an upload directory is set."""

    def __init__(self, key: str):
        super().__init__(
            message="Upload directory not specified",
            error_code="UPLOAD_DIRECTORY_MISSING",
            details={"key": key}
        )
        self.key = key


class InvalidUnit(NeoUploadError, ValueError):
    """Raised when a human-readable size has an unknown unit suffix."""

    def __init__(self, value: str):
        super().__init__(
            message="Unknown file size unit",
            error_code="INVALID_SIZE_UNIT",
            details={"value": value}
        )
        self.value = value
