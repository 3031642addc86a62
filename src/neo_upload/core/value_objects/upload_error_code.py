"""Upload error code value object.

ONLY upload error codes - the fixed set of outcomes a host reports for one
uploaded file, and the canned message for each failure.

Following maximum separation architecture - one file = one purpose.
"""

from enum import IntEnum
from types import MappingProxyType


class UploadErrorCode(IntEnum):
    """Outcome of receiving one uploaded file.

    Numeric values match the conventional multipart upload error codes, so
    records coming from other hosts can be mapped one-to-one.
    """

    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8

    @property
    def message(self) -> str:
        """Human-readable message for this code ('' for OK)."""
        return UPLOAD_ERROR_MESSAGES.get(self, "")


UPLOAD_ERROR_MESSAGES = MappingProxyType({
    UploadErrorCode.INI_SIZE: "The file exceeds the maximum upload size allowed by the server",
    UploadErrorCode.FORM_SIZE: "The file exceeds the MAX_FILE_SIZE directive that was specified in the HTML form",
    UploadErrorCode.PARTIAL: "The file was only partially uploaded",
    UploadErrorCode.NO_FILE: "No file was uploaded",
    UploadErrorCode.NO_TMP_DIR: "Missing a temporary folder",
    UploadErrorCode.CANT_WRITE: "Failed to write file to disk",
    UploadErrorCode.EXTENSION: "A server extension stopped the file upload",
})
