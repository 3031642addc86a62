"""neo-upload entities.

The host's upload records, the request-scoped collection holding them, and
the uploaded file that validates and moves one of them.
"""

from .upload_record import UploadRecord
from .upload_collection import UploadCollection, get_current_uploads, use_uploads
from .uploaded_file import UploadedFile, FILE_EXISTS_MESSAGE

__all__ = [
    "UploadRecord",
    "UploadCollection",
    "get_current_uploads",
    "use_uploads",
    "UploadedFile",
    "FILE_EXISTS_MESSAGE",
]
