"""Uploaded file entity.

ONLY uploaded file - one file received under a form field key, with its
validation constraints, accumulated error messages and the final move into
an upload directory.

Following maximum separation architecture - one file = one purpose.
"""

import os
from typing import Any, Iterable, List, Mapping, Optional, Union

from ...config.logging_config import get_logger
from ..exceptions.upload import (
    KeyNotFound,
    DirectoryNotFound,
    DirectoryNotWritable,
    MissingUploadDir,
)
from ..protocols.constraint import Constraint
from ..protocols.mime_detector import MimeDetector
from ..value_objects.file_size import bytes_to_human_readable, human_readable_to_bytes
from ..value_objects.upload_error_code import UploadErrorCode, UPLOAD_ERROR_MESSAGES
from .upload_collection import UploadCollection, get_current_uploads

logger = get_logger(__name__)

FILE_EXISTS_MESSAGE = "File already exists"


def _base_name(path: str) -> str:
    """Strip any directory part, Windows or POSIX, from a client supplied name."""
    return os.path.basename(path.replace("\\", "/"))


class UploadedFile:
    """A file uploaded under one form field key.

    Typical use::

        file = UploadedFile("avatar", upload_dir="/srv/avatars", files=uploads)
        file.add_constraints([
            ExtensionConstraint({"jpg", "png"}),
            SizeConstraint("2M"),
        ])
        file.set_new_name("user-42")
        if not file.upload():
            errors = file.get_errors()

    Validation problems are collected as messages (see ``get_errors``);
    only misuse of the object raises.
    """

    def __init__(
        self,
        key: str,
        upload_dir: Optional[str] = None,
        overwrite: bool = True,
        required: bool = False,
        *,
        files: Optional[Mapping[str, Any]] = None,
        mime_detector: Optional[MimeDetector] = None
    ):
        """Create an uploaded file from the host's upload collection.

        Args:
            key: Form field key of the file
            upload_dir: Directory where the file will be stored
            overwrite: Whether an existing destination file may be replaced
            required: Whether a missing file is an error
            files: Upload collection (or mapping of records) for the request;
                defaults to the collection installed for the current request
            mime_detector: Content sniffer; defaults to libmagic

        Raises:
            KeyNotFound: If the collection has no entry for ``key``
            DirectoryNotFound: If ``upload_dir`` does not exist
            DirectoryNotWritable: If ``upload_dir`` is not writable
        """
        uploads = UploadCollection.coerce(files) if files is not None else get_current_uploads()

        if key not in uploads:
            raise KeyNotFound(key)

        self._upload_dir: Optional[str] = None
        if upload_dir:
            self.set_upload_dir(upload_dir)

        record = uploads[key]
        self._uploads = uploads
        self._key = key
        self._original_name = record.name
        self._error_code = record.error
        self._size = record.size
        self._tmp_name = record.tmp_name

        self._name: Optional[str] = None
        self._extension: Optional[str] = None
        self._mime_type: Optional[str] = None
        self._mime_detector = mime_detector

        self._constraints: List[Constraint] = []
        self._errors: List[str] = []
        self._validated = False

        self._overwrite = overwrite
        self._required = required
        self._new_name: Optional[str] = None

    def __repr__(self) -> str:
        return f"UploadedFile(key={self._key!r}, name={self._original_name!r}, error={self._error_code.name})"

    def _is_absent_optional(self) -> bool:
        return not self._required and self._error_code == UploadErrorCode.NO_FILE

    def upload(self) -> bool:
        """Validate the file if needed and move it into the upload directory.

        Returns:
            True if the file was moved. False if the file is optional and was
            not sent, is invalid, would overwrite an existing file, or the
            move failed.

        Raises:
            MissingUploadDir: If no upload directory has been set
        """
        if self._is_absent_optional():
            return False

        if not self._upload_dir:
            raise MissingUploadDir(self._key)

        if not self._validated:
            self.validate()

        if not self.is_valid():
            return False

        if self._new_name:
            filename = f"{self._new_name}.{self.get_extension()}"
        else:
            filename = self.get_name_with_extension()
        destination = os.path.join(self._upload_dir, _base_name(filename))

        if not self._overwrite and os.path.exists(destination):
            logger.debug(f"Upload {self._key!r} rejected: {destination!r} already exists")
            self.add_errors(FILE_EXISTS_MESSAGE)
            return False

        return self._uploads.move_uploaded_file(self._tmp_name, destination)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> 'UploadedFile':
        """Run a validation pass.

        A failed host upload records its error message and skips the
        constraints: there is no complete temporary file to inspect.

        Returns:
            self
        """
        self._validated = True

        if self._is_absent_optional():
            return self

        if not self.is_ok():
            self.add_errors(UPLOAD_ERROR_MESSAGES[self._error_code])
        else:
            for constraint in self._constraints:
                constraint.validate(self)

        if self._errors:
            logger.debug(f"Upload {self._key!r} failed validation: {self._errors}")
        return self

    def is_valid(self) -> bool:
        """Return True if the file has been validated and has no errors."""
        return self._validated and not self._errors

    def is_ok(self) -> bool:
        """Check if the host received the file without error."""
        return self._error_code == UploadErrorCode.OK

    def add_constraints(self, constraints: Union[Constraint, Iterable[Constraint]]) -> 'UploadedFile':
        """Add one constraint or an iterable of constraints.

        Invalidates any previous validation pass.
        """
        if isinstance(constraints, Constraint):
            self._constraints.append(constraints)
        else:
            self._constraints.extend(constraints)

        self._validated = False
        return self

    def set_constraints(self, constraints: Iterable[Constraint]) -> 'UploadedFile':
        """Replace all constraints. Invalidates any previous validation pass."""
        self._constraints = list(constraints)
        self._validated = False
        return self

    def get_constraints(self) -> List[Constraint]:
        """Get attached constraints in the order they run."""
        return self._constraints

    def add_errors(self, errors: Union[str, Iterable[str]]) -> 'UploadedFile':
        """Append one error message or an iterable of messages."""
        if isinstance(errors, str):
            self._errors.append(errors)
        else:
            self._errors.extend(errors)
        return self

    def set_errors(self, errors: Iterable[str]) -> 'UploadedFile':
        """Replace all error messages."""
        self._errors = list(errors)
        return self

    def get_errors(self) -> List[str]:
        """Get error messages in the order they were recorded."""
        return list(self._errors)

    # ------------------------------------------------------------------
    # Getters / setters
    # ------------------------------------------------------------------

    def get_key(self) -> str:
        """Get the form field key of the file."""
        return self._key

    def get_name_with_extension(self) -> str:
        """Get the original client file name."""
        return self._original_name

    def get_name(self) -> str:
        """Get the original file name without its extension."""
        if self._name is None:
            base = _base_name(self._original_name)
            self._name = base.rpartition('.')[0] if '.' in base else base
        return self._name

    def get_extension(self) -> str:
        """Get the lowercased file extension, '' when there is none."""
        if self._extension is None:
            base = _base_name(self._original_name)
            self._extension = base.rpartition('.')[2].lower() if '.' in base else ''
        return self._extension

    def get_mime_type(self) -> str:
        """Get the MIME type sniffed from the temporary file's content."""
        if self._mime_type is None:
            if self._mime_detector is None:
                from ...infrastructure.mime_detector import MagicMimeDetector
                self._mime_detector = MagicMimeDetector()
            self._mime_type = self._mime_detector.detect(self._tmp_name)
        return self._mime_type

    def get_size(self, human_readable: bool = False) -> Union[int, str]:
        """Get the file size in bytes, or as a string like '3M'."""
        if human_readable:
            return bytes_to_human_readable(self._size)
        return self._size

    def get_tmp_name(self) -> str:
        """Get the path of the host's temporary file."""
        return self._tmp_name

    def get_error_code(self) -> UploadErrorCode:
        return self._error_code

    def set_new_name(self, name: str) -> 'UploadedFile':
        """Set the base name (without extension) to store the file under."""
        self._new_name = name
        return self

    def get_new_name(self) -> Optional[str]:
        return self._new_name

    def set_upload_dir(self, directory: str) -> 'UploadedFile':
        """Set the directory where the file will be stored.

        Raises:
            DirectoryNotFound: If the directory does not exist
            DirectoryNotWritable: If the directory is not writable
        """
        if not os.path.isdir(directory):
            raise DirectoryNotFound(directory)

        if not os.access(directory, os.W_OK):
            raise DirectoryNotWritable(directory)

        self._upload_dir = str(directory)
        return self

    def get_upload_dir(self) -> Optional[str]:
        return self._upload_dir

    def set_overwrite(self, overwrite: bool) -> 'UploadedFile':
        self._overwrite = overwrite
        return self

    def get_overwrite(self) -> bool:
        return self._overwrite

    def set_required(self, required: bool) -> 'UploadedFile':
        self._required = required
        return self

    def is_required(self) -> bool:
        return self._required

    human_readable_to_bytes = staticmethod(human_readable_to_bytes)
    bytes_to_human_readable = staticmethod(bytes_to_human_readable)
