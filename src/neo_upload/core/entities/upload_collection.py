"""Upload collection entity.

ONLY upload collection - the request-scoped set of upload records keyed by
form field, and the guarded move of their temporary files.

Following maximum separation architecture - one file = one purpose.
"""

import os
import shutil
from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Mapping as MappingType, Optional, Set, Union

from ...config.logging_config import get_logger
from .upload_record import UploadRecord

logger = get_logger(__name__)

RecordLike = Union[UploadRecord, MappingType[str, Any]]


class UploadCollection(Mapping):
    """Read-only mapping of field key to UploadRecord for one request.

    The collection is the only component allowed to move a temporary upload:
    ``move_uploaded_file`` refuses any path that is not the temporary file
    of one of its own successfully received records.
    """

    def __init__(self, records: Optional[MappingType[str, RecordLike]] = None):
        self._records: Dict[str, UploadRecord] = {}
        self._moved: Set[str] = set()

        for key, record in (records or {}).items():
            if not isinstance(record, UploadRecord):
                record = UploadRecord.from_dict(record)
            self._records[key] = record

    @classmethod
    def coerce(cls, files: Union['UploadCollection', MappingType[str, RecordLike]]) -> 'UploadCollection':
        """Wrap a plain mapping of records, leaving collections untouched."""
        if isinstance(files, UploadCollection):
            return files
        return cls(files)

    def __getitem__(self, key: str) -> UploadRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"UploadCollection({sorted(self._records)})"

    def _genuine_paths(self) -> Set[str]:
        return {
            os.path.realpath(record.tmp_name)
            for record in self._records.values()
            if record.is_ok() and record.tmp_name
        }

    def is_uploaded_file(self, path: str) -> bool:
        """Check that ``path`` is a temporary file received by this collection.

        Args:
            path: Candidate temporary file path

        Returns:
            True if the path belongs to a successfully received record, has
            not been moved yet and still exists as a regular file
        """
        if not path:
            return False

        real_path = os.path.realpath(path)
        if real_path in self._moved or real_path not in self._genuine_paths():
            return False

        return os.path.isfile(real_path)

    def move_uploaded_file(self, tmp_name: str, destination: str) -> bool:
        """Move a received temporary file to its destination.

        Args:
            tmp_name: Temporary path of the upload
            destination: Full destination path, including file name

        Returns:
            True if the file was moved, False if the path is not a genuine
            upload of this collection or the move failed
        """
        if not self.is_uploaded_file(tmp_name):
            logger.warning(f"Refusing to move {tmp_name!r}: not a file uploaded in this request")
            return False

        real_path = os.path.realpath(tmp_name)
        try:
            shutil.move(real_path, destination)
        except OSError as e:
            logger.error(f"Failed to move upload {tmp_name!r} to {destination!r}: {e}")
            return False

        self._moved.add(real_path)
        logger.info(f"Moved upload {tmp_name!r} to {destination!r}")
        return True

    def cleanup(self) -> int:
        """Delete temporary files that were never moved.

        Returns:
            Number of temporary files removed
        """
        removed = 0
        for real_path in self._genuine_paths() - self._moved:
            try:
                os.remove(real_path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning(f"Could not remove temporary upload {real_path!r}: {e}")
                continue
            removed += 1

        if removed:
            logger.debug(f"Removed {removed} unmoved temporary upload(s)")
        return removed


# Collection for the request currently being handled
_current_uploads: ContextVar[Optional[UploadCollection]] = ContextVar(
    "neo_upload_current_uploads", default=None
)


def get_current_uploads() -> UploadCollection:
    """Get the collection installed for the current request.

    Returns an empty collection when none is installed.
    """
    collection = _current_uploads.get()
    if collection is None:
        return UploadCollection()
    return collection


@contextmanager
def use_uploads(collection: UploadCollection) -> Iterator[UploadCollection]:
    """Install ``collection`` as the current request's uploads."""
    token = _current_uploads.set(collection)
    try:
        yield collection
    finally:
        _current_uploads.reset(token)
