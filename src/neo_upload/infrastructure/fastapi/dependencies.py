"""FastAPI dependencies for receiving uploaded files.

Turns the files of a multipart form into an UploadCollection: each file is
spooled to a temporary path and described by an UploadRecord, the same way a
server reports uploads to application code.
"""

import os
import tempfile
from typing import AsyncIterator, Optional

from fastapi import Depends, Request
from starlette.datastructures import FormData, UploadFile

from ...config.logging_config import get_logger
from ...config.settings import UploadSettings, get_settings
from ...core.entities.upload_collection import UploadCollection, use_uploads
from ...core.entities.upload_record import UploadRecord
from ...core.value_objects.upload_error_code import UploadErrorCode

logger = get_logger(__name__)

TMP_PREFIX = "neo_upload_"


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


async def receive_upload(upload: UploadFile, settings: UploadSettings) -> UploadRecord:
    """Spool one incoming file to a temporary path.

    Args:
        upload: File part of the parsed form
        settings: Temp directory, size limit and chunk size to use

    Returns:
        Record describing the received file or why it was not received
    """
    # Clients may send a path; keep only the final component
    name = os.path.basename((upload.filename or "").replace("\\", "/"))
    if not name:
        return UploadRecord.no_file()

    if not os.path.isdir(settings.tmp_dir):
        logger.error(f"Temporary upload directory {settings.tmp_dir!r} does not exist")
        return UploadRecord(name=name, error=UploadErrorCode.NO_TMP_DIR)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=TMP_PREFIX, dir=settings.tmp_dir)
    except OSError as e:
        logger.error(f"Could not create temporary file for {name!r}: {e}")
        return UploadRecord(name=name, error=UploadErrorCode.CANT_WRITE)

    size = 0
    too_large = False
    try:
        with os.fdopen(fd, "wb") as tmp:
            while True:
                chunk = await upload.read(settings.chunk_size)
                if not chunk:
                    break
                size += len(chunk)
                if size > settings.max_file_size:
                    too_large = True
                    break
                tmp.write(chunk)
    except OSError as e:
        logger.error(f"Failed to write upload {name!r} to {tmp_name!r}: {e}")
        _discard(tmp_name)
        return UploadRecord(name=name, error=UploadErrorCode.CANT_WRITE)

    if too_large:
        logger.info(f"Upload {name!r} exceeds the {settings.max_file_size} byte limit")
        _discard(tmp_name)
        return UploadRecord(name=name, error=UploadErrorCode.INI_SIZE)

    return UploadRecord(name=name, error=UploadErrorCode.OK, size=size, tmp_name=tmp_name)


async def collect_uploads(form: FormData, settings: Optional[UploadSettings] = None) -> UploadCollection:
    """Build the upload collection for a parsed multipart form.

    Only the first file of each field key is kept; non-file fields are
    ignored.
    """
    settings = settings or get_settings()
    records = {}

    for key, value in form.multi_items():
        if key in records or not isinstance(value, UploadFile):
            continue
        records[key] = await receive_upload(value, settings)

    logger.debug(f"Collected {len(records)} upload field(s): {sorted(records)}")
    return UploadCollection(records)


def get_upload_settings() -> UploadSettings:
    """Get upload settings (override in tests via dependency_overrides)."""
    return get_settings()


async def get_upload_collection(
    request: Request,
    settings: UploadSettings = Depends(get_upload_settings)
) -> AsyncIterator[UploadCollection]:
    """Collect the request's uploaded files for the duration of the request.

    The collection is also installed as the current uploads, so
    ``UploadedFile(key)`` works without passing it explicitly. Temporary
    files that were not moved are removed once the request is done.
    """
    form = await request.form()
    collection = await collect_uploads(form, settings)

    try:
        with use_uploads(collection):
            yield collection
    finally:
        collection.cleanup()
        await form.close()
