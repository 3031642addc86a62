"""FastAPI integration for neo-upload."""

from .dependencies import (
    collect_uploads,
    get_upload_collection,
    get_upload_settings,
    receive_upload,
)
from .error_handlers import neo_upload_exception_handler, register_exception_handlers

__all__ = [
    "collect_uploads",
    "get_upload_collection",
    "get_upload_settings",
    "receive_upload",
    "neo_upload_exception_handler",
    "register_exception_handlers",
]
