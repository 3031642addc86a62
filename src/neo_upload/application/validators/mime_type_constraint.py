"""MIME type constraint.

ONLY MIME type validation - checks the type sniffed from the file content
against an allowlist. The client-declared content type is never used.

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional

if TYPE_CHECKING:
    from ...core.entities.uploaded_file import UploadedFile


class MimeTypeConstraint:
    """Rejects files whose detected MIME type is not in the allowed set."""

    DEFAULT_MESSAGE = "Invalid MIME type"

    def __init__(self, allowed_mime_types: Iterable[str], message: Optional[str] = None):
        """Initialize MIME type constraint.

        Args:
            allowed_mime_types: MIME types the file may have (e.g. {"image/png"})
            message: Message recorded when the MIME type is not allowed
        """
        self.allowed_mime_types: FrozenSet[str] = frozenset(allowed_mime_types)
        self.message = message or self.DEFAULT_MESSAGE

    def validate(self, file: "UploadedFile") -> None:
        if file.get_mime_type() not in self.allowed_mime_types:
            file.add_errors(self.message)

    def __repr__(self) -> str:
        return f"MimeTypeConstraint({sorted(self.allowed_mime_types)})"
