"""MIME detector protocol.

ONLY content type detection contract - defines how the MIME type of an
uploaded file is determined from its bytes on disk.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MimeDetector(Protocol):
    """Detects a file's MIME type by inspecting its content.

    Implementations must not trust the client-supplied content type.
    """

    def detect(self, path: str) -> str:
        """Return the MIME type of the file at ``path``.

        Returns an empty string when the type cannot be determined.
        """
        ...
