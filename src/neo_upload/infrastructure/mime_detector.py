"""libmagic MIME detector.

ONLY content sniffing - determines a file's MIME type from its leading
bytes using python-magic.

Following maximum separation architecture - one file = one purpose.
"""

import magic

from ..config.logging_config import get_logger

logger = get_logger(__name__)


class MagicMimeDetector:
    """MIME detector backed by libmagic."""

    def detect(self, path: str) -> str:
        """Detect the MIME type of the file at ``path``.

        Returns an empty string if the file cannot be read or libmagic
        cannot classify it.
        """
        try:
            return magic.from_file(path, mime=True)
        except (OSError, magic.MagicException) as e:
            logger.warning(f"Could not detect MIME type of {path!r}: {e}")
            return ""


def create_mime_detector() -> MagicMimeDetector:
    """Create the default MIME detector."""
    return MagicMimeDetector()
