"""neo-upload infrastructure: content sniffing and host framework adapters."""

from .mime_detector import MagicMimeDetector, create_mime_detector

__all__ = [
    "MagicMimeDetector",
    "create_mime_detector",
]
