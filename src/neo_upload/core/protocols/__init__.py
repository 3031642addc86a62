"""neo-upload protocols.

Contracts the core depends on: validation rules and content sniffing.
"""

from .constraint import Constraint
from .mime_detector import MimeDetector

__all__ = [
    "Constraint",
    "MimeDetector",
]
