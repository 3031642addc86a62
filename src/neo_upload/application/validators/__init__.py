"""neo-upload validation constraints.

Each constraint handles exactly one validation concern and reports failures
as messages on the uploaded file.
"""

from .extension_constraint import ExtensionConstraint
from .mime_type_constraint import MimeTypeConstraint
from .size_constraint import SizeConstraint

__all__ = [
    "ExtensionConstraint",
    "MimeTypeConstraint",
    "SizeConstraint",
]
