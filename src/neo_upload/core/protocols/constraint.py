"""Constraint protocol.

ONLY validation rule contract - defines the single capability every rule
attached to an uploaded file provides.

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..entities.uploaded_file import UploadedFile


@runtime_checkable
class Constraint(Protocol):
    """Validation rule for an uploaded file.

    Implementations inspect the file and report problems by calling
    ``file.add_errors(...)`` zero or more times. They never raise for an
    invalid file and keep no state between calls.
    """

    def validate(self, file: "UploadedFile") -> None:
        """Check the file, appending an error message for each failure.

        Args:
            file: The uploaded file under validation
        """
        ...
