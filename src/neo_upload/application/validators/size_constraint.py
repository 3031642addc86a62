"""Size constraint.

ONLY file size validation - checks the uploaded size against an inclusive
range given in bytes or as human-readable sizes ("500K", "2M").

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING, Optional, Union

from ...core.value_objects.file_size import FileSize

if TYPE_CHECKING:
    from ...core.entities.uploaded_file import UploadedFile

SizeLimit = Union[int, str, FileSize]


class SizeConstraint:
    """Rejects files smaller than ``min`` or larger than ``max``.

    The maximum is checked first; a file reports at most one size message.
    """

    DEFAULT_MIN_MESSAGE = "The file size is too small"
    DEFAULT_MAX_MESSAGE = "The file size is too large"

    def __init__(
        self,
        max: SizeLimit,
        min: SizeLimit = 0,
        max_message: Optional[str] = None,
        min_message: Optional[str] = None
    ):
        """Initialize size constraint.

        Args:
            max: Largest accepted size, inclusive
            min: Smallest accepted size, inclusive
            max_message: Message recorded when the file is too large
            min_message: Message recorded when the file is too small

        Raises:
            InvalidUnit: If a human-readable bound has an unknown unit
        """
        self.max = FileSize.coerce(max).to_bytes()
        self.min = FileSize.coerce(min).to_bytes()
        self.max_message = max_message or self.DEFAULT_MAX_MESSAGE
        self.min_message = min_message or self.DEFAULT_MIN_MESSAGE

    def validate(self, file: "UploadedFile") -> None:
        size = file.get_size()

        if size > self.max:
            file.add_errors(self.max_message)
        elif size < self.min:
            file.add_errors(self.min_message)

    def __repr__(self) -> str:
        return f"SizeConstraint(max={self.max}, min={self.min})"
