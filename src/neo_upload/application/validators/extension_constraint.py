"""Extension constraint.

ONLY file extension validation - checks the lowercased extension of the
client file name against an allowlist.

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional

if TYPE_CHECKING:
    from ...core.entities.uploaded_file import UploadedFile


class ExtensionConstraint:
    """Rejects files whose extension is not in the allowed set.

    Entries are compared as given against the already lowercased file
    extension, so they should be lowercase and without a leading dot.
    """

    DEFAULT_MESSAGE = "Invalid extension"

    def __init__(self, allowed_extensions: Iterable[str], message: Optional[str] = None):
        """Initialize extension constraint.

        Args:
            allowed_extensions: Extensions the file may have (e.g. {"jpg", "png"})
            message: Message recorded when the extension is not allowed
        """
        self.allowed_extensions: FrozenSet[str] = frozenset(allowed_extensions)
        if not self.allowed_extensions:
            raise ValueError("At least one allowed extension is required")

        self.message = message or self.DEFAULT_MESSAGE

    def validate(self, file: "UploadedFile") -> None:
        if file.get_extension() not in self.allowed_extensions:
            file.add_errors(self.message)

    def __repr__(self) -> str:
        return f"ExtensionConstraint({sorted(self.allowed_extensions)})"
