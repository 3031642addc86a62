"""Upload record entity.

ONLY upload record - the metadata a host framework reports for one uploaded
file field: client file name, error code, size and temporary path.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ..value_objects.upload_error_code import UploadErrorCode


@dataclass(frozen=True)
class UploadRecord:
    """Host-reported metadata for one uploaded file.

    The temporary file at ``tmp_name`` has already been written by the host;
    the record itself never touches the filesystem.
    """

    name: str
    error: UploadErrorCode = UploadErrorCode.OK
    size: int = 0
    tmp_name: str = ""

    def __post_init__(self):
        """Validate and normalise record fields."""
        # Accept raw integer codes from hosts that report them
        object.__setattr__(self, 'error', UploadErrorCode(self.error))

        if self.size < 0:
            raise ValueError(f"Upload size cannot be negative: {self.size}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'UploadRecord':
        """Create a record from a mapping with name/error/size/tmp_name keys."""
        return cls(
            name=data.get('name', ''),
            error=data.get('error', UploadErrorCode.OK),
            size=int(data.get('size', 0)),
            tmp_name=data.get('tmp_name', ''),
        )

    @classmethod
    def no_file(cls) -> 'UploadRecord':
        """Record for a file field that was submitted empty."""
        return cls(name='', error=UploadErrorCode.NO_FILE)

    def is_ok(self) -> bool:
        """Check if the host received the file without error."""
        return self.error == UploadErrorCode.OK

    def to_dict(self) -> dict:
        """Convert record to dictionary."""
        return {
            'name': self.name,
            'error': int(self.error),
            'size': self.size,
            'tmp_name': self.tmp_name,
        }
