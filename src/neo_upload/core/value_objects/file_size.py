"""File size value object.

ONLY file size - represents a byte count with conversion to and from
human-readable strings such as "10K" or "3M".

Following maximum separation architecture - one file = one purpose.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from ..exceptions.upload import InvalidUnit


# Unit letter -> bytes multiplier (read-only)
UNITS = MappingProxyType({
    'b': 1,
    'k': 1024,
    'm': 1024 ** 2,
    'g': 1024 ** 3,
})

# Largest unit first, used when formatting
_FORMAT_ORDER = ('g', 'm', 'k')

# Leading integer as an integer cast reads it: optional whitespace and sign
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def human_readable_to_bytes(value: str) -> int:
    """Convert human-readable file size (e.g. "10K" or "3M") into bytes.

    The numeric part is the leading integer of the string, so "1.5M" counts
    as one megabyte and a string without leading digits counts as zero.

    Raises:
        InvalidUnit: If the last character is not one of b, k, m, g.
    """
    unit = value[-1:].lower()
    if unit not in UNITS:
        raise InvalidUnit(value)

    match = _LEADING_INT.match(value)
    number = int(match.group(1)) if match else 0

    return number * UNITS[unit]


def bytes_to_human_readable(size: int) -> str:
    """Convert bytes into human readable file size (e.g. "10K" or "3M").

    The quotient is truncated, never rounded: 1535 bytes is "1K".
    """
    for unit in _FORMAT_ORDER:
        if size >= UNITS[unit]:
            return f"{int(size // UNITS[unit])}{unit.upper()}"

    return f"{size}B"


@dataclass(frozen=True)
class FileSize:
    """File size value object.

    Represents a file size in bytes with validation and human-readable
    conversion. Supports ordering comparisons against other FileSize values.
    """

    value: int  # Size in bytes

    # Size unit constants
    BYTE = UNITS['b']
    KILOBYTE = UNITS['k']
    MEGABYTE = UNITS['m']
    GIGABYTE = UNITS['g']

    def __post_init__(self):
        """Validate file size value."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"FileSize must be an integer, got {type(self.value).__name__}")

        if self.value < 0:
            raise ValueError(f"File size cannot be negative: {self.value}")

    @classmethod
    def zero(cls) -> 'FileSize':
        """Create a zero-size file size."""
        return cls(0)

    @classmethod
    def from_bytes(cls, bytes_value: int) -> 'FileSize':
        """Create FileSize from bytes value."""
        return cls(bytes_value)

    @classmethod
    def from_human_readable(cls, size_str: str) -> 'FileSize':
        """Create FileSize from human-readable string (e.g., '10K', '3M')."""
        return cls(human_readable_to_bytes(size_str))

    @classmethod
    def coerce(cls, value: Union[int, str, 'FileSize']) -> 'FileSize':
        """Build a FileSize from bytes, a human-readable string or a FileSize."""
        if isinstance(value, FileSize):
            return value
        if isinstance(value, str):
            return cls.from_human_readable(value)
        return cls(value)

    def to_bytes(self) -> int:
        """Get size in bytes."""
        return self.value

    def format_human_readable(self) -> str:
        """Format size with the largest unit it reaches, e.g. '3M'."""
        return bytes_to_human_readable(self.value)

    def exceeds(self, other: 'FileSize') -> bool:
        """Check if this size exceeds another size."""
        return self.value > other.value

    def fits_in(self, other: 'FileSize') -> bool:
        """Check if this size fits within another size limit."""
        return self.value <= other.value

    # Comparison operators
    def __lt__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented
        return self.value >= other.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        """String representation for display."""
        return self.format_human_readable()

    def __repr__(self) -> str:
        """Developer representation."""
        return f"FileSize({self.value})"
