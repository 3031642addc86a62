"""Tests for file size conversion."""

import pytest

from neo_upload.core.exceptions import InvalidUnit
from neo_upload.core.value_objects import (
    FileSize,
    bytes_to_human_readable,
    human_readable_to_bytes,
)


class TestHumanReadableToBytes:
    """Test cases for parsing human-readable sizes."""

    @pytest.mark.parametrize("value, expected", [
        ("10K", 10240),
        ("5M", 5242880),
        ("2G", 2147483648),
        ("512B", 512),
        ("10k", 10240),
        ("3m", 3145728),
    ])
    def test_known_units(self, value, expected):
        """Test each unit multiplier, case-insensitively."""
        assert human_readable_to_bytes(value) == expected

    def test_fractional_prefix_is_truncated(self):
        """Test only the leading integer is used."""
        assert human_readable_to_bytes("1.5M") == 1048576

    def test_missing_number_counts_as_zero(self):
        """Test a bare unit parses to zero bytes."""
        assert human_readable_to_bytes("K") == 0

    def test_leading_whitespace(self):
        assert human_readable_to_bytes(" 2K") == 2048

    def test_only_last_character_is_the_unit(self):
        """Test "10 KB" reads as ten bytes, the trailing B being the unit."""
        assert human_readable_to_bytes("10 KB") == 10

    @pytest.mark.parametrize("value", ["7x", "100", "", "10KZ"])
    def test_unknown_unit_raises(self, value):
        """Test that an unrecognised trailing character is rejected."""
        with pytest.raises(InvalidUnit, match="Unknown file size unit"):
            human_readable_to_bytes(value)

    def test_invalid_unit_is_value_error(self):
        with pytest.raises(ValueError):
            human_readable_to_bytes("7x")


class TestBytesToHumanReadable:
    """Test cases for formatting byte counts."""

    @pytest.mark.parametrize("size, expected", [
        (0, "0B"),
        (1023, "1023B"),
        (1024, "1K"),
        (1535, "1K"),
        (1048575, "1023K"),
        (1048576, "1M"),
        (5242880, "5M"),
        (3221225472, "3G"),
    ])
    def test_formatting(self, size, expected):
        """Test unit selection and truncation."""
        assert bytes_to_human_readable(size) == expected

    def test_parse_of_formatted_value_is_within_one_unit(self):
        """Test formatting loses at most one step of the chosen unit."""
        for size in (1500, 3_000_000, 5_000_000_000):
            parsed = human_readable_to_bytes(bytes_to_human_readable(size))
            unit = 1024 ** (len(str(size)) // 4)
            assert parsed <= size
            assert size - parsed < max(unit, 1024 ** 3)


class TestFileSize:
    """Test cases for the FileSize value object."""

    def test_from_human_readable(self):
        assert FileSize.from_human_readable("2M").to_bytes() == 2 * 1024 * 1024

    def test_format_human_readable(self):
        assert str(FileSize(3 * 1024 ** 3)) == "3G"
        assert repr(FileSize(10)) == "FileSize(10)"

    def test_rejects_negative_and_non_integer(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            FileSize(-1)

        with pytest.raises(ValueError, match="must be an integer"):
            FileSize(1.5)

    def test_coerce(self):
        """Test coercion from bytes, strings and FileSize values."""
        size = FileSize(100)

        assert FileSize.coerce(size) is size
        assert FileSize.coerce(100) == size
        assert FileSize.coerce("1K") == FileSize(1024)

    def test_comparisons(self):
        small, large = FileSize(10), FileSize(20)

        assert small < large
        assert large >= small
        assert large.exceeds(small)
        assert small.fits_in(large)
        assert not large.fits_in(small)
