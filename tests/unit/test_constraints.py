"""Tests for validation constraints."""

import pytest

from neo_upload.application.validators import (
    ExtensionConstraint,
    MimeTypeConstraint,
    SizeConstraint,
)
from neo_upload.core.entities import UploadedFile
from neo_upload.core.exceptions import InvalidUnit
from neo_upload.core.protocols import Constraint
from neo_upload.core.value_objects import FileSize


@pytest.fixture
def make_file(make_uploads, stub_detector):
    """Factory building an UploadedFile for a single 'file' field."""

    def _make_file(name="photo.png", size=None, detector=None, **record):
        uploads = make_uploads(file=dict(name=name, size=size, **record))
        return UploadedFile("file", files=uploads, mime_detector=detector or stub_detector)

    return _make_file


class TestExtensionConstraint:
    """Test cases for ExtensionConstraint."""

    def test_disallowed_extension(self, make_file):
        """Test a file outside the allowlist gets the default message."""
        file = make_file(name="animation.gif")

        ExtensionConstraint({"jpg", "png"}).validate(file)

        assert file.get_errors() == ["Invalid extension"]

    def test_allowed_extension(self, make_file):
        file = make_file(name="photo.png")

        ExtensionConstraint({"jpg", "png"}).validate(file)

        assert file.get_errors() == []

    def test_uppercase_file_extension_is_lowercased(self, make_file):
        """Test the file extension is lowercased before comparison."""
        file = make_file(name="photo.PNG")

        ExtensionConstraint(["png"]).validate(file)

        assert file.get_errors() == []

    def test_uppercase_allowed_entry_does_not_match(self, make_file):
        """Test allowlist entries are compared as given."""
        file = make_file(name="photo.png")

        ExtensionConstraint(["PNG"]).validate(file)

        assert file.get_errors() == ["Invalid extension"]

    def test_file_without_extension(self, make_file):
        file = make_file(name="README")

        ExtensionConstraint({"txt"}).validate(file)

        assert file.get_errors() == ["Invalid extension"]

    def test_custom_message(self, make_file):
        file = make_file(name="script.exe")

        ExtensionConstraint({"pdf"}, message="Only PDF documents are accepted").validate(file)

        assert file.get_errors() == ["Only PDF documents are accepted"]

    def test_empty_message_falls_back_to_default(self, make_file):
        file = make_file(name="script.exe")

        ExtensionConstraint({"pdf"}, message="").validate(file)

        assert file.get_errors() == ["Invalid extension"]

    def test_empty_allowlist_rejected(self):
        with pytest.raises(ValueError, match="At least one allowed extension"):
            ExtensionConstraint([])


class TestMimeTypeConstraint:
    """Test cases for MimeTypeConstraint."""

    def test_allowed_mime_type(self, make_file, detector_factory):
        file = make_file(detector=detector_factory("image/png"))

        MimeTypeConstraint({"image/png", "image/jpeg"}).validate(file)

        assert file.get_errors() == []

    def test_disallowed_mime_type(self, make_file, detector_factory):
        """Test the sniffed type is used, not the file name."""
        file = make_file(name="photo.png", detector=detector_factory("application/x-dosexec"))

        MimeTypeConstraint({"image/png"}).validate(file)

        assert file.get_errors() == ["Invalid MIME type"]

    def test_undetectable_content_is_rejected(self, make_file, detector_factory):
        file = make_file(detector=detector_factory(""))

        MimeTypeConstraint({"image/png"}, message="Unsupported file type").validate(file)

        assert file.get_errors() == ["Unsupported file type"]


class TestSizeConstraint:
    """Test cases for SizeConstraint."""

    @pytest.mark.parametrize("size, expected", [
        (1500, ["The file size is too large"]),
        (50, ["The file size is too small"]),
        (500, []),
        (1000, []),
        (100, []),
    ])
    def test_range(self, make_file, size, expected):
        """Test inclusive bounds and which message fires."""
        file = make_file(size=size)

        SizeConstraint(max=1000, min=100).validate(file)

        assert file.get_errors() == expected

    def test_max_checked_before_min(self, make_file):
        """Test only the max message fires when both bounds are violated."""
        file = make_file(size=500)

        SizeConstraint(max=100, min=1000).validate(file)

        assert file.get_errors() == ["The file size is too large"]

    def test_human_readable_bounds(self):
        constraint = SizeConstraint("2M", "10K")

        assert constraint.max == 2 * 1024 * 1024
        assert constraint.min == 10 * 1024

    def test_file_size_bounds(self):
        constraint = SizeConstraint(FileSize(2048))

        assert constraint.max == 2048
        assert constraint.min == 0

    def test_invalid_unit(self):
        with pytest.raises(InvalidUnit):
            SizeConstraint("7x")

    def test_custom_messages(self, make_file):
        constraint = SizeConstraint(
            "1K",
            "100B",
            max_message="Keep it under 1K",
            min_message="Suspiciously small",
        )

        large = make_file(size=4096)
        small = make_file(size=10)
        constraint.validate(large)
        constraint.validate(small)

        assert large.get_errors() == ["Keep it under 1K"]
        assert small.get_errors() == ["Suspiciously small"]


@pytest.mark.parametrize("constraint", [
    ExtensionConstraint({"png"}),
    MimeTypeConstraint({"image/png"}),
    SizeConstraint("1M"),
])
def test_constraints_satisfy_protocol(constraint):
    assert isinstance(constraint, Constraint)
