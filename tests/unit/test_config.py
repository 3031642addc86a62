"""Tests for settings and logging configuration."""

import tempfile

import pytest
from pydantic import ValidationError

from neo_upload.config import LoggingConfig, UploadSettings
from neo_upload.config.logging_config import get_log_level_from_verbosity


class TestUploadSettings:
    """Test cases for UploadSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NEO_UPLOAD_MAX_FILE_SIZE", raising=False)
        monkeypatch.delenv("NEO_UPLOAD_TMP_DIR", raising=False)

        settings = UploadSettings()

        assert settings.tmp_dir == tempfile.gettempdir()
        assert settings.max_file_size == 100 * 1024 * 1024
        assert settings.chunk_size == 1024 * 1024

    @pytest.mark.parametrize("value, expected", [
        ("2M", 2 * 1024 * 1024),
        ("512", 512),
        (4096, 4096),
    ])
    def test_max_file_size_formats(self, value, expected):
        assert UploadSettings(max_file_size=value).max_file_size == expected

    def test_max_file_size_from_environment(self, monkeypatch):
        monkeypatch.setenv("NEO_UPLOAD_MAX_FILE_SIZE", "10K")

        assert UploadSettings().max_file_size == 10240

    def test_invalid_unit_rejected(self):
        with pytest.raises(ValidationError):
            UploadSettings(max_file_size="7x")

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            UploadSettings(chunk_size=0)


class TestLoggingConfig:
    """Test cases for logging configuration."""

    @pytest.mark.parametrize("verbosity, level", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_build_config(self):
        config = LoggingConfig.build_config("DEBUG", "json")

        assert config["loggers"]["neo_upload"]["level"] == "DEBUG"
        assert config["loggers"]["neo_upload"]["propagate"] is False
        assert config["formatters"]["default"]["format"].startswith('{"time"')
        assert config["loggers"]["multipart"] == {"level": "ERROR"}

    def test_unknown_format_falls_back_to_simple(self):
        config = LoggingConfig.build_config("NORMAL", "xml")

        assert config["formatters"]["default"]["format"] == "%(asctime)s - %(levelname)s - %(message)s"
