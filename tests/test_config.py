"""Tests for crcsum configuration models."""

import pytest
from pydantic import ValidationError

from crcsum.config import CHUNK_SIZE, ChecksumConfig, CrcSumConfig


class TestChecksumConfig:
    """Tests for ChecksumConfig."""

    def test_defaults(self):
        config = ChecksumConfig()

        assert config.mode == "crc64-ecma"
        assert config.chunk_size == CHUNK_SIZE == 65536

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValidationError):
            ChecksumConfig(chunk_size=0)

    def test_mode_not_validated_here(self):
        """Mode names are resolved later so a bad one maps to exit code 1."""
        assert ChecksumConfig(mode="sha1").mode == "sha1"


class TestCrcSumConfig:
    """Tests for the root configuration."""

    def test_defaults(self):
        config = CrcSumConfig()

        assert config.logging.level == "WARNING"
        assert config.checksum.mode == "crc64-ecma"

    def test_rejects_unknown_sections(self):
        with pytest.raises(ValidationError):
            CrcSumConfig(database={})
