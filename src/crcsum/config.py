"""Configuration models for crcsum."""

from pydantic import BaseModel, Field, ConfigDict

from .checksums import DEFAULT_MODE_NAME
from .common import LoggingConfig

CHUNK_SIZE = 65536  # 64 KB reads


class ChecksumConfig(BaseModel):
    """Checksum run defaults. Command-line flags take precedence."""

    model_config = ConfigDict(extra='forbid')

    mode: str = Field(
        default=DEFAULT_MODE_NAME,
        description="Checksum mode: crc32, crc32-ieee, crc64-iso or crc64-ecma"
    )
    chunk_size: int = Field(
        default=CHUNK_SIZE,
        ge=1,
        description="Number of bytes read from a file per update"
    )


class CrcSumConfig(BaseModel):
    """Root configuration for crcsum."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)
