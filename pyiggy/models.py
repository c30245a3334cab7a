# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Pydantic models for the pyiggy topic codec.

Provides validated, immutable data models for topics, partitions and
codec configuration.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .quantity import U64_MAX


class CompressionAlgorithm(str, Enum):
    """Compression applied by the broker to a topic's messages."""
    NONE = "none"
    GZIP = "gzip"

    @classmethod
    def from_wire(cls, value: str) -> CompressionAlgorithm | None:
        """Match a wire value case-insensitively; None when unrecognized."""
        return _COMPRESSION_BY_NAME.get(value.lower())


_COMPRESSION_BY_NAME: dict[str, CompressionAlgorithm] = {
    algorithm.value: algorithm for algorithm in CompressionAlgorithm
}


# ============================================================================
# Resource Models
# ============================================================================


class Partition(BaseModel):
    """A partition within a topic."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    created_at: datetime
    segments_count: int = Field(default=0, ge=0)
    current_offset: int = Field(default=0, ge=0)
    messages_count: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0, le=U64_MAX, description="Size in bytes")


class Topic(BaseModel):
    """A topic resource as reported by the broker's HTTP API."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    name: str
    created_at: datetime
    compression_algorithm: CompressionAlgorithm = CompressionAlgorithm.NONE
    size: int = Field(default=0, ge=0, le=U64_MAX, description="Size in bytes")
    message_expiry: int = Field(default=0, ge=0, description="0 means messages never expire")
    messages_count: int = Field(default=0, ge=0)
    partitions_count: int = Field(default=0, ge=0)
    replication_factor: int = Field(default=1, ge=0, le=255)
    max_topic_size: int = Field(default=0, ge=0, le=U64_MAX, description="Size in bytes")
    partitions: tuple[Partition, ...] | None = Field(
        default=None,
        description="None when the server did not report partitions",
    )

    @property
    def has_partitions(self) -> bool:
        """Whether the server reported partitions (possibly none)."""
        return self.partitions is not None

    @property
    def expires(self) -> bool:
        """Whether messages in this topic expire."""
        return self.message_expiry != 0


# ============================================================================
# Configuration Models
# ============================================================================


class CodecConfig(BaseModel):
    """Configuration for the topic codec."""

    model_config = ConfigDict(validate_assignment=True)

    sizes_as_quantity: bool = Field(
        default=False,
        description="Encode size fields as '<n> <unit>' strings instead of raw bytes",
    )
    null_message_expiry: bool = Field(
        default=False,
        description="Encode a zero message_expiry as null",
    )
    sort_topics: bool = False
    json_indent: int | None = Field(default=None, ge=0, le=8)
