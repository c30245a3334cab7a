# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Wire key mapping for topic and partition fields.

Model fields are identified by PascalCase names (``CreatedAt``); the
broker's HTTP API uses snake_case keys (``created_at``). The mapping is
declared once per entity so the encoder and decoder always agree.
"""

from __future__ import annotations

import re
from enum import Enum

_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(identifier: str) -> str:
    """
    Convert a model field identifier to its wire key.

    Examples:
        >>> to_snake_case("CreatedAt")
        'created_at'
        >>> to_snake_case("HTTPCode")
        'http_code'
    """
    return _BOUNDARY.sub("_", identifier).lower()


class TopicField(str, Enum):
    """Fields of a topic object."""

    ID = "Id"
    NAME = "Name"
    SIZE = "Size"
    MESSAGE_EXPIRY = "MessageExpiry"
    COMPRESSION_ALGORITHM = "CompressionAlgorithm"
    CREATED_AT = "CreatedAt"
    MESSAGES_COUNT = "MessagesCount"
    PARTITIONS_COUNT = "PartitionsCount"
    REPLICATION_FACTOR = "ReplicationFactor"
    MAX_TOPIC_SIZE = "MaxTopicSize"
    PARTITIONS = "Partitions"

    @property
    def key(self) -> str:
        return TOPIC_KEYS[self]


class PartitionField(str, Enum):
    """Fields of a partition object."""

    ID = "Id"
    CREATED_AT = "CreatedAt"
    SEGMENTS_COUNT = "SegmentsCount"
    CURRENT_OFFSET = "CurrentOffset"
    MESSAGES_COUNT = "MessagesCount"
    SIZE = "Size"

    @property
    def key(self) -> str:
        return PARTITION_KEYS[self]


TOPIC_KEYS: dict[TopicField, str] = {f: to_snake_case(f.value) for f in TopicField}
PARTITION_KEYS: dict[PartitionField, str] = {f: to_snake_case(f.value) for f in PartitionField}
