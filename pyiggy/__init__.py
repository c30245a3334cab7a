# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
pyiggy - Topic/partition JSON codec for the message broker HTTP API.

Translates the broker's topic responses into immutable, typed models and
back. Handles the irregular parts of the wire format:
- snake_case keys
- Human-readable sizes ("10 MB", decimal units)
- Nullable message expiry
- Microsecond Unix epoch timestamps (converted to local time)
- Optional partition lists

Quick Start:
    >>> from pyiggy import decode_topic_json
    >>>
    >>> topic = decode_topic_json(response.text)
    >>> print(topic.name, topic.size)
    orders 10000000

Encoding:
    >>> from pyiggy import encode_topic
    >>>
    >>> encode_topic(topic)["size"]
    10000000

Configured codec:
    >>> from pyiggy import CodecConfig, TopicCodec
    >>>
    >>> codec = TopicCodec(CodecConfig(sizes_as_quantity=True, sort_topics=True))
    >>> topics = codec.decode_many_json(response.text)

Error handling:
    >>> from pyiggy import DecodingError
    >>>
    >>> try:
    ...     decode_topic_json(body)
    ... except DecodingError as e:
    ...     print(f"Bad field {e.field}: {e}")
"""

from .codec import (
    Presence,
    TopicCodec,
    decode_partition,
    decode_topic,
    decode_topic_json,
    decode_topics,
    decode_topics_json,
    encode_partition,
    encode_topic,
    encode_topic_json,
    encode_topics,
    encode_topics_json,
)
from .exceptions import (
    DecodingError,
    IggyError,
    InvalidJsonError,
    MalformedQuantityError,
    MissingFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from .keys import PARTITION_KEYS, TOPIC_KEYS, PartitionField, TopicField, to_snake_case
from .models import CodecConfig, CompressionAlgorithm, Partition, Topic
from .quantity import UNIT_SCALES, format_quantity, parse_quantity
from .timestamps import from_epoch_micros, to_epoch_micros

__version__ = "0.1.0"
__author__ = "Firefly Software Solutions Inc."
__license__ = "Apache-2.0"

__all__ = [
    # Codec
    "TopicCodec",
    "Presence",
    "decode_topic",
    "encode_topic",
    "decode_partition",
    "encode_partition",
    "decode_topics",
    "encode_topics",
    "decode_topic_json",
    "encode_topic_json",
    "decode_topics_json",
    "encode_topics_json",
    # Keys
    "to_snake_case",
    "TopicField",
    "PartitionField",
    "TOPIC_KEYS",
    "PARTITION_KEYS",
    # Quantities
    "parse_quantity",
    "format_quantity",
    "UNIT_SCALES",
    # Timestamps
    "from_epoch_micros",
    "to_epoch_micros",
    # Configuration
    "CodecConfig",
    # Types (Pydantic models)
    "Topic",
    "Partition",
    "CompressionAlgorithm",
    # Exceptions
    "IggyError",
    "DecodingError",
    "InvalidJsonError",
    "MissingFieldError",
    "TypeMismatchError",
    "MalformedQuantityError",
    "UnknownEnumValueError",
]
