# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Topic/partition JSON codec.

Decoding turns the broker's JSON objects (as produced by ``json.loads``)
into immutable Topic and Partition models; encoding turns models back
into JSON-ready dicts.

Wire conventions:
- Keys are snake_case (see ``pyiggy.keys``)
- Size fields are quantity strings ("10 MB") or null on the way in,
  raw byte counts on the way out
- Timestamps are microsecond Unix epochs
- ``message_expiry`` may be null, meaning "never expires" (decoded as 0)
- ``partitions`` may be absent or null, meaning "not reported"

Decoding is all-or-nothing: the first fault aborts the call.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Mapping

from loguru import logger

from .exceptions import (
    DecodingError,
    InvalidJsonError,
    MissingFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from .keys import PartitionField, TopicField
from .models import CodecConfig, CompressionAlgorithm, Partition, Topic
from .quantity import U64_MAX, format_quantity, parse_quantity
from .timestamps import from_epoch_micros, to_epoch_micros

U8_MAX = 2**8 - 1
U32_MAX = 2**32 - 1

DEFAULT_CONFIG = CodecConfig()


class Presence(Enum):
    """State of an optional wire field."""
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


# =============================================================================
# Field extraction
# =============================================================================

def _lookup(obj: Mapping[str, Any], key: str) -> tuple[Presence, Any]:
    if key not in obj:
        return Presence.ABSENT, None
    value = obj[key]
    if value is None:
        return Presence.NULL, None
    return Presence.VALUE, value


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require(obj: Mapping[str, Any], key: str) -> Any:
    presence, value = _lookup(obj, key)
    if presence is Presence.ABSENT:
        raise MissingFieldError(key)
    return value


def _unsigned(obj: Mapping[str, Any], key: str, maximum: int = U64_MAX) -> int:
    value = _require(obj, key)
    if not _is_integer(value) or not 0 <= value <= maximum:
        raise TypeMismatchError(key, f"integer in 0..{maximum}", value)
    return value


def _string(obj: Mapping[str, Any], key: str) -> str:
    value = _require(obj, key)
    if not isinstance(value, str):
        raise TypeMismatchError(key, "string", value)
    return value


def _timestamp(obj: Mapping[str, Any], key: str) -> datetime:
    micros = _unsigned(obj, key)
    try:
        return from_epoch_micros(micros)
    except (OverflowError, ValueError):
        raise TypeMismatchError(key, "microsecond timestamp", micros) from None


def _quantity(obj: Mapping[str, Any], key: str) -> int:
    presence, value = _lookup(obj, key)
    if presence is not Presence.VALUE:
        return parse_quantity(None)
    if not isinstance(value, str):
        raise TypeMismatchError(key, "quantity string", value)
    return parse_quantity(value, key)


def _object(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(name, "object", value)
    return value


# =============================================================================
# Partition
# =============================================================================

def decode_partition(obj: Any) -> Partition:
    """
    Decode a partition object.

    Raises:
        MissingFieldError: If a required key is absent
        TypeMismatchError: If a value has the wrong JSON kind
        MalformedQuantityError: If ``size`` is not a valid quantity
    """
    obj = _object(obj, "partition")
    return Partition(
        id=_unsigned(obj, PartitionField.ID.key, U32_MAX),
        created_at=_timestamp(obj, PartitionField.CREATED_AT.key),
        segments_count=_unsigned(obj, PartitionField.SEGMENTS_COUNT.key, U32_MAX),
        current_offset=_unsigned(obj, PartitionField.CURRENT_OFFSET.key),
        messages_count=_unsigned(obj, PartitionField.MESSAGES_COUNT.key),
        size=_quantity(obj, PartitionField.SIZE.key),
    )


def _encode_size(size: int, config: CodecConfig) -> int | str:
    if config.sizes_as_quantity:
        return format_quantity(size)
    return size


def encode_partition(partition: Partition, config: CodecConfig | None = None) -> dict[str, Any]:
    """Encode a partition to a JSON-ready dict."""
    if config is None:
        config = DEFAULT_CONFIG
    return {
        PartitionField.ID.key: partition.id,
        PartitionField.CREATED_AT.key: to_epoch_micros(partition.created_at),
        PartitionField.SEGMENTS_COUNT.key: partition.segments_count,
        PartitionField.CURRENT_OFFSET.key: partition.current_offset,
        PartitionField.MESSAGES_COUNT.key: partition.messages_count,
        PartitionField.SIZE.key: _encode_size(partition.size, config),
    }


# =============================================================================
# Topic
# =============================================================================

def _compression(obj: Mapping[str, Any]) -> CompressionAlgorithm:
    key = TopicField.COMPRESSION_ALGORITHM.key
    value = _string(obj, key)
    algorithm = CompressionAlgorithm.from_wire(value)
    if algorithm is None:
        raise UnknownEnumValueError(value, key, [a.value for a in CompressionAlgorithm])
    return algorithm


def _message_expiry(obj: Mapping[str, Any]) -> int:
    key = TopicField.MESSAGE_EXPIRY.key
    presence, value = _lookup(obj, key)
    if presence is Presence.ABSENT:
        raise MissingFieldError(key)
    if presence is Presence.NULL:
        return 0
    if not _is_integer(value) or not 0 <= value <= U64_MAX:
        raise TypeMismatchError(key, "null or integer", value)
    return value


def _partitions(obj: Mapping[str, Any]) -> tuple[Partition, ...] | None:
    key = TopicField.PARTITIONS.key
    presence, value = _lookup(obj, key)
    if presence is not Presence.VALUE:
        return None
    if not isinstance(value, list):
        raise TypeMismatchError(key, "array", value)

    partitions = []
    for index, element in enumerate(value):
        _object(element, f"{key}[{index}]")
        try:
            partitions.append(decode_partition(element))
        except DecodingError as e:
            raise e.with_path(f"{key}[{index}]") from e
    return tuple(partitions)


def _decode_topic(obj: Any) -> Topic:
    obj = _object(obj, "topic")
    return Topic(
        id=_unsigned(obj, TopicField.ID.key, U32_MAX),
        name=_string(obj, TopicField.NAME.key),
        size=_quantity(obj, TopicField.SIZE.key),
        message_expiry=_message_expiry(obj),
        compression_algorithm=_compression(obj),
        created_at=_timestamp(obj, TopicField.CREATED_AT.key),
        messages_count=_unsigned(obj, TopicField.MESSAGES_COUNT.key),
        partitions_count=_unsigned(obj, TopicField.PARTITIONS_COUNT.key, U32_MAX),
        replication_factor=_unsigned(obj, TopicField.REPLICATION_FACTOR.key, U8_MAX),
        max_topic_size=_unsigned(obj, TopicField.MAX_TOPIC_SIZE.key),
        partitions=_partitions(obj),
    )


def decode_topic(obj: Any) -> Topic:
    """
    Decode a topic object.

    Unknown keys are ignored. ``partitions`` absent or null decodes to
    None; an empty array decodes to an empty tuple.

    Raises:
        MissingFieldError: If a required key is absent
        TypeMismatchError: If a value has the wrong JSON kind
        MalformedQuantityError: If a size field is not a valid quantity
        UnknownEnumValueError: If ``compression_algorithm`` is unrecognized
    """
    try:
        topic = _decode_topic(obj)
    except DecodingError as e:
        logger.debug("Topic decode failed at {}: {}", e.field, e.reason)
        raise
    logger.debug(
        "Decoded topic {} ({} partitions)",
        topic.id,
        "unreported" if topic.partitions is None else len(topic.partitions),
    )
    return topic


def encode_topic(topic: Topic, config: CodecConfig | None = None) -> dict[str, Any]:
    """
    Encode a topic to a JSON-ready dict.

    Sizes are emitted as raw byte counts unless ``config.sizes_as_quantity``
    is set. The ``partitions`` key is omitted when partitions are None.
    """
    if config is None:
        config = DEFAULT_CONFIG
    expiry: int | None = topic.message_expiry
    if config.null_message_expiry and not topic.message_expiry:
        expiry = None

    out: dict[str, Any] = {
        TopicField.ID.key: topic.id,
        TopicField.NAME.key: topic.name,
        TopicField.SIZE.key: _encode_size(topic.size, config),
        TopicField.MESSAGE_EXPIRY.key: expiry,
        TopicField.COMPRESSION_ALGORITHM.key: topic.compression_algorithm.value,
        TopicField.CREATED_AT.key: to_epoch_micros(topic.created_at),
        TopicField.MESSAGES_COUNT.key: topic.messages_count,
        TopicField.PARTITIONS_COUNT.key: topic.partitions_count,
        TopicField.REPLICATION_FACTOR.key: topic.replication_factor,
        TopicField.MAX_TOPIC_SIZE.key: topic.max_topic_size,
    }
    if topic.partitions is not None:
        out[TopicField.PARTITIONS.key] = [encode_partition(p, config) for p in topic.partitions]

    logger.debug("Encoded topic {}", topic.id)
    return out


# =============================================================================
# Topic lists
# =============================================================================

def decode_topics(array: Any, config: CodecConfig | None = None) -> list[Topic]:
    """Decode the array returned by the "get topics" endpoint."""
    if config is None:
        config = DEFAULT_CONFIG
    if not isinstance(array, list):
        raise TypeMismatchError("topics", "array", array)

    topics = []
    for index, element in enumerate(array):
        _object(element, f"[{index}]")
        try:
            topics.append(_decode_topic(element))
        except DecodingError as e:
            logger.debug("Topic list decode failed at [{}].{}: {}", index, e.field, e.reason)
            raise e.with_path(f"[{index}]") from e

    if config.sort_topics:
        topics.sort(key=lambda t: t.id)
    logger.debug("Decoded {} topics", len(topics))
    return topics


def encode_topics(topics: Iterable[Topic], config: CodecConfig | None = None) -> list[dict[str, Any]]:
    """Encode a sequence of topics to a list of JSON-ready dicts."""
    return [encode_topic(t, config) for t in topics]


# =============================================================================
# JSON text
# =============================================================================

def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        logger.debug("Response body is not valid JSON: {}", e)
        raise InvalidJsonError(str(e)) from e


def _dumps(value: Any, config: CodecConfig) -> str:
    return json.dumps(value, indent=config.json_indent)


def decode_topic_json(text: str | bytes) -> Topic:
    """Decode a topic from JSON text."""
    return decode_topic(_loads(text))


def encode_topic_json(topic: Topic, config: CodecConfig | None = None) -> str:
    """Encode a topic to JSON text."""
    if config is None:
        config = DEFAULT_CONFIG
    return _dumps(encode_topic(topic, config), config)


def decode_topics_json(text: str | bytes, config: CodecConfig | None = None) -> list[Topic]:
    """Decode a list of topics from JSON text."""
    return decode_topics(_loads(text), config)


def encode_topics_json(topics: Iterable[Topic], config: CodecConfig | None = None) -> str:
    """Encode a list of topics to JSON text."""
    if config is None:
        config = DEFAULT_CONFIG
    return _dumps(encode_topics(topics, config), config)


class TopicCodec:
    """
    Topic codec bound to a configuration.

    Example:
        >>> codec = TopicCodec(CodecConfig(sizes_as_quantity=True))
        >>> topic = codec.decode_json(body)
        >>> codec.encode(topic)["size"]
        '10 MB'
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def decode(self, obj: Any) -> Topic:
        return decode_topic(obj)

    def encode(self, topic: Topic) -> dict[str, Any]:
        return encode_topic(topic, self.config)

    def decode_json(self, text: str | bytes) -> Topic:
        return decode_topic_json(text)

    def encode_json(self, topic: Topic) -> str:
        return encode_topic_json(topic, self.config)

    def decode_many(self, array: Any) -> list[Topic]:
        return decode_topics(array, self.config)

    def decode_many_json(self, text: str | bytes) -> list[Topic]:
        return decode_topics_json(text, self.config)

    def encode_many_json(self, topics: Iterable[Topic]) -> str:
        return encode_topics_json(topics, self.config)
