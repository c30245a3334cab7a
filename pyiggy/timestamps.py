# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Microsecond Unix epoch conversions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


def from_epoch_micros(micros: int) -> datetime:
    """Convert a UTC microsecond epoch to an aware datetime in local time."""
    return (EPOCH + timedelta(microseconds=micros)).astimezone()


def to_epoch_micros(moment: datetime) -> int:
    """
    Convert a datetime to a microsecond Unix epoch.

    Naive datetimes are interpreted as local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (moment - EPOCH) // _MICROSECOND
