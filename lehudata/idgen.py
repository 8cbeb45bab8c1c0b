"""Time-ordered 63-bit identifiers in the Sonyflake layout."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

BIT_LEN_TIME = 39
BIT_LEN_SEQUENCE = 8
BIT_LEN_MACHINE_ID = 63 - BIT_LEN_TIME - BIT_LEN_SEQUENCE

_TIME_UNIT_NS = 10_000_000
_SEQUENCE_MASK = (1 << BIT_LEN_SEQUENCE) - 1
_MACHINE_MASK = (1 << BIT_LEN_MACHINE_ID) - 1

DEFAULT_START_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Epoch used when turning the time bits of an id back into a moment.
PARSE_EPOCH = datetime(2014, 9, 1, tzinfo=timezone.utc)


def _to_units(nanoseconds: int) -> int:
    return nanoseconds // _TIME_UNIT_NS


def _datetime_ns(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


class Sonyflake:
    """Thread-safe generator of ids made of time, sequence and machine bits."""

    def __init__(
        self,
        machine_id: int = 0,
        start_time: datetime = DEFAULT_START_TIME,
        *,
        clock: Callable[[], int] = time.time_ns,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._start = _to_units(_datetime_ns(start_time))
        if self._start > _to_units(clock()):
            raise ValueError("start time is ahead of now")
        self._machine_id = machine_id & _MACHINE_MASK
        self._elapsed = 0
        self._sequence = _SEQUENCE_MASK
        self._lock = threading.Lock()

    def _current_elapsed(self) -> int:
        return _to_units(self._clock()) - self._start

    def next_id(self) -> int:
        """Return the next unique id."""
        with self._lock:
            current = self._current_elapsed()
            if self._elapsed < current:
                self._elapsed = current
                self._sequence = 0
            else:
                self._sequence = (self._sequence + 1) & _SEQUENCE_MASK
                if self._sequence == 0:
                    self._elapsed += 1
                    overtime = self._elapsed - current
                    remainder = self._clock() % _TIME_UNIT_NS
                    self._sleep((overtime * _TIME_UNIT_NS - remainder) / 1e9)
            if self._elapsed >= 1 << BIT_LEN_TIME:
                raise OverflowError("over the time limit")
            return (
                self._elapsed << (BIT_LEN_SEQUENCE + BIT_LEN_MACHINE_ID)
                | self._sequence << BIT_LEN_MACHINE_ID
                | self._machine_id
            )


def decompose(snowflake_id: int) -> dict[str, int]:
    """Split an id into its parts."""
    return {
        "id": snowflake_id,
        "msb": snowflake_id >> 63,
        "time": snowflake_id >> (BIT_LEN_SEQUENCE + BIT_LEN_MACHINE_ID),
        "sequence": (snowflake_id >> BIT_LEN_MACHINE_ID) & _SEQUENCE_MASK,
        "machine_id": snowflake_id & _MACHINE_MASK,
    }


@dataclass(frozen=True)
class GeneratedId:
    """An id together with the parts it is made of."""

    id: int
    timestamp: datetime
    worker_id: int
    sequence: int


class IdGenerator:
    """Hands out ids and describes them."""

    def __init__(self, sonyflake: Optional[Sonyflake] = None, *, worker_id: int = 0) -> None:
        self._sonyflake = sonyflake if sonyflake is not None else Sonyflake(worker_id)

    def generate_single(self) -> GeneratedId:
        """Generate one id."""
        return self.parse(self._sonyflake.next_id())

    def generate_batch(self, count: int) -> list[GeneratedId]:
        """Generate ``count`` ids in order."""
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.parse(self._sonyflake.next_id()) for _ in range(count)]

    def parse(self, snowflake_id: int) -> GeneratedId:
        """Describe an id, reading its time bits from the parse epoch."""
        parts = decompose(snowflake_id)
        timestamp = PARSE_EPOCH + timedelta(milliseconds=parts["time"] * 10)
        return GeneratedId(
            id=parts["id"],
            timestamp=timestamp,
            worker_id=parts["machine_id"],
            sequence=parts["sequence"],
        )