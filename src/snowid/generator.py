"""Thread-safe snowflake id generator."""

import logging
import threading

from snowid.clock import Clock, SystemClock
from snowid.errors import ClockMovedBackwards, InvalidConfiguration
from snowid.layout import (
    MAX_DATACENTER_ID,
    MAX_MACHINE_ID,
    MAX_SEQUENCE,
    SnowflakeParts,
    compose,
    decompose,
)

logger = logging.getLogger(__name__)


def _check_range(name: str, value: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > maximum:
        raise InvalidConfiguration(
            f"{name} can't be greater than {maximum} or less than 0, got {value}"
        )


class IdGenerator:
    """
    Twitter Snowflake-style ID generator.

    Structure:
    - 41 bits timestamp (milliseconds since EPOCH)
    - 5 bits datacenter ID
    - 5 bits machine ID
    - 12 bits sequence number

    One instance per (datacenter, machine) pair; share it between threads.
    """

    def __init__(
        self, datacenter_id: int, machine_id: int, clock: Clock | None = None
    ) -> None:
        _check_range("datacenter_id", datacenter_id, MAX_DATACENTER_ID)
        _check_range("machine_id", machine_id, MAX_MACHINE_ID)

        self._datacenter_id = datacenter_id
        self._machine_id = machine_id
        self._clock = clock or SystemClock()
        self._sequence = 0
        self._last_timestamp = -1
        self._lock = threading.Lock()

        logger.debug(
            "Created id generator for datacenter %d, machine %d",
            datacenter_id,
            machine_id,
        )

    def __repr__(self) -> str:
        return (
            f"IdGenerator(datacenter_id={self._datacenter_id}, "
            f"machine_id={self._machine_id})"
        )

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    @property
    def machine_id(self) -> int:
        return self._machine_id

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def last_timestamp(self) -> int:
        return self._last_timestamp

    def _wait_next_millis(self) -> int:
        timestamp = self._clock.millis()
        while timestamp <= self._last_timestamp:
            timestamp = self._clock.millis()
        return timestamp

    def next_id(self) -> int:
        """Return the next identifier.

        Blocks until the next millisecond when the sequence for the current
        one is exhausted. Raises ClockMovedBackwards if the clock reports a
        time earlier than the last issued id; state is left untouched then.
        """
        with self._lock:
            timestamp = self._clock.millis()

            if timestamp < self._last_timestamp:
                logger.warning(
                    "Clock moved backwards: last=%d now=%d",
                    self._last_timestamp,
                    timestamp,
                )
                raise ClockMovedBackwards(self._last_timestamp, timestamp)

            if timestamp == self._last_timestamp:
                self._sequence = (self._sequence + 1) & MAX_SEQUENCE
                if self._sequence == 0:
                    logger.debug("Sequence exhausted at %d, waiting for next ms", timestamp)
                    timestamp = self._wait_next_millis()
            else:
                self._sequence = 0

            self._last_timestamp = timestamp

            return compose(
                timestamp, self._datacenter_id, self._machine_id, self._sequence
            )

    @staticmethod
    def decompose(snowflake: int) -> SnowflakeParts:
        return decompose(snowflake)
