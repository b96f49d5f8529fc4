"""Exceptions raised by snowid."""


class SnowflakeError(Exception):
    """Base class for all snowid errors."""


class InvalidConfiguration(SnowflakeError, ValueError):
    """A datacenter or machine id is outside its valid range."""


class ClockMovedBackwards(SnowflakeError, RuntimeError):
    """The clock returned a time earlier than the last issued id."""

    def __init__(self, last_timestamp: int, current_timestamp: int) -> None:
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            f"Clock moved backwards by {self.drift}ms. Refusing to generate id"
        )

    @property
    def drift(self) -> int:
        return self.last_timestamp - self.current_timestamp
