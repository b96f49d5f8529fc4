"""Bit layout of a snowflake identifier."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

# Start of the time field (2016-11-26 13:21:05.631 UTC). Never change it.
EPOCH = 1480166465631

SEQUENCE_BITS = 12
MACHINE_BITS = 5
DATACENTER_BITS = 5

MAX_SEQUENCE = ~(-1 << SEQUENCE_BITS)
MAX_MACHINE_ID = ~(-1 << MACHINE_BITS)
MAX_DATACENTER_ID = ~(-1 << DATACENTER_BITS)

MACHINE_SHIFT = SEQUENCE_BITS
DATACENTER_SHIFT = MACHINE_SHIFT + MACHINE_BITS
TIMESTAMP_SHIFT = DATACENTER_SHIFT + DATACENTER_BITS


class SnowflakeParts(BaseModel):
    """Fields recovered from a snowflake."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(description="Unix time in milliseconds")
    datacenter_id: int = Field(ge=0, le=MAX_DATACENTER_ID)
    machine_id: int = Field(ge=0, le=MAX_MACHINE_ID)
    sequence: int = Field(ge=0, le=MAX_SEQUENCE)

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)


def compose(timestamp: int, datacenter_id: int, machine_id: int, sequence: int) -> int:
    """Pack the four fields into one identifier."""
    return (
        ((timestamp - EPOCH) << TIMESTAMP_SHIFT)
        | (datacenter_id << DATACENTER_SHIFT)
        | (machine_id << MACHINE_SHIFT)
        | sequence
    )


def decompose(snowflake: int) -> SnowflakeParts:
    """Split an identifier back into its fields."""
    if snowflake < 0:
        raise ValueError(f"Snowflake must be non-negative, got {snowflake}")
    return SnowflakeParts(
        timestamp=(snowflake >> TIMESTAMP_SHIFT) + EPOCH,
        datacenter_id=(snowflake >> DATACENTER_SHIFT) & MAX_DATACENTER_ID,
        machine_id=(snowflake >> MACHINE_SHIFT) & MAX_MACHINE_ID,
        sequence=snowflake & MAX_SEQUENCE,
    )
