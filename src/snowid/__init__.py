"""Time-ordered 64-bit snowflake identifiers."""

from snowid.clock import Clock, SystemClock
from snowid.config import GeneratorSettings, generator_from_settings, load_settings
from snowid.errors import ClockMovedBackwards, InvalidConfiguration, SnowflakeError
from snowid.generator import IdGenerator
from snowid.layout import EPOCH, SnowflakeParts, compose, decompose

__all__ = [
    "Clock",
    "ClockMovedBackwards",
    "EPOCH",
    "GeneratorSettings",
    "IdGenerator",
    "InvalidConfiguration",
    "SnowflakeError",
    "SnowflakeParts",
    "SystemClock",
    "compose",
    "decompose",
    "generator_from_settings",
    "load_settings",
]
