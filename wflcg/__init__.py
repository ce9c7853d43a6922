"""WFLCG: fast buffered multi-lane linear congruential generator."""

from wflcg.generator import (
    BUFFER_SIZE,
    COPYRIGHT_STRING,
    INCREMENTS,
    MULTIPLIERS,
    VERSION,
    VERSION_STRING,
    WFLCG,
)

__all__ = [
    "BUFFER_SIZE",
    "COPYRIGHT_STRING",
    "INCREMENTS",
    "MULTIPLIERS",
    "VERSION",
    "VERSION_STRING",
    "WFLCG",
]
