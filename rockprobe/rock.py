"""Mineral rocks collected by the probes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rock:
    """A mineral rock with an identifier, a weight and a value."""

    id: int
    weight: int
    value: int