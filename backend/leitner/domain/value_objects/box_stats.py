"""Box statistics value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoxStats:
    """Immutable value object representing how many cards sit in one box."""

    box: int
    count: int
