"""
Motion value types produced by the command parser.
"""

import math
from dataclasses import dataclass
from typing import Union

from motionpath.utils.errors import InvalidRadiusError

from .circle import normalize_orientation


@dataclass(frozen=True)
class Point3:
    """Position in tool space"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Point2:
    """Position in the arc's working plane"""

    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point3()


@dataclass(frozen=True)
class LinearMotion:
    """Straight traversal from the previous cursor position to `end`."""

    start: Point3
    end: Point3


@dataclass(frozen=True)
class CircularMotion:
    """
    Planar arc about `center`, sampled from 0 up to `stop_angle_degrees`.

    `orientation` is the raw I/J/K hint exactly as written in the program;
    use `axis` for the normalized direction.
    """

    center: Point2
    radius: float
    clockwise: bool
    stop_angle_degrees: float
    orientation: tuple[float, float, float] | None = None

    def __post_init__(self):
        if not (math.isfinite(self.radius) and self.radius > 0):
            raise InvalidRadiusError(self.radius)

    @property
    def axis(self) -> tuple[float, float, float]:
        return tuple(float(v) for v in normalize_orientation(self.orientation))  # type: ignore[return-value]


Motion = Union[LinearMotion, CircularMotion]
