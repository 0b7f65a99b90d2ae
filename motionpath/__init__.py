"""
motionpath Python Package

Parses .cmmd motion programs (LIN / CW / CCW commands) and discretizes each
motion into Cartesian waypoints.

Key components:
- CommandParser / parse_command: text lines to Motion values
- interpolate_linear / interpolate_circular: Motion geometry to waypoint arrays
- run_program: read a .cmmd file and discretize every accepted motion
"""

from ._version import __version__
from .motion import (
    CircularMotion,
    CommandParser,
    LinearMotion,
    Point2,
    Point3,
    interpolate_circular,
    interpolate_linear,
    parse_command,
)
from .program import ProgramResult, Segment, discretize, load_program, run_program

__all__ = [
    "__version__",
    "Point2",
    "Point3",
    "LinearMotion",
    "CircularMotion",
    "CommandParser",
    "parse_command",
    "interpolate_linear",
    "interpolate_circular",
    "discretize",
    "load_program",
    "run_program",
    "ProgramResult",
    "Segment",
]
