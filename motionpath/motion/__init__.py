"""
Motion model and trajectory discretizer.

Main components:
- types.py: Point/motion value types
- parser.py: Command line -> Motion, with per-line diagnostics
- linear.py: Straight-line discretizer
- circle.py: Circular arc discretizer and orientation normalization
"""

from .circle import interpolate_circular, normalize_orientation
from .linear import interpolate_linear
from .parser import CommandParser, Diagnostic, ParsedLine, parse_command
from .types import ORIGIN, CircularMotion, LinearMotion, Motion, Point2, Point3

__all__ = [
    "Point2",
    "Point3",
    "ORIGIN",
    "LinearMotion",
    "CircularMotion",
    "Motion",
    "CommandParser",
    "Diagnostic",
    "ParsedLine",
    "parse_command",
    "interpolate_linear",
    "interpolate_circular",
    "normalize_orientation",
]
