"""
Program driver: load a .cmmd file, parse it, discretize every motion.
"""

import logging
import os
from dataclasses import dataclass, field

import numpy as np

from motionpath.config import ARC_STEP_DEG, OUTPUT_PRECISION, PROGRAM_EXTENSION
from motionpath.motion.circle import interpolate_circular
from motionpath.motion.linear import interpolate_linear
from motionpath.motion.parser import CommandParser, Diagnostic
from motionpath.motion.types import CircularMotion, LinearMotion, Motion
from motionpath.utils.errors import MotionError, ProgramIOError

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    """A motion together with its discretized waypoints"""

    motion: Motion
    waypoints: np.ndarray


@dataclass
class ProgramResult:
    """Everything produced by one run over a program"""

    segments: list[Segment] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def waypoint_count(self) -> int:
        return sum(len(s.waypoints) for s in self.segments)


def has_program_extension(path: str) -> bool:
    """True if `path` ends in exactly PROGRAM_EXTENSION"""
    return os.path.splitext(path)[1] == PROGRAM_EXTENSION


def load_program(path: str) -> list[str]:
    """
    Read all lines of a program file.

    Raises:
        ProgramIOError: the file cannot be opened, read or decoded
    """
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ProgramIOError(path, str(e)) from e


def discretize(motion: Motion, linear_mode: str | None = None, arc_step_deg: float = ARC_STEP_DEG) -> np.ndarray:
    """Dispatch a motion to its interpolator; (N, 3) for linear, (N, 2) for arcs"""
    if isinstance(motion, LinearMotion):
        return interpolate_linear(motion.start.as_tuple(), motion.end.as_tuple(), mode=linear_mode)
    if isinstance(motion, CircularMotion):
        return interpolate_circular(
            motion.center.as_tuple(),
            motion.radius,
            motion.clockwise,
            motion.stop_angle_degrees,
            orientation=motion.orientation,
            step_deg=arc_step_deg,
        )
    raise TypeError(f"Unsupported motion type: {type(motion).__name__}")


def run_lines(lines: list[str], linear_mode: str | None = None) -> ProgramResult:
    """Parse and discretize program lines in order"""
    parser = CommandParser()
    motions = parser.parse_program(lines)
    result = ProgramResult(diagnostics=list(parser.errors))

    for motion in motions:
        try:
            waypoints = discretize(motion, linear_mode=linear_mode)
        except MotionError as e:
            diagnostic = Diagnostic(kind=e.kind, message=e.original_message, raw_line=describe_motion(motion))
            logger.warning(str(diagnostic))
            result.diagnostics.append(diagnostic)
            continue
        result.segments.append(Segment(motion=motion, waypoints=waypoints))

    logger.info(
        f"Discretized {len(result.segments)} motions into {result.waypoint_count} waypoints "
        f"({len(result.diagnostics)} diagnostics)"
    )
    return result


def run_program(path: str, linear_mode: str | None = None) -> ProgramResult:
    """
    Load a program file and discretize every accepted motion.

    Raises:
        ProgramIOError: the file cannot be read; no partial result is returned
    """
    lines = load_program(path)
    logger.info(f"Loaded {len(lines)} lines from {path}")
    return run_lines(lines, linear_mode=linear_mode)


def _fmt(values, precision: int) -> str:
    return ", ".join(f"{float(v):.{precision}f}" for v in values)


def describe_motion(motion: Motion, precision: int = OUTPUT_PRECISION) -> str:
    """One-line header for a motion"""
    if isinstance(motion, LinearMotion):
        return f"LIN ({_fmt(motion.start.as_tuple(), precision)}) -> ({_fmt(motion.end.as_tuple(), precision)})"
    direction = "CW" if motion.clockwise else "CCW"
    return (
        f"{direction} center=({_fmt(motion.center.as_tuple(), precision)}) "
        f"r={motion.radius:.{precision}f} stop={motion.stop_angle_degrees:.{precision}f}deg "
        f"axis=({_fmt(motion.axis, precision)})"
    )


def render_segment(segment: Segment, precision: int = OUTPUT_PRECISION) -> list[str]:
    """Header line followed by one formatted line per waypoint"""
    lines = [describe_motion(segment.motion, precision)]
    lines.extend(_fmt(point, precision) for point in segment.waypoints)
    return lines
