"""
Command parser for .cmmd motion programs.

Turns one line of text into a validated Motion. Supported commands:

    LIN X<x> Y<y> Z<z>
    CW|CCW X<cx> Y<cy> R<radius> [I<i> J<j> [K<k>]] A<stop angle, degrees>

Every numeric field is a one-letter tag followed by a number. Fields are
read by position; a field whose tag does not match its position counts as
an invalid numeric field and reads as 0.0.
"""

import logging
import math
import re
from dataclasses import dataclass, field

from motionpath import config as cfg
from motionpath.utils.errors import ErrorKind, InvalidRadiusError

from .types import ORIGIN, CircularMotion, LinearMotion, Motion, Point2, Point3

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A recovered problem on one program line"""

    kind: ErrorKind
    message: str
    line_number: int | None = None
    raw_line: str = ""

    def __str__(self):
        prefix = f"Line {self.line_number}: " if self.line_number is not None else ""
        return f"{prefix}{self.kind.value}: {self.message}"


@dataclass
class ParsedLine:
    """Outcome of parsing one line: the motion (if accepted) and the cursor after it"""

    motion: Motion | None
    cursor: Point3
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.motion is not None


COMMENT_PATTERN = re.compile(r";.*$")

SUPPORTED_COMMANDS = {
    "LIN": "Linear motion",
    "CW": "Clockwise arc",
    "CCW": "Counter-clockwise arc",
}

# Keyword plus required fields
MIN_TOKENS = {"LIN": 4, "CW": 5, "CCW": 5}
MIN_ARC_TOKENS_WITH_ORIENTATION = 7


class _LineContext:
    """Collects diagnostics while the fields of a single line are read."""

    def __init__(self, raw_line: str, line_number: int | None):
        self.raw_line = raw_line
        self.line_number = line_number
        self.diagnostics: list[Diagnostic] = []

    def report(self, kind: ErrorKind, message: str) -> None:
        self.diagnostics.append(
            Diagnostic(kind=kind, message=message, line_number=self.line_number, raw_line=self.raw_line)
        )

    def value(self, token: str, tag: str) -> float:
        """Numeric value of a field tagged `tag`; 0.0 (with a diagnostic) if mistagged or unparsable."""
        if token[:1].upper() != tag:
            self.report(ErrorKind.INVALID_NUMERIC_FIELD, f"Expected {tag} field, got {token!r}, using 0.0")
            return 0.0
        try:
            value = float(token[1:])
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            self.report(ErrorKind.INVALID_NUMERIC_FIELD, f"Invalid numeric value for {tag}: {token!r}, using 0.0")
            return 0.0
        return value

    def reject(self, cursor: Point3, kind: ErrorKind, message: str) -> ParsedLine:
        self.report(kind, message)
        return ParsedLine(motion=None, cursor=cursor, diagnostics=self.diagnostics)


def _has_tag(tokens: list[str], index: int, tag: str) -> bool:
    return index < len(tokens) and tokens[index][:1].upper() == tag


def parse_command(line: str, cursor: Point3 = ORIGIN, line_number: int | None = None) -> ParsedLine:
    """
    Parse a single program line.

    Args:
        line: Raw program line
        cursor: Tool position before this line
        line_number: Optional 1-based line number for diagnostics

    Returns:
        ParsedLine with the motion (None if the line was rejected or blank),
        the cursor after the line, and any diagnostics
    """
    ctx = _LineContext(line.strip(), line_number)

    text = COMMENT_PATTERN.sub("", line).strip()
    if not text:
        return ParsedLine(motion=None, cursor=cursor)

    tokens = text.split()
    if cfg.TRACE_ENABLED:
        logger.trace(f"Tokens: {tokens}")  # type: ignore[attr-defined]
    keyword = tokens[0].upper()

    if keyword not in SUPPORTED_COMMANDS:
        return ctx.reject(cursor, ErrorKind.MALFORMED_LINE, f"Unrecognized command: {tokens[0]}")

    if len(tokens) < MIN_TOKENS[keyword]:
        return ctx.reject(
            cursor,
            ErrorKind.MALFORMED_LINE,
            f"{keyword} requires at least {MIN_TOKENS[keyword]} fields, got {len(tokens)}",
        )

    if keyword == "LIN":
        end = Point3(
            ctx.value(tokens[1], "X"),
            ctx.value(tokens[2], "Y"),
            ctx.value(tokens[3], "Z"),
        )
        motion = LinearMotion(start=cursor, end=end)
        return ParsedLine(motion=motion, cursor=end, diagnostics=ctx.diagnostics)

    # CW / CCW
    orientation = None
    angle_index = 4
    if _has_tag(tokens, 4, "I"):
        if len(tokens) < MIN_ARC_TOKENS_WITH_ORIENTATION:
            return ctx.reject(
                cursor,
                ErrorKind.MALFORMED_LINE,
                f"{keyword} with orientation requires at least "
                f"{MIN_ARC_TOKENS_WITH_ORIENTATION} fields, got {len(tokens)}",
            )
        i, j, k = ctx.value(tokens[4], "I"), ctx.value(tokens[5], "J"), 0.0
        angle_index = 6
        if _has_tag(tokens, 6, "K"):
            if len(tokens) < MIN_ARC_TOKENS_WITH_ORIENTATION + 1:
                return ctx.reject(cursor, ErrorKind.MALFORMED_LINE, f"{keyword} is missing its stop angle")
            k = ctx.value(tokens[6], "K")
            angle_index = 7
        orientation = (i, j, k)

    center = Point2(ctx.value(tokens[1], "X"), ctx.value(tokens[2], "Y"))
    radius = ctx.value(tokens[3], "R")
    stop_angle = ctx.value(tokens[angle_index], "A")

    try:
        motion = CircularMotion(
            center=center,
            radius=radius,
            clockwise=keyword == "CW",
            stop_angle_degrees=stop_angle,
            orientation=orientation,
        )
    except InvalidRadiusError as e:
        return ctx.reject(cursor, ErrorKind.INVALID_RADIUS, e.original_message)

    return ParsedLine(motion=motion, cursor=cursor, diagnostics=ctx.diagnostics)


class CommandParser:
    """Parses whole programs, threading the cursor through every line in order"""

    def __init__(self, start: Point3 = ORIGIN):
        self.start = start
        self.cursor = start
        self.line_count = 0
        self.errors: list[Diagnostic] = []

    def parse_line(self, line: str) -> Motion | None:
        """
        Parse the next line of the program

        Returns:
            The accepted motion, or None for blank and rejected lines
        """
        self.line_count += 1
        result = parse_command(line, self.cursor, self.line_count)
        for diagnostic in result.diagnostics:
            logger.warning(f"{diagnostic} <- {diagnostic.raw_line!r}")
        self.errors.extend(result.diagnostics)
        self.cursor = result.cursor
        return result.motion

    def parse_program(self, program: str | list[str]) -> list[Motion]:
        """
        Parse a complete program

        Args:
            program: Either a string with newlines or a list of lines

        Returns:
            Accepted motions in program order
        """
        if isinstance(program, str):
            lines = program.splitlines()
        else:
            lines = program

        self.cursor = self.start
        self.line_count = 0
        self.errors = []

        motions: list[Motion] = []
        for line in lines:
            motion = self.parse_line(line)
            if motion is not None:
                motions.append(motion)
        return motions

    def get_errors(self) -> list[str]:
        """Get list of parsing diagnostics as text"""
        return [str(d) for d in self.errors]
