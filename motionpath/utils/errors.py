"""
Error taxonomy for the motionpath parse/discretize pipeline.

Per-line problems are recovered and reported as diagnostics tagged with an
ErrorKind; only the exceptions below ever propagate to callers.
"""

from enum import Enum


class ErrorKind(Enum):
    """Categories of problems reported while processing a program."""

    MALFORMED_LINE = "MalformedLine"
    INVALID_NUMERIC_FIELD = "InvalidNumericField"
    INVALID_RADIUS = "InvalidRadius"
    SAMPLE_LIMIT = "SampleLimitExceeded"
    IO_FAILURE = "IoFailure"


class MotionError(RuntimeError):
    """Base class for motionpath failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"{self.kind.value}: {message}")

    def __str__(self):
        return f"{self.kind.value}: {self.original_message}"


class InvalidRadiusError(MotionError, ValueError):
    """Circular motion with a radius that cannot describe an arc."""

    kind = ErrorKind.INVALID_RADIUS

    def __init__(self, radius: float):
        self.radius = radius
        super().__init__(f"radius must be positive, got {radius}")


class SampleLimitError(MotionError, ValueError):
    """A motion would discretize into more waypoints than allowed."""

    kind = ErrorKind.SAMPLE_LIMIT

    def __init__(self, samples: int, limit: int):
        self.samples = samples
        self.limit = limit
        super().__init__(f"motion needs {samples} waypoints, limit is {limit}")


class ProgramIOError(MotionError):
    """The program source could not be opened or read."""

    kind = ErrorKind.IO_FAILURE

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"cannot read {path}: {reason}")
