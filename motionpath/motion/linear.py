"""
Straight-line discretizer.
"""

import math
import sys
from collections.abc import Sequence

import numpy as np

from motionpath.config import LINEAR_FIXED_STEPS, LINEAR_MODE_DEFAULT, LINEAR_MODES, MAX_SAMPLES
from motionpath.utils.errors import SampleLimitError


def linear_step_count(delta: np.ndarray, mode: str = "distance", fixed_steps: int = LINEAR_FIXED_STEPS) -> int:
    """Number of steps for a move with per-axis displacement `delta`."""
    if mode == "fixed":
        return max(1, int(fixed_steps))
    if mode != "distance":
        raise ValueError(f"Unknown linear mode {mode!r}, expected one of {LINEAR_MODES}")
    span = float(np.max(np.abs(delta)))
    if not math.isfinite(span):
        # Overflowed displacement, never within any sample limit
        return sys.maxsize
    return max(1, math.ceil(span))


def interpolate_linear(
    start: Sequence[float],
    end: Sequence[float],
    mode: str | None = None,
    fixed_steps: int = LINEAR_FIXED_STEPS,
    max_samples: int = MAX_SAMPLES,
) -> np.ndarray:
    """
    Discretize a straight move into evenly spaced waypoints.

    Points are start + t * (end - start) for t = i / steps, i = 0..steps,
    so rounding never accumulates along the move. A zero-length move yields
    a single point.

    Args:
        start: Start position (x, y, z)
        end: End position (x, y, z)
        mode: "distance" or "fixed"; None uses LINEAR_MODE_DEFAULT
        fixed_steps: Step count for "fixed" mode
        max_samples: Largest number of waypoints allowed

    Returns: array of shape (steps + 1, 3)

    Raises:
        SampleLimitError: the move needs more than max_samples waypoints
    """
    start_arr = np.asarray(start, dtype=float)
    end_arr = np.asarray(end, dtype=float)
    if start_arr.shape != end_arr.shape:
        raise ValueError("start and end must have the same shape")
    if not (np.all(np.isfinite(start_arr)) and np.all(np.isfinite(end_arr))):
        raise ValueError("start and end must be finite")

    if np.array_equal(start_arr, end_arr):
        return start_arr.reshape(1, -1).copy()

    delta = end_arr - start_arr
    steps = linear_step_count(delta, mode or LINEAR_MODE_DEFAULT, fixed_steps)
    if steps + 1 > max_samples:
        raise SampleLimitError(steps + 1, max_samples)
    t = np.linspace(0.0, 1.0, steps + 1).reshape(-1, 1)
    traj = start_arr.reshape(1, -1) + t * delta.reshape(1, -1)
    # Pin the final sample so the move lands exactly on its target
    traj[-1] = end_arr
    return traj
