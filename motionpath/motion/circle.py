"""
Circular arc discretizer.

Arcs are sampled at a fixed angular cadence starting at 0 degrees and
advancing in increasing angle up to and including the stop angle. The
`clockwise` flag is carried for the caller; it does not reverse the sampling.
A clockwise sweep is requested by giving a negative stop angle.
"""

import logging
import math
import sys
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from motionpath.config import ARC_STEP_DEG, DEFAULT_ARC_AXIS, MAX_SAMPLES, ORIENTATION_EPS
from motionpath.utils.errors import InvalidRadiusError, SampleLimitError

logger = logging.getLogger(__name__)


def normalize_orientation(orientation: Sequence[float] | NDArray | None) -> np.ndarray:
    """
    Resolve a raw I/J/K orientation hint to a unit vector.

    Missing or zero-length vectors silently fall back to DEFAULT_ARC_AXIS.
    """
    if orientation is None:
        return np.array(DEFAULT_ARC_AXIS, dtype=float)

    vec = np.asarray(orientation, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"orientation must have 3 components, got shape {vec.shape}")

    norm = np.linalg.norm(vec)
    if not np.isfinite(norm) or norm < ORIENTATION_EPS:
        return np.array(DEFAULT_ARC_AXIS, dtype=float)
    return vec / norm


def sample_degrees(
    stop_angle_degrees: float, step_deg: float = ARC_STEP_DEG, max_samples: int = MAX_SAMPLES
) -> np.ndarray:
    """Angles 0, step, 2*step, ... not exceeding the stop angle (always includes 0)."""
    if step_deg <= 0:
        raise ValueError(f"step_deg must be positive, got {step_deg}")
    if not math.isfinite(stop_angle_degrees) or stop_angle_degrees < step_deg:
        return np.zeros(1)
    ratio = stop_angle_degrees / step_deg
    if not math.isfinite(ratio) or ratio > max_samples + 1:
        raise SampleLimitError(int(ratio) + 1 if math.isfinite(ratio) else sys.maxsize, max_samples)
    # Largest n with n * step <= stop; the division alone can round either way
    n = math.floor(ratio)
    if (n + 1) * step_deg <= stop_angle_degrees:
        n += 1
    elif n * step_deg > stop_angle_degrees:
        n -= 1
    if n + 1 > max_samples:
        raise SampleLimitError(n + 1, max_samples)
    return np.arange(n + 1, dtype=float) * step_deg


def interpolate_circular(
    center: Sequence[float],
    radius: float,
    clockwise: bool,
    stop_angle_degrees: float,
    orientation: Sequence[float] | None = None,
    step_deg: float = ARC_STEP_DEG,
    max_samples: int = MAX_SAMPLES,
) -> np.ndarray:
    """
    Discretize a planar arc into (x, y) waypoints.

    Args:
        center: Arc center (x, y)
        radius: Arc radius, must be > 0
        clockwise: Direction flag, informational only
        stop_angle_degrees: Last angle to sample (inclusive, degrees)
        orientation: Optional raw I/J/K plane axis hint
        step_deg: Angular cadence in degrees
        max_samples: Largest number of waypoints allowed

    Returns:
        Array of shape (N, 2), N >= 1

    Raises:
        InvalidRadiusError: radius is not a positive finite number
        SampleLimitError: the arc needs more than max_samples waypoints
    """
    if not (math.isfinite(radius) and radius > 0):
        raise InvalidRadiusError(radius)

    axis = normalize_orientation(orientation)
    logger.debug(
        f"Arc r={radius} stop={stop_angle_degrees}deg {'CW' if clockwise else 'CCW'} "
        f"axis={np.round(axis, 6).tolist()}"
    )

    cx, cy = (float(c) for c in center)
    theta = np.radians(sample_degrees(stop_angle_degrees, step_deg, max_samples))
    return np.column_stack((cx + radius * np.cos(theta), cy + radius * np.sin(theta)))
