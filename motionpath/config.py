"""
Central configuration for motionpath tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("MOTIONPATH_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

# Input files must carry exactly this extension
PROGRAM_EXTENSION: str = ".cmmd"

LOG_LEVEL_DEFAULT: str = os.getenv("MOTIONPATH_LOG_LEVEL", "WARNING").upper()

# Arc sampling cadence (degrees per waypoint)
ARC_STEP_DEG: float = float(os.getenv("MOTIONPATH_ARC_STEP_DEG", "5.0"))

# Fallback plane axis when an arc carries no usable orientation
DEFAULT_ARC_AXIS: tuple[float, float, float] = (1.0, 0.0, 0.0)

# Orientation vectors shorter than this are treated as zero
ORIENTATION_EPS: float = 1e-12

# Linear stepping policy: "distance" (one step per unit on the dominant axis)
# or "fixed" (LINEAR_FIXED_STEPS steps regardless of length)
LINEAR_MODES: tuple[str, ...] = ("distance", "fixed")


def _parse_linear_mode() -> str:
    raw = os.getenv("MOTIONPATH_LINEAR_MODE")
    if not raw:
        return "distance"
    mode = raw.strip().lower()
    if mode not in LINEAR_MODES:
        logger.warning(f"Ignoring unknown MOTIONPATH_LINEAR_MODE={raw!r}, using 'distance'")
        return "distance"
    return mode


LINEAR_MODE_DEFAULT: str = _parse_linear_mode()
LINEAR_FIXED_STEPS: int = max(1, int(os.getenv("MOTIONPATH_LINEAR_STEPS", "100")))

# Decimal places used when rendering waypoints
OUTPUT_PRECISION: int = int(os.getenv("MOTIONPATH_PRECISION", "2"))

# Upper bound on waypoints produced for a single motion
MAX_SAMPLES: int = max(1, int(os.getenv("MOTIONPATH_MAX_SAMPLES", "1000000")))
