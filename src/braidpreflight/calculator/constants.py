"""
Constants for braid preflight calculations.

This module centralizes the numerical constants used by the constraint
evaluator and the sanitation boundary. Each constant is documented with
what it controls. The preview sampling resolution lives with the geometry
in core.helix.

MODIFICATION GUIDELINES:
- Thresholds and penalties are a fixed contract: reports and tests compare
  exact messages and scores, so changing one changes every assessment
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG)

Constants are grouped by category:
- Parameter ranges and defaults (what the UI allows)
- Manufacturability thresholds
- Scoring
"""

from typing import Dict, Tuple

# =============================================================================
# Parameter Ranges and Defaults
# =============================================================================

RADIUS_RANGE_MM: Tuple[float, float] = (2.0, 40.0)
LENGTH_RANGE_MM: Tuple[float, float] = (20.0, 300.0)
STRAND_COUNT_RANGE: Tuple[int, int] = (6, 72)
ANGLE_RANGE_DEG: Tuple[float, float] = (10.0, 85.0)
TENSION_RANGE: Tuple[float, float] = (0.0, 1.0)

# Keyed by serialized (camelCase) field name
PARAM_RANGES: Dict[str, Tuple[float, float]] = {
    "radius": RADIUS_RANGE_MM,
    "length": LENGTH_RANGE_MM,
    "strandCount": STRAND_COUNT_RANGE,
    "angleDeg": ANGLE_RANGE_DEG,
    "tension": TENSION_RANGE,
}

PARAM_UNITS: Dict[str, str] = {
    "radius": "mm",
    "length": "mm",
    "strandCount": "",
    "angleDeg": "°",
    "tension": "",
}

# Values restored by "Reset" and used when a field cannot be parsed
DEFAULT_RADIUS_MM: float = 12.0
DEFAULT_LENGTH_MM: float = 120.0
DEFAULT_STRAND_COUNT: int = 24
DEFAULT_ANGLE_DEG: float = 55.0
DEFAULT_TENSION: float = 0.55

# =============================================================================
# Manufacturability Thresholds
# =============================================================================

# Arc length between neighbouring strands on the circumference
STRAND_SPACING_ERROR_MM: float = 1.5      # Below: strands collide
STRAND_SPACING_WARNING_MM: float = 2.5    # Below: friction increases

ANGLE_LOW_WARNING_DEG: float = 20.0       # Below: poor torsional stability
ANGLE_EXTREME_ERROR_DEG: float = 75.0     # Above: hard to braid at all

TENSION_ERROR: float = 0.9                # Above: deformation likely
TENSION_WARNING: float = 0.75             # Above: stress zones

RADIUS_SMALL_WARNING_MM: float = 2.0      # Below: bending stiffness rises

# =============================================================================
# Scoring
# =============================================================================

SCORE_MAX: int = 100
SCORE_MIN: int = 0
ERROR_PENALTY: int = 20
WARNING_PENALTY: int = 8

# Lower bound of each score band, highest first
SCORE_BAND_GREEN_MIN: int = 85
SCORE_BAND_CAUTION_MIN: int = 60
SCORE_BAND_RISK_MIN: int = 35
