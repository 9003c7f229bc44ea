"""
Braid Preflight - Manufacturability Constraints

Heuristic checks based on:
- Strand density on the tube circumference (collision/friction proxy)
- Braid angle limits
- Process tension limits
- Tube radius

Checks run in a fixed order and each contributes at most one message. The
score is a linear penalty on the message counts. The message text is part
of the contract: reports and front-end tests compare it verbatim.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List

from ..enums import Severity, ScoreBand
from ..io.loaders import BraidParams, check_computable
from .constants import (
    STRAND_SPACING_ERROR_MM,
    STRAND_SPACING_WARNING_MM,
    ANGLE_LOW_WARNING_DEG,
    ANGLE_EXTREME_ERROR_DEG,
    TENSION_ERROR,
    TENSION_WARNING,
    RADIUS_SMALL_WARNING_MM,
    SCORE_MAX,
    SCORE_MIN,
    ERROR_PENALTY,
    WARNING_PENALTY,
    SCORE_BAND_GREEN_MIN,
    SCORE_BAND_CAUTION_MIN,
    SCORE_BAND_RISK_MIN,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConstraintMessage:
    """A single constraint finding"""
    severity: Severity
    code: str
    message: str


@dataclass
class ConstraintResult:
    """Complete manufacturability assessment"""
    manufacturability_score: int
    messages: List[ConstraintMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[str]:
        return [m.message for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[str]:
        return [m.message for m in self.messages if m.severity == Severity.WARNING]

    @property
    def valid(self) -> bool:
        """True if no errors"""
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def band(self) -> ScoreBand:
        return score_band(self.manufacturability_score)

    def to_dict(self) -> dict:
        """Wire format consumed by the front-end."""
        return {
            'manufacturabilityScore': self.manufacturability_score,
            'warnings': self.warnings,
            'errors': self.errors,
        }


def strand_spacing(params: BraidParams) -> float:
    """
    Arc length between neighbouring strands at the tube surface.

    Formula: spacing = 2π × radius / strand_count (mm)
    """
    circumference = 2 * math.pi * params.radius
    return circumference / params.strand_count


def score_from_counts(num_errors: int, num_warnings: int) -> int:
    """
    Linear penalty score.

    Formula: 100 - 20 × errors - 8 × warnings, clamped to [0, 100]
    """
    score = SCORE_MAX
    score -= num_errors * ERROR_PENALTY
    score -= num_warnings * WARNING_PENALTY
    return max(SCORE_MIN, min(SCORE_MAX, score))


def score_band(score: int) -> ScoreBand:
    """Map a manufacturability score to its status band."""
    if score >= SCORE_BAND_GREEN_MIN:
        return ScoreBand.GREEN
    if score >= SCORE_BAND_CAUTION_MIN:
        return ScoreBand.CAUTION
    if score >= SCORE_BAND_RISK_MIN:
        return ScoreBand.RISK
    return ScoreBand.FAIL


def evaluate_constraints(params: BraidParams) -> ConstraintResult:
    """
    Evaluate manufacturability of a braid parameter set.

    Args:
        params: Braid parameters (clamped to range by the caller)

    Returns:
        ConstraintResult with score and ordered messages

    Raises:
        ValueError: For non-finite fields or strand_count < 1
    """
    check_computable(params)

    messages: List[ConstraintMessage] = []

    # Fixed order: density, angle, tension, radius
    messages.extend(_check_strand_density(params))
    messages.extend(_check_braid_angle(params))
    messages.extend(_check_tension(params))
    messages.extend(_check_radius(params))

    num_errors = sum(1 for m in messages if m.severity == Severity.ERROR)
    score = score_from_counts(num_errors, len(messages) - num_errors)

    logger.debug(f"Evaluated {params!r}: score={score}, messages={[m.code for m in messages]}")

    return ConstraintResult(manufacturability_score=score, messages=messages)


def _check_strand_density(params: BraidParams) -> List[ConstraintMessage]:
    """Check strand spacing around the circumference"""
    spacing = strand_spacing(params)

    if spacing < STRAND_SPACING_ERROR_MM:
        return [ConstraintMessage(
            severity=Severity.ERROR,
            code="STRAND_DENSITY_HIGH",
            message="Strand density too high — collision risk.",
        )]
    elif spacing < STRAND_SPACING_WARNING_MM:
        return [ConstraintMessage(
            severity=Severity.WARNING,
            code="STRAND_SPACING_TIGHT",
            message="Strand spacing tight — potential friction increase.",
        )]
    return []


def _check_braid_angle(params: BraidParams) -> List[ConstraintMessage]:
    """Check braid angle limits"""
    messages = []

    # Independent checks, not an if/else chain
    if params.angle_deg < ANGLE_LOW_WARNING_DEG:
        messages.append(ConstraintMessage(
            severity=Severity.WARNING,
            code="ANGLE_LOW",
            message="Low braid angle — reduced torsional stability.",
        ))
    if params.angle_deg > ANGLE_EXTREME_ERROR_DEG:
        messages.append(ConstraintMessage(
            severity=Severity.ERROR,
            code="ANGLE_EXTREME",
            message="Extreme braid angle — manufacturability risk.",
        ))

    return messages


def _check_tension(params: BraidParams) -> List[ConstraintMessage]:
    """Check process tension"""
    if params.tension > TENSION_ERROR:
        return [ConstraintMessage(
            severity=Severity.ERROR,
            code="TENSION_EXCESSIVE",
            message="Excessive tension — deformation likely.",
        )]
    elif params.tension > TENSION_WARNING:
        return [ConstraintMessage(
            severity=Severity.WARNING,
            code="TENSION_HIGH",
            message="High tension — monitor stress zones.",
        )]
    return []


def _check_radius(params: BraidParams) -> List[ConstraintMessage]:
    """Check tube radius"""
    # Unreachable after clamping (range floor is 2mm), kept for raw callers
    if params.radius < RADIUS_SMALL_WARNING_MM:
        return [ConstraintMessage(
            severity=Severity.WARNING,
            code="RADIUS_SMALL",
            message="Small radius — bending stiffness may increase.",
        )]
    return []
