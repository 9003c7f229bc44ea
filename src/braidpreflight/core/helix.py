"""Helical strand geometry for the braid preview.

Every strand is a helix on the tube cylinder. Strands start evenly spaced
around the circumference at z=0 and advance in phase linearly with z. This
is a conceptual model for display: strands never interact, so the preview
shows no collision even when the constraint evaluator reports one.

Pure math, no build123d. Safe to import from the web calculator.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

from ..io.loaders import BraidParams, check_computable

logger = logging.getLogger(__name__)

# Axial samples per strand, independent of length (display resolution only)
SEGMENTS_PER_STRAND: int = 200


@dataclass(frozen=True)
class BraidPoint:
    """A point on a strand, in mm."""
    x: float
    y: float
    z: float


Strand = List[BraidPoint]


def helix_phase_advance(params: BraidParams) -> float:
    """
    Total phase a strand accumulates over the braid length.

    Formula: turns = tan(angle) × length, in radians.

    Raises:
        ValueError: If the braid angle is at or beyond ±90°, where tan diverges
    """
    if abs(params.angle_deg) >= 90.0:
        raise ValueError(
            f"angle_deg must be strictly between -90 and 90, got {params.angle_deg}"
        )
    angle_rad = params.angle_deg * math.pi / 180
    return math.tan(angle_rad) * params.length


def helix_turns(params: BraidParams) -> float:
    """Number of full revolutions a strand makes around the tube."""
    return helix_phase_advance(params) / (2 * math.pi)


def strand_phase(params: BraidParams, strand_index: int, t: float) -> float:
    """
    Angular position of a strand at normalized axial position t (0..1).

    Args:
        params: Braid parameters
        strand_index: Strand number, 0..strand_count-1
        t: Normalized axial position (0 at z=0, 1 at z=length)

    Returns:
        theta in radians
    """
    check_computable(params)
    offset = (2 * math.pi * strand_index) / params.strand_count
    return offset + helix_phase_advance(params) * t


def generate_braid_geometry(params: BraidParams) -> List[Strand]:
    """
    Generate the helical braid preview.

    Each strand gets SEGMENTS_PER_STRAND + 1 points from z=0 to z=length,
    all at distance `radius` from the tube axis.

    Args:
        params: Braid parameters (clamped to range by the caller)

    Returns:
        One strand per strand_count, ordered by strand index

    Raises:
        ValueError: For non-finite fields, strand_count < 1, or |angle_deg| >= 90
    """
    check_computable(params)

    radius = params.radius
    length = params.length
    turns = helix_phase_advance(params)

    strands: List[Strand] = []
    for s in range(params.strand_count):
        offset = (2 * math.pi * s) / params.strand_count
        strand: Strand = []

        for i in range(SEGMENTS_PER_STRAND + 1):
            t = i / SEGMENTS_PER_STRAND
            theta = offset + turns * t
            strand.append(BraidPoint(
                x=radius * math.cos(theta),
                y=radius * math.sin(theta),
                z=t * length,
            ))

        strands.append(strand)

    logger.debug(
        f"Generated {len(strands)} strands x {SEGMENTS_PER_STRAND + 1} points "
        f"({turns / (2 * math.pi):.2f} turns)"
    )
    return strands


def geometry_to_lists(strands: List[Strand]) -> List[List[List[float]]]:
    """Flatten strands to nested [x, y, z] lists for JSON and renderers."""
    return [[[p.x, p.y, p.z] for p in strand] for strand in strands]
