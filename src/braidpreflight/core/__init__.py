"""
Braid preflight core - strand geometry.

The helix generator is pure Python. CAD export (BraidGeometry) needs
build123d, installed with the `cad` extra.

Example:
    >>> from braidpreflight.core import generate_braid_geometry, BraidGeometry
    >>> from braidpreflight.io import BraidParams
    >>>
    >>> params = BraidParams(radius=12, length=120, strand_count=24, angle_deg=55, tension=0.55)
    >>> strands = generate_braid_geometry(params)
    >>> BraidGeometry(params, strands).export_step("braid.step")
"""

# Helix generation is always available (no build123d dependency)
from .helix import (
    SEGMENTS_PER_STRAND,
    BraidPoint,
    Strand,
    generate_braid_geometry,
    geometry_to_lists,
    helix_phase_advance,
    helix_turns,
    strand_phase,
)

# CAD geometry requires build123d - make import conditional
# This allows the web calculator to import core.helix without build123d
try:
    from .braid import BraidGeometry

    __all__ = [
        "SEGMENTS_PER_STRAND",
        "BraidPoint",
        "Strand",
        "generate_braid_geometry",
        "geometry_to_lists",
        "helix_phase_advance",
        "helix_turns",
        "strand_phase",
        "BraidGeometry",
    ]
except ImportError:
    # build123d not available, only expose the helix functions
    __all__ = [
        "SEGMENTS_PER_STRAND",
        "BraidPoint",
        "Strand",
        "generate_braid_geometry",
        "geometry_to_lists",
        "helix_phase_advance",
        "helix_turns",
        "strand_phase",
    ]
