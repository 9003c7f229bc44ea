"""
Braid CAD geometry using build123d.

Turns the helical strand preview into one polyline wire per strand so the
preview can be opened in a CAD viewer or handed to a CAM tool as STEP.
"""

import logging
from typing import List, Optional

from build123d import Compound, Polyline, Wire

from ..io.loaders import BraidParams
from .geometry_base import BaseGeometry
from .helix import Strand, generate_braid_geometry

logger = logging.getLogger(__name__)


class BraidGeometry(BaseGeometry):
    """
    Polyline wire model of a braided tube.

    Uses the same strand points as the preview, so STEP output and the
    on-screen view always agree.
    """

    _part_name = "braid"

    def __init__(self, params: BraidParams, strands: Optional[List[Strand]] = None):
        """
        Initialize braid geometry.

        Args:
            params: Braid parameters
            strands: Pre-computed strands (generated from params if None)
        """
        self.params = params
        self.strands = strands if strands is not None else generate_braid_geometry(params)
        self._part = None

    def build_wires(self) -> List[Wire]:
        """One wire per strand, in strand order."""
        return [
            Polyline(*[(p.x, p.y, p.z) for p in strand])
            for strand in self.strands
        ]

    def build(self) -> Compound:
        """
        Build the braid as a compound of strand wires.

        Returns:
            build123d Compound holding strand_count wires
        """
        if self._part is not None:
            return self._part

        wires = self.build_wires()
        self._part = Compound(wires)
        logger.debug(f"Built {len(wires)} strand wires")
        return self._part
