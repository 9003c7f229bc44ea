"""
Base class for braid CAD geometry.

Provides the shared build/export/display plumbing used by BraidGeometry.
"""

import logging

logger = logging.getLogger(__name__)


class BaseGeometry:
    """Base class providing shared export/display methods for geometry classes.

    Subclasses must:
    - Set self._part = None in __init__
    - Implement build() returning a build123d shape
    - Set _part_name class attribute for log messages
    """

    _part_name: str = "part"

    def show(self):
        """Display in OCP viewer (requires ocp_vscode)."""
        part = self.build()
        try:
            from ocp_vscode import show as ocp_show
            ocp_show(part)
        except ImportError:
            logger.debug("ocp_vscode not installed, nothing shown")
        return part

    def export_step(self, filepath: str):
        """Export to STEP file (builds if not already built)."""
        if self._part is None:
            self.build()

        from build123d import export_step as exp_step
        exp_step(self._part, filepath)

        logger.info(f"Exported {self._part_name} to {filepath}")
