"""
Braid Preflight Calculator - manufacturability checks and the UI boundary.

Example:
    >>> from braidpreflight.calculator import evaluate_constraints, sanitize_params
    >>>
    >>> params = sanitize_params({"radius": "3", "strandCount": 60, "tension": 0.8})
    >>> result = evaluate_constraints(params)
    >>> result.manufacturability_score
    72
"""

from .constraints import (
    evaluate_constraints,
    strand_spacing,
    score_from_counts,
    score_band,
    ConstraintMessage,
    ConstraintResult,
)

from .sanitize import (
    DEFAULT_PARAMS,
    parse_number,
    round_half_up,
    sanitize_params,
    clamp_params,
    format_number,
    to_query_string,
    params_from_query,
    share_url,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

from ..enums import Severity, ScoreBand

# Convenience imports
from ..io import BraidParams
from ..core.helix import generate_braid_geometry


__all__ = [
    # Parameters
    "BraidParams",
    "DEFAULT_PARAMS",

    # Core operations
    "generate_braid_geometry",
    "evaluate_constraints",

    # Constraint helpers
    "strand_spacing",
    "score_from_counts",
    "score_band",
    "ConstraintMessage",
    "ConstraintResult",
    "Severity",
    "ScoreBand",

    # Sanitation boundary
    "parse_number",
    "round_half_up",
    "sanitize_params",
    "clamp_params",
    "format_number",
    "to_query_string",
    "params_from_query",
    "share_url",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
