"""
Braid Preflight - manufacturability feedback for braided tubes.

Tune five braiding parameters and get a helical preview of the strands plus
a heuristic manufacturability score, before anything runs on a machine.

Example:
    >>> from braidpreflight import BraidParams, generate_braid_geometry, evaluate_constraints
    >>>
    >>> params = BraidParams(radius=12, length=120, strand_count=24, angle_deg=55, tension=0.55)
    >>> strands = generate_braid_geometry(params)
    >>> result = evaluate_constraints(params)
    >>> result.manufacturability_score
    100

Note: All imports are lazy-loaded for fast startup. The calculator can be
imported without triggering CAD geometry (build123d) imports.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"Severity", "ScoreBand"}

_CALCULATOR = {
    "DEFAULT_PARAMS",
    "evaluate_constraints",
    "strand_spacing",
    "score_band",
    "ConstraintMessage",
    "ConstraintResult",
    "sanitize_params",
    "clamp_params",
    "to_query_string",
    "params_from_query",
    "share_url",
}

_IO = {
    "BraidParams",
    "load_params_json",
    "save_params_json",
}

_CORE = {
    "BraidPoint",
    "generate_braid_geometry",
    "BraidGeometry",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'braidpreflight' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Core operations
    "generate_braid_geometry",
    "evaluate_constraints",

    # Geometry (lazy loaded from core)
    "BraidPoint",
    "BraidGeometry",

    # Enums (lazy loaded from enums)
    "Severity",
    "ScoreBand",

    # Calculator (lazy loaded from calculator)
    "DEFAULT_PARAMS",
    "strand_spacing",
    "score_band",
    "ConstraintMessage",
    "ConstraintResult",
    "sanitize_params",
    "clamp_params",
    "to_query_string",
    "params_from_query",
    "share_url",

    # IO (lazy loaded from io)
    "BraidParams",
    "load_params_json",
    "save_params_json",
]
