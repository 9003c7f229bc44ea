"""
Braid preflight IO - parameter model, JSON schema and file loaders.

Example:
    >>> from braidpreflight.io import BraidParams, save_params_json, load_params_json
    >>>
    >>> params = BraidParams(radius=12, length=120, strand_count=24, angle_deg=55, tension=0.55)
    >>> save_params_json(params, "braid.json")
    >>> loaded = load_params_json("braid.json")
    >>> assert loaded == params
"""

from .loaders import (
    BraidParams,
    check_computable,
    load_params_json,
    save_params_json,
)

from .schema import (
    SCHEMA_VERSION,
    get_schema_v1,
    validate_json_schema,
)

__all__ = [
    "BraidParams",
    "check_computable",
    "load_params_json",
    "save_params_json",
    "SCHEMA_VERSION",
    "get_schema_v1",
    "validate_json_schema",
]
