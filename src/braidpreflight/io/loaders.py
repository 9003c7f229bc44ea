"""
JSON input/output for braid parameters.

BraidParams is the single value passed into both the geometry generator and
the constraint evaluator. Field names serialize as camelCase so files and
share links stay compatible with the web front-end.

Uses Pydantic for type coercion. Ranges are NOT enforced here, that is the
job of calculator.sanitize.
"""

import json
import math
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .schema import SCHEMA_VERSION


class BraidParams(BaseModel):
    """Manufacturing parameters of a braided tube.

    Frozen, so two params with equal fields are equal and hash the same.
    """
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)

    radius: float  # Tube radius (mm)
    length: float  # Axial length (mm)
    strand_count: int = Field(alias="strandCount")
    angle_deg: float = Field(alias="angleDeg")  # Helix angle
    tension: float  # Normalized process tension, 0..1

    def to_dict(self) -> dict:
        """Serialize with camelCase keys (the wire format)."""
        return self.model_dump(by_alias=True)


def check_computable(params: BraidParams) -> None:
    """
    Reject parameters the calculations cannot evaluate to finite numbers.

    This is not range validation. Out-of-range but finite values (e.g. a
    radius of 1mm) pass; only values that would cause a division by zero or
    propagate NaN/inf are refused.

    Raises:
        ValueError: If a field is non-finite or strand_count < 1
    """
    for name in ("radius", "length", "angle_deg", "tension"):
        value = getattr(params, name)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")

    if params.strand_count < 1:
        raise ValueError(
            f"strand_count must be at least 1, got {params.strand_count}"
        )


def load_params_json(filepath: Union[str, Path]) -> BraidParams:
    """
    Load braid parameters from a JSON file.

    Accepts either the saved document format ({"schema_version", "params"})
    or a bare params object.

    Args:
        filepath: Path to JSON file

    Returns:
        BraidParams

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the JSON is not an object
        ValidationError: If a field has the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Params file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid params JSON - expected an object")

    # Saved documents wrap the fields in a 'params' section
    if 'params' in data:
        data = data['params']

    return BraidParams.model_validate(data)


def save_params_json(params: BraidParams, filepath: Union[str, Path]) -> None:
    """
    Save braid parameters to a JSON file.

    Args:
        params: Parameters to save
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = {
        'schema_version': SCHEMA_VERSION,
        'params': params.to_dict(),
    }

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)
