"""
Parameter sanitation at the UI boundary.

Everything that arrives from a user (form fields, share-link query strings,
loosely typed JSON) passes through here before reaching the calculations:

- Unparseable or non-finite values fall back to the field default
- Finite values are clamped to the field range
- strandCount is rounded half-up to an integer

Share links carry the five fields as camelCase query parameters with
numbers written as plain decimal text.
"""

import math
import sys
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qs, urlencode

from ..io.loaders import BraidParams
from .constants import (
    PARAM_RANGES,
    DEFAULT_RADIUS_MM,
    DEFAULT_LENGTH_MM,
    DEFAULT_STRAND_COUNT,
    DEFAULT_ANGLE_DEG,
    DEFAULT_TENSION,
)

DEFAULT_PARAMS = BraidParams(
    radius=DEFAULT_RADIUS_MM,
    length=DEFAULT_LENGTH_MM,
    strand_count=DEFAULT_STRAND_COUNT,
    angle_deg=DEFAULT_ANGLE_DEG,
    tension=DEFAULT_TENSION,
)

# snake_case attribute name -> camelCase wire name
_FIELD_NAMES = {
    "radius": "radius",
    "length": "length",
    "strand_count": "strandCount",
    "angle_deg": "angleDeg",
    "tension": "tension",
}


def parse_number(value: Any, fallback: float) -> float:
    """
    Convert a loosely typed value to a finite float.

    Returns fallback for None, empty strings, booleans, anything float()
    rejects, NaN and infinities. Integers too large for a float are finite,
    so they saturate at the largest float and still clamp into range.
    """
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, str):
        value = value.strip()
        if value == '':
            return fallback
    try:
        number = float(value)
    except OverflowError:
        return sys.float_info.max if value > 0 else -sys.float_info.max
    except (TypeError, ValueError):
        return fallback
    return number if math.isfinite(number) else fallback


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def sanitize_params(raw: Optional[Mapping[str, Any]], defaults: BraidParams = DEFAULT_PARAMS) -> BraidParams:
    """
    Build in-range BraidParams from loosely typed input.

    Keys may be camelCase (wire format) or snake_case. Missing keys take
    the default.

    Args:
        raw: Mapping of field name to value (strings, numbers, None, ...)
        defaults: Values used for missing or unparseable fields

    Returns:
        BraidParams with every field inside its declared range
    """
    raw = raw or {}
    values: Dict[str, float] = {}

    for attr, wire_name in _FIELD_NAMES.items():
        fallback = getattr(defaults, attr)
        value = raw.get(wire_name, raw.get(attr))
        lower, upper = PARAM_RANGES[wire_name]
        values[attr] = clamp(parse_number(value, fallback), lower, upper)

    values["strand_count"] = round_half_up(values["strand_count"])

    return BraidParams(**values)


def clamp_params(params: BraidParams, defaults: BraidParams = DEFAULT_PARAMS) -> BraidParams:
    """Clamp an existing parameter set into range (non-finite fields reset to default)."""
    return sanitize_params(params.to_dict(), defaults=defaults)


def format_number(value: float) -> str:
    """
    Decimal text for a number, without a trailing '.0' on integral values.

    Matches how the browser stringifies numbers: 12 -> "12", 0.55 -> "0.55",
    0.00001 -> "0.00001". Exponent form only below 1e-6 or from 1e21 up.
    """
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if 'e' in text and 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), 'f')
    return text


def to_query_string(params: BraidParams) -> str:
    """Encode params as a share-link query string (camelCase keys, fixed order)."""
    return urlencode([
        (wire_name, format_number(getattr(params, attr)))
        for attr, wire_name in _FIELD_NAMES.items()
    ])


def params_from_query(query: str, defaults: BraidParams = DEFAULT_PARAMS) -> BraidParams:
    """
    Decode a share-link query string into sanitized params.

    A leading '?' is accepted. Repeated keys use the first value.
    """
    if query.startswith('?'):
        query = query[1:]
    parsed = parse_qs(query, keep_blank_values=True)
    return sanitize_params({key: values[0] for key, values in parsed.items()}, defaults=defaults)


def share_url(base_url: str, params: BraidParams) -> str:
    """Full share link: base URL (origin) plus the query string."""
    return f"{base_url.rstrip('?')}?{to_query_string(params)}"
