"""
JSON schema definition and validation for braid parameter files.

This defines the contract between the web front-end (share links and
exports) and the command-line tools.
"""

from typing import Any, Dict, List

SCHEMA_VERSION = "1.0"

PARAM_FIELDS = ("radius", "length", "strandCount", "angleDeg", "tension")


def get_schema_v1() -> Dict:
    """
    Get JSON schema version 1.0.

    A params document holds one parameter set; the result section is
    optional and only present in exports.
    """
    return {
        "schema_version": "1.0",
        "required_sections": ["params"],
        "optional_sections": ["result", "strands"],
        "params_fields": {
            "required": list(PARAM_FIELDS),
            "types": {
                "radius": "number",       # mm
                "length": "number",       # mm
                "strandCount": "integer",
                "angleDeg": "number",     # degrees
                "tension": "number",      # 0..1
            },
        },
        "result_fields": {
            "manufacturabilityScore": "integer",  # 0..100
            "warnings": "list[string]",
            "errors": "list[string]",
        },
    }


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate a params document against the schema.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }
    """
    errors: List[str] = []
    warnings: List[str] = []

    version = data.get("schema_version")
    if version is None:
        warnings.append("No schema_version specified, assuming 1.0")
        version = "1.0"
    elif version != SCHEMA_VERSION:
        warnings.append(f"Schema version {version} differs from {SCHEMA_VERSION}")

    params = data.get("params")
    if not isinstance(params, dict):
        errors.append("Missing required section: params")
        return {
            "valid": False,
            "errors": errors,
            "warnings": warnings,
            "schema_version": version,
        }

    for name in PARAM_FIELDS:
        if name not in params:
            errors.append(f"params: missing required field '{name}'")
            continue
        value = params[name]
        # bool is an int subclass but never a valid parameter
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"params.{name}: expected a number, got {type(value).__name__}")
        elif name == "strandCount" and not float(value).is_integer():
            errors.append(f"params.strandCount: expected an integer, got {value}")

    unknown = sorted(set(params) - set(PARAM_FIELDS))
    for name in unknown:
        warnings.append(f"params: unknown field '{name}' will be ignored")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": version,
    }
