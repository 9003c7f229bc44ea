"""
JavaScript-Python bridge for Pyodide.

Provides a single, clean entry point for all JS->Python calculator calls.
Raw UI values are sanitized (parsed, clamped, rounded) before the
geometry and constraint calculations run.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify(inputs));
    const result = await pyodide.runPythonAsync(`
        from braidpreflight.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypedDict

from ..core.helix import generate_braid_geometry, geometry_to_lists
from .constraints import evaluate_constraints
from .output import to_markdown, to_summary
from .sanitize import sanitize_params, to_query_string

logger = logging.getLogger(__name__)


class ConstraintMessageDict(TypedDict):
    """Type for constraint message dictionaries sent to JavaScript."""
    severity: str  # "error" | "warning"
    code: str  # e.g., "STRAND_DENSITY_HIGH"
    message: str


# ============================================================================
# Input Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs from the braid UI.

    Parameter values stay loosely typed here (the browser sends whatever
    the input widgets hold); sanitize_params turns them into BraidParams.
    """
    model_config = ConfigDict(extra='ignore')

    params: Dict[str, Any] = Field(default_factory=dict)
    include_geometry: bool = True


# ============================================================================
# Output Models
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    # Sanitized params actually used (camelCase)
    params: Optional[Dict[str, Any]] = None

    # {manufacturabilityScore, warnings, errors}
    result: Optional[Dict[str, Any]] = None
    band: Optional[str] = None
    valid: bool = True
    messages: List[ConstraintMessageDict] = Field(default_factory=list)

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None
    share_query: Optional[str] = None

    # [[[x, y, z], ...], ...] one list per strand
    strands: Optional[List[List[List[float]]]] = None


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from JavaScript.

    Args:
        input_json: JSON string with CalculatorInputs structure. A bare
            params object (no "params" key) is accepted too.

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        if not isinstance(data, dict):
            raise ValueError("Input must be a JSON object")
        if 'params' not in data:
            data = {'params': data}
        inputs = CalculatorInputs.model_validate(data)

        params = sanitize_params(inputs.params)
        result = evaluate_constraints(params)

        strands = None
        if inputs.include_geometry:
            strands = geometry_to_lists(generate_braid_geometry(params))

        output = CalculatorOutput(
            success=True,
            params=params.to_dict(),
            result=result.to_dict(),
            band=result.band.value,
            valid=result.valid,
            messages=[
                {
                    'severity': m.severity.value,
                    'code': m.code,
                    'message': m.message,
                }
                for m in result.messages
            ],
            summary=to_summary(params, result),
            markdown=to_markdown(params, result),
            share_query=to_query_string(params),
            strands=strands,
        )

        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except Exception as e:
        logger.warning(f"calculate() failed: {e}")
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()
