"""Output formatters for braid assessments.

Converts BraidParams + ConstraintResult to JSON, Markdown and a one-line
summary.
"""

import json
from typing import List, Optional

from ..core.helix import Strand, geometry_to_lists, helix_turns
from ..io.loaders import BraidParams
from ..io.schema import SCHEMA_VERSION
from .constants import PARAM_UNITS, SCORE_MAX
from .constraints import ConstraintResult, strand_spacing


def to_json(
    params: BraidParams,
    result: ConstraintResult,
    strands: Optional[List[Strand]] = None,
    indent: int = 2,
) -> str:
    """Convert an assessment to a JSON export document.

    Args:
        params: Evaluated parameters
        result: Constraint result for params
        strands: Optional preview geometry to embed
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, params, result and optional strands
    """
    data = {
        'schema_version': SCHEMA_VERSION,
        'params': params.to_dict(),
        'result': result.to_dict(),
        'band': result.band.value,
    }

    if strands is not None:
        data['strands'] = geometry_to_lists(strands)

    return json.dumps(data, indent=indent, ensure_ascii=False)


def _format_value(value: float, unit: str) -> str:
    text = f"{value:g}"
    if unit == "°":
        return f"{text}°"
    return f"{text} {unit}" if unit else text


def to_markdown(params: BraidParams, result: ConstraintResult) -> str:
    """Render an assessment as a Markdown report."""
    lines = [
        "# Braid Manufacturability Report",
        "",
        f"**Score:** {result.manufacturability_score} / {SCORE_MAX} ({result.band.value})",
        "",
        "## Parameters",
        "",
        "| Parameter | Value |",
        "|-----------|-------|",
    ]

    for name, value in params.to_dict().items():
        lines.append(f"| {name} | {_format_value(value, PARAM_UNITS[name])} |")

    lines.append(f"| strand spacing | {strand_spacing(params):.2f} mm |")
    lines.append("")

    for title, items, icon in (
        ("Errors", result.errors, "✖"),
        ("Warnings", result.warnings, "⚠"),
    ):
        lines.append(f"## {title} ({len(items)})")
        lines.append("")
        if items:
            lines.extend(f"- {icon} {msg}" for msg in items)
        else:
            lines.append("No issues detected.")
        lines.append("")

    return "\n".join(lines)


def to_summary(params: BraidParams, result: ConstraintResult) -> str:
    """One-line summary, e.g. for the CLI or a status bar."""
    return (
        f"Braid r={params.radius:g}mm L={params.length:g}mm "
        f"{params.strand_count} strands @ {params.angle_deg:g}° "
        f"({helix_turns(params):.2f} turns), tension {params.tension:g}: "
        f"score {result.manufacturability_score}/{SCORE_MAX} [{result.band.value}], "
        f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
