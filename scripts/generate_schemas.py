#!/usr/bin/env python3
"""
Generate JSON Schemas from Pydantic models.

The front-end types are generated from these:
1. Pydantic models (source of truth) -> JSON Schema
2. JSON Schema -> TypeScript types

Usage:
    python scripts/generate_schemas.py
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from braidpreflight.io.loaders import BraidParams
from braidpreflight.io.schema import SCHEMA_VERSION
from braidpreflight.calculator.js_bridge import CalculatorInputs, CalculatorOutput
from braidpreflight.enums import Severity, ScoreBand

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def get_model_schema(model_class) -> dict:
    """Get JSON schema from a Pydantic model.

    Uses by_alias=True: the wire format (files, share links, the bridge)
    uses the camelCase names.
    """
    return model_class.model_json_schema(by_alias=True)


def main():
    output_dir = Path(__file__).parent.parent / "schemas"
    output_dir.mkdir(exist_ok=True)

    print("Generating JSON schemas from Pydantic models...")

    models = {
        "braid-params": (BraidParams, "Braid manufacturing parameters"),
        "calculator-inputs": (CalculatorInputs, "Input of js_bridge.calculate()"),
        "calculator-output": (CalculatorOutput, "Output of js_bridge.calculate()"),
    }

    for name, (model, description) in models.items():
        schema = get_model_schema(model)
        schema["$schema"] = JSON_SCHEMA_DIALECT
        schema["description"] = description

        schema_file = output_dir / f"{name}-v{SCHEMA_VERSION}.json"
        with open(schema_file, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"  Generated: {schema_file}")

    enums_schema = {
        "$schema": JSON_SCHEMA_DIALECT,
        "title": "BraidPreflightEnums",
        "description": "Enum definitions for braid preflight types",
        "definitions": {
            "Severity": {
                "type": "string",
                "enum": [e.value for e in Severity],
                "description": "Constraint message severity"
            },
            "ScoreBand": {
                "type": "string",
                "enum": [e.value for e in ScoreBand],
                "description": "Manufacturability status label"
            },
        }
    }

    enums_file = output_dir / f"enums-v{SCHEMA_VERSION}.json"
    with open(enums_file, "w") as f:
        json.dump(enums_schema, f, indent=2)
    print(f"  Generated: {enums_file}")

    print(f"\nAll schemas written to: {output_dir}/")


if __name__ == "__main__":
    main()
