"""
Sweep strand count for a fixed tube and show where density becomes a problem.

For each strand count the strand spacing, score and status are printed.
Optionally writes the preview of the last clean configuration to STEP.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from braidpreflight.calculator import (
    DEFAULT_PARAMS,
    evaluate_constraints,
    sanitize_params,
    strand_spacing,
)

print("=" * 70)
print("STRAND COUNT SWEEP")
print("=" * 70)
print()

base = DEFAULT_PARAMS.to_dict()
base["radius"] = 6.0
print(f"Tube: radius {base['radius']}mm, length {base['length']}mm, "
      f"angle {base['angleDeg']}°, tension {base['tension']}")
print()

print(f"{'strands':>8} {'spacing':>10} {'score':>6}  status")
last_clean = None
for count in range(6, 73, 6):
    params = sanitize_params({**base, "strandCount": count})
    result = evaluate_constraints(params)
    print(f"{count:>8} {strand_spacing(params):>8.2f}mm {result.manufacturability_score:>6}  "
          f"{result.band.value}")
    if not result.messages:
        last_clean = params

print()
if last_clean is None:
    print("No strand count is free of warnings for this tube.")
    sys.exit(0)

print(f"Densest clean braid: {last_clean.strand_count} strands")

if "--step" in sys.argv:
    from braidpreflight.core.braid import BraidGeometry
    BraidGeometry(last_clean).export_step("braid_sweep.step")
    print("Saved braid_sweep.step")
