"""
Command-line interface for braid preflight checks and geometry export.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qs

from pydantic import ValidationError

from ..io.loaders import BraidParams, load_params_json, save_params_json
from ..core.helix import generate_braid_geometry, geometry_to_lists, helix_turns
from ..calculator.constraints import evaluate_constraints
from ..calculator.output import to_json, to_markdown, to_summary
from ..calculator.sanitize import DEFAULT_PARAMS, sanitize_params, share_url

logger = logging.getLogger(__name__)

# CLI flag dest -> camelCase field name
_PARAM_FLAGS = {
    'radius': 'radius',
    'length': 'length',
    'strand_count': 'strandCount',
    'angle': 'angleDeg',
    'tension': 'tension',
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="braidpreflight",
        description="Check braid manufacturability and export strand geometry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Assess the default braid (r=12, L=120, 24 strands, 55°, tension 0.55)
  braidpreflight

  # Dense, high-tension braid, full Markdown report
  braidpreflight --radius 3 --length 50 --strand-count 60 --angle 30 --tension 0.8 --format markdown

  # Parameters from a share link
  braidpreflight --query "radius=8&length=90&strandCount=36&angleDeg=40&tension=0.7"

  # Parameters from a saved file, export preview points and STEP wires
  braidpreflight --params braid.json --geometry-out strands.json --step braid.step

  # Use in CI: non-zero exit status when the braid has errors
  braidpreflight --params braid.json --fail-on-error
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--params',
        type=str,
        default=None,
        help='JSON params file (saved document or bare params object)'
    )
    source.add_argument(
        '--query',
        type=str,
        default=None,
        help='Share-link query string, e.g. "radius=12&strandCount=24"'
    )

    parser.add_argument('--radius', type=float, default=None, help='Tube radius in mm (2-40)')
    parser.add_argument('--length', type=float, default=None, help='Braid length in mm (20-300)')
    parser.add_argument('--strand-count', type=float, default=None, help='Number of strands (6-72)')
    parser.add_argument('--angle', type=float, default=None, help='Braid angle in degrees (10-85)')
    parser.add_argument('--tension', type=float, default=None, help='Normalized tension (0-1)')

    parser.add_argument(
        '--no-clamp',
        action='store_true',
        help='Use parameters as given instead of clamping them to their ranges'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'markdown', 'json'],
        default='summary',
        help='Report format on stdout (default: summary)'
    )

    parser.add_argument(
        '--geometry-out',
        type=str,
        default=None,
        help='Write strand points as JSON to this file'
    )

    parser.add_argument(
        '--step',
        type=str,
        default=None,
        help='Export strand wires to a STEP file (requires build123d)'
    )

    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Save the (sanitized) parameters to a JSON file'
    )

    parser.add_argument(
        '--share-url',
        type=str,
        default=None,
        metavar='BASE_URL',
        help='Print a share link for the parameters using this base URL'
    )

    parser.add_argument(
        '--fail-on-error',
        action='store_true',
        help='Exit with status 1 when the assessment reports errors'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Debug logging'
    )

    return parser


def _collect_raw_params(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge defaults, file/query source and explicit flags (flags win)."""
    raw: Dict[str, Any] = DEFAULT_PARAMS.to_dict()

    if args.params:
        raw.update(load_params_json(args.params).to_dict())
    elif args.query:
        query = args.query[1:] if args.query.startswith('?') else args.query
        parsed = parse_qs(query, keep_blank_values=True)
        raw.update({key: values[0] for key, values in parsed.items()})

    for dest, wire_name in _PARAM_FLAGS.items():
        value = getattr(args, dest)
        if value is not None:
            raw[wire_name] = value

    return raw


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        raw = _collect_raw_params(args)
        if args.no_clamp:
            params = BraidParams.model_validate(raw)
        else:
            params = sanitize_params(raw)
    except (OSError, ValueError, ValidationError) as e:
        # json.JSONDecodeError and FileNotFoundError land here too
        print(f"Error loading parameters: {e}", file=sys.stderr)
        return 2

    try:
        result = evaluate_constraints(params)
        # Singular angle exits 2 whatever the --format
        helix_turns(params)
        needs_geometry = args.geometry_out or args.step
        strands = generate_braid_geometry(params) if needs_geometry else None
    except ValueError as e:
        print(f"Error: cannot evaluate parameters: {e}", file=sys.stderr)
        return 2

    if args.format == 'json':
        print(to_json(params, result))
    elif args.format == 'markdown':
        print(to_markdown(params, result))
    else:
        print(to_summary(params, result))
        for msg in result.errors:
            print(f"  ERROR: {msg}")
        for msg in result.warnings:
            print(f"  WARNING: {msg}")

    if args.geometry_out:
        output_path = Path(args.geometry_out)
        with open(output_path, 'w') as f:
            json.dump({
                'params': params.to_dict(),
                'strands': geometry_to_lists(strands),
            }, f)
        logger.info(f"Saved {len(strands)} strands to {output_path}")

    if args.step:
        try:
            from ..core.braid import BraidGeometry
        except ImportError:
            print("Error: STEP export requires build123d (pip install braidpreflight[cad])",
                  file=sys.stderr)
            return 2
        BraidGeometry(params, strands).export_step(args.step)

    if args.save_json:
        save_params_json(params, args.save_json)
        logger.info(f"Saved parameters to {args.save_json}")

    if args.share_url:
        print(share_url(args.share_url, params))

    if args.fail_on_error and not result.valid:
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
