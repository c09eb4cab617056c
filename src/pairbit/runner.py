"""
Command-line runner.

One-shot queries against a base pattern given on the command line.
Results are printed as JSON on stdout.

Exit codes:
  0  success
  1  hierarchy or parse error (kind + details as JSON on stderr)
  2  usage error (argparse)
"""

import argparse
import json
import logging
import sys

from .core import HierarchyError, DeterminismError, assert_double_run_equal
from .core.registry import DEFAULT_SEED
from .kernel import PairedEntity, hierarchy_levels, propagator_receipts
from .session import Session, ParseError, create_paired_entity, parse_unsigned

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairbit",
        description="Fractal complement-pair hierarchy queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Is 3 a member at width 4 of the hierarchy seeded by {0,3} at 2 bits?
  pairbit member 3 4 --base 0,3 --base-bits 2

  # Split a member into base leaves and rebuild it
  pairbit decompose 3 4 --base 0,3 --base-bits 2
  pairbit compose 0 3 --base 0,3 --base-bits 2

  # Reproducible sample at width 16
  pairbit random 16 --base 0,3 --base-bits 2 --seed 7

  # Hashed run record, checked twice for determinism
  pairbit receipts --base 0,3 --base-bits 2 --max-depth 4 --determinism-check
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr."
    )

    pattern_args = argparse.ArgumentParser(add_help=False)
    pattern_args.add_argument(
        "--base",
        type=str,
        required=True,
        help="Base values as a comma-separated list of decimals, e.g. '0,3'."
    )
    pattern_args.add_argument(
        "--base-bits",
        type=int,
        required=True,
        help="Base width n_base_bits."
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("member", parents=[pattern_args], help="Membership test")
    p.add_argument("x", type=str, help="Decimal value")
    p.add_argument("n_bits", type=int, help="Target width")

    p = sub.add_parser("decompose", parents=[pattern_args], help="Split into base leaves")
    p.add_argument("x", type=str, help="Decimal value")
    p.add_argument("n_bits", type=int, help="Target width")

    p = sub.add_parser("compose", parents=[pattern_args], help="Rebuild from base leaves")
    p.add_argument("components", nargs="+", help="Leaves in decomposition order")

    p = sub.add_parser("random", parents=[pattern_args], help="Sample a member")
    p.add_argument("n_bits", type=int, help="Target width")
    p.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Offset added to the session seed counter (default: 0)."
    )

    p = sub.add_parser("pair", help="Value and its complement")
    p.add_argument("x", type=str, help="Decimal value")
    p.add_argument("n_bits", type=int, help="Width")
    p.add_argument(
        "--canonical",
        action="store_true",
        help="Order the pair smaller-first."
    )

    p = sub.add_parser("receipts", parents=[pattern_args], help="Hashed run record")
    p.add_argument(
        "--max-depth",
        type=int,
        default=3,
        help="Record widths base_bits * 2^k for k in 0..max-depth (default: 3)."
    )
    p.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"LcgSource seed (default: {DEFAULT_SEED})."
    )
    p.add_argument(
        "--determinism-check",
        action="store_true",
        help="Build the record twice and compare section hashes."
    )

    return parser


def run(args: argparse.Namespace):
    """Execute one parsed command and return its JSON-serializable result."""
    if args.command == "pair":
        if args.canonical:
            entity = PairedEntity.new_canonical_from_x(parse_unsigned(args.x, "x"), args.n_bits)
            return {"x": str(entity.x), "x_prime": str(entity.x_prime), "n_bits": entity.n_bits}
        return create_paired_entity(args.x, args.n_bits)

    session = Session()
    session.configure(args.base, args.base_bits)

    if args.command == "member":
        return {"is_member": session.is_member(args.x, args.n_bits)}

    if args.command == "decompose":
        return {"components": session.decompose(args.x, args.n_bits)}

    if args.command == "compose":
        return session.compose(args.components)

    if args.command == "random":
        return {"value": session.random_member(args.n_bits, args.seed)}

    if args.command == "receipts":
        levels = hierarchy_levels(args.base_bits, args.max_depth)
        propagator = session.propagator
        if args.determinism_check:
            assert_double_run_equal(
                lambda: propagator_receipts(propagator, levels, args.seed)
            )
            logger.info("double-run determinism check passed")
        digest = propagator_receipts(propagator, levels, args.seed).digest()
        if args.determinism_check:
            digest["determinism.double_run_ok"] = True
        return digest

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        result = run(args)
    except HierarchyError as e:
        print(json.dumps({"error": e.kind, "details": _jsonable(e.details()),
                          "message": str(e)}), file=sys.stderr)
        return 1
    except ParseError as e:
        print(json.dumps({"error": "ParseError", "details": {"text": e.text, "what": e.what},
                          "message": str(e)}), file=sys.stderr)
        return 1
    except DeterminismError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


# Error fields holding hierarchy values; widths and counts stay JSON ints
_VALUE_FIELDS = frozenset({"value", "max_val", "val1", "val2_complement"})


def _jsonable(details: dict) -> dict:
    """Values as decimal strings, widths and counts as ints, like success output."""
    return {k: str(v) if k in _VALUE_FIELDS else v for k, v in details.items()}


if __name__ == "__main__":
    sys.exit(main())
