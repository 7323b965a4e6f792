"""Command-line sampler for the easing table.

Run:
    python -m tick_ease --list
    python -m tick_ease cubic_in_out --samples 20
    python -m tick_ease elastic-out --json
"""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys

from tick_ease.config import SampleConfig
from tick_ease.kinds import UnknownEasingError
from tick_ease.sampling import sample
from tick_ease.table import EASINGS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick-ease",
        description="Sample easing curves from the tick-ease table",
    )
    parser.add_argument(
        "name", nargs="?", default=None,
        help="Easing name, e.g. cubic_in_out (see --list)",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="Print every registered easing name and exit",
    )
    parser.add_argument(
        "--samples", type=int, default=10,
        help="Number of intervals between start and end (default: 10)",
    )
    parser.add_argument(
        "--start", type=float, default=0.0,
        help="First progress value (default: 0.0)",
    )
    parser.add_argument(
        "--end", type=float, default=1.0,
        help="Last progress value (default: 1.0)",
    )
    parser.add_argument(
        "--precision", type=int, default=6,
        help="Decimal digits in the output (default: 6)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Emit a JSON array of [x, y] pairs instead of a table (non-finite values as null)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def _format_table(points: list[tuple[float, float]], precision: int) -> str:
    cells = [(f"{x:.{precision}f}", f"{y:.{precision}f}") for x, y in points]
    width = max(len(x) for x, _ in cells)
    lines = [f"{'x'.rjust(width)}  y"]
    lines.extend(f"{x.rjust(width)}  {y}" for x, y in cells)
    return "\n".join(lines)


def _json_points(points: list[tuple[float, float]]) -> list[list[float | None]]:
    # JSON has no NaN or Infinity; non-finite values become null.
    return [[v if math.isfinite(v) else None for v in p] for p in points]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.list:
        for name in EASINGS:
            print(name)
        return 0

    if args.name is None:
        parser.print_usage(sys.stderr)
        print("tick-ease: error: an easing name or --list is required", file=sys.stderr)
        return 2

    try:
        config = SampleConfig(
            samples=args.samples,
            start=args.start,
            end=args.end,
            precision=args.precision,
        )
    except ValueError as exc:
        print(f"tick-ease: error: {exc}", file=sys.stderr)
        return 2

    try:
        points = sample(args.name, config)
    except UnknownEasingError as exc:
        print(f"tick-ease: error: unknown easing {exc.name!r} (try --list)", file=sys.stderr)
        return 2

    logger.debug("sampled %s at %d points", args.name, len(points))
    if args.json:
        print(json.dumps(_json_points(points), allow_nan=False))
    else:
        print(_format_table(points, config.precision))
    return 0


if __name__ == "__main__":
    sys.exit(main())
