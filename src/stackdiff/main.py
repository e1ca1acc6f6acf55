import argparse
import sys
from typing import List, Optional

from .controller.diff_loop import run_diff
from .diff.columns import parse_column_list, parse_display_unit, supported_column_names
from .errors import StackDiffError
from .utils.config import get_settings


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    p = argparse.ArgumentParser(
        prog="stackdiff",
        description="Compare call-stack profiles against a baseline",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stackdiff diff before.json after.json
  stackdiff diff --unit auto --threshold 0.5 base.json a.json b.json
  stackdiff diff --columns total,p99,invocations base.json new.json
        """,
    )
    sub = p.add_subparsers(dest="command", required=True)

    d = sub.add_parser("diff", help="N-way diff of two or more profiles; the first is the baseline")
    d.add_argument("profiles", nargs="*", metavar="PROFILE",
                   help="Profile JSON files; the first one is the baseline")
    d.add_argument("--columns", default=settings.display_columns,
                   help=f"Columns to show, any of: {supported_column_names()} "
                        f"(default: {settings.display_columns})")
    d.add_argument("--unit", default=settings.display_unit,
                   help=f"Display unit: ns, us, ms or auto (default: {settings.display_unit})")
    d.add_argument("--threshold", type=float, default=settings.display_threshold,
                   help="Changes smaller than this (in display units) are shown as (--) "
                        f"(default: {settings.display_threshold})")
    color = d.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_true", default=None,
                       help="Always emit ANSI colors")
    color.add_argument("--no-color", dest="color", action="store_false", default=None,
                       help="Never emit ANSI colors")
    return p


def _cli(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.threshold < 0:
        parser.error("--threshold must be non-negative")
    try:
        run_diff(
            args.profiles,
            parse_column_list(args.columns),
            unit=parse_display_unit(args.unit),
            threshold=args.threshold,
            color=args.color,
        )
    except StackDiffError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


def main():
    sys.exit(_cli())


if __name__ == "__main__":
    main()
