#!/usr/bin/env python
"""
Dump the unit constant table to CSV

Usage:
    python scripts/dump_units.py [--output data/units.csv] [--namespaces unit units]

Output:
    data/units.csv — namespace, name, value (SI)
"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridunits.config import NAMESPACES, TableConfig
from gridunits.table import write_table


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Write SI unit constants (prefix/unit/units) to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full table
  python scripts/dump_units.py

  # Legacy well table only
  python scripts/dump_units.py --namespaces units --output data/legacy_units.csv
        """
    )

    parser.add_argument(
        "--output",
        type=str,
        default="data/units.csv",
        help="Output CSV path (default: data/units.csv)"
    )

    parser.add_argument(
        "--namespaces",
        nargs="*",
        default=None,
        help=f"Namespaces to include (default: all). Options: {', '.join(NAMESPACES)}"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress summary output"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.namespaces:
        invalid = set(args.namespaces) - set(NAMESPACES)
        if invalid:
            print(f"Error: Invalid namespaces: {sorted(invalid)}")
            print(f"Valid namespaces: {', '.join(NAMESPACES)}")
            sys.exit(1)

    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    cfg = TableConfig(namespaces=tuple(args.namespaces)) if args.namespaces else TableConfig()

    try:
        path = write_table(args.output, cfg)
    except ValueError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    if not args.quiet:
        print(f"✓ Saved unit table: {path}")
        print(f"Namespaces: {', '.join(cfg.namespaces)}")


if __name__ == "__main__":
    main()
