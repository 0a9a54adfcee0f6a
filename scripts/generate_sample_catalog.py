#!/usr/bin/env python3
"""Generate a sample ``properties.json`` catalog.

The file uses the same shape ``search_properties.py --catalog`` reads.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_finder.generators import PropertyGenerator
from property_finder.loaders import dump_catalog
from property_finder.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a sample property catalog")
    parser.add_argument("--count", type=int, default=25, help="Number of listings (default: 25)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("properties.json"),
        help="Output file (default: properties.json)",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    args = parser.parse_args(argv)

    setup_logging(level="INFO")

    generator = PropertyGenerator(seed=args.seed)
    written = dump_catalog(generator.generate_batch(args.count), args.output, pretty=args.pretty)
    print(f"Saved {written} properties to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
