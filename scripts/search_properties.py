#!/usr/bin/env python3
"""Search a property catalog from the command line.

With a query on the command line, prints the report for it and exits.
Without one, reads queries interactively until ``exit``.

Examples::

    python scripts/search_properties.py --catalog properties.json "3 bedroom"
    python scripts/search_properties.py
"""

import argparse
import sys
from pathlib import Path
from typing import TextIO

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_finder.config import CatalogConfig, PropertyFinderConfig
from property_finder.exceptions import ConfigurationError, PropertyFinderError
from property_finder.generators import PropertyGenerator
from property_finder.loaders import load_catalog
from property_finder.logging import get_logger, setup_logging
from property_finder.query import PropertySearchService
from property_finder.store import CatalogStore

logger = get_logger(__name__)

HELP_TEXT = """\
Property search help:
  Search by type: 'apartment', 'house', 'condo', 'loft', 'townhouse', 'penthouse'
  Filter by price: 'under $500,000', 'between $400,000 and $600,000'
  Filter by bedrooms: '2 bedroom', '3 bed'
  Pet-friendly: 'pet friendly properties', 'allows dogs'
  General search: 'downtown', 'waterfront', 'modern'
  Type 'exit' to quit"""


def build_catalog(config: CatalogConfig) -> CatalogStore:
    """Load the configured catalog file, or generate a sample catalog."""
    if config.path is not None:
        return load_catalog(config.path)

    logger.info("No catalog file configured, generating %d sample properties", config.sample_size)
    generator = PropertyGenerator(seed=config.seed)
    return CatalogStore(generator.generate_batch(config.sample_size))


def run_interactive(service: PropertySearchService, stdin: TextIO, stdout: TextIO) -> None:
    """Answer queries read from ``stdin`` until ``exit`` or end of input."""
    print("Type 'exit' to quit, 'help' for examples.", file=stdout)
    while True:
        print("\nYou: ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break

        query = line.strip()
        if not query:
            continue
        if query.lower() == "exit":
            print("Goodbye!", file=stdout)
            break
        if query.lower() == "help":
            print(HELP_TEXT, file=stdout)
            continue

        print(f"\n{service.process_query(query)}", file=stdout)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = PropertyFinderConfig.from_env()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    parser = argparse.ArgumentParser(description="Search a property catalog")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=config.catalog.path,
        help="Catalog JSON file (default: $PROPERTY_CATALOG_PATH, else a generated sample)",
    )
    parser.add_argument("--seed", type=int, default=config.catalog.seed, help="Seed for the sample catalog")
    parser.add_argument("--log-level", default=config.log_level, help="Log level (default: INFO)")
    parser.add_argument("query", nargs="*", help="Query to run; omit for interactive mode")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, format_type=config.log_format)

    config.catalog.path = args.catalog
    config.catalog.seed = args.seed
    try:
        catalog = build_catalog(config.catalog)
    except PropertyFinderError as exc:
        logger.error("Could not load catalog: %s", exc)
        return 1

    service = PropertySearchService(catalog, config.search)
    summary = catalog.summary()
    print(f"Loaded {summary['available']} available properties ({summary['pet_friendly']} pet-friendly)")

    if args.query:
        print(service.process_query(" ".join(args.query)))
    else:
        run_interactive(service, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
