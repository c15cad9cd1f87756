#!/usr/bin/env python
"""Convert ACF annual report PDFs into normalized CSV files.

Usage:
    # Convert every report under the configured input folder
    python scripts/convert_reports.py

    # Use custom configuration file
    python scripts/convert_reports.py --config path/to/config.yaml

    # Keep converting after a report fails, report all failures at the end
    python scripts/convert_reports.py --keep-going

    # List what would be converted without extracting or writing
    python scripts/convert_reports.py --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

# Add package to path (allows running without installation)
SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

from acf_report_csv.config import Settings  # noqa: E402
from acf_report_csv.exceptions import ConversionFailed, ReportConversionError  # noqa: E402
from acf_report_csv.orchestration import plan_conversion, run_conversion  # noqa: E402
from acf_report_csv.processors import ReportKind  # noqa: E402
from acf_report_csv.utils import setup_logging  # noqa: E402


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Convert ACF annual report PDFs into CSV files keyed by state and year",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Convert all reports
  %(prog)s --keep-going             # Do not stop at the first failing report
  %(prog)s --dry-run                # Show what would be converted
  %(prog)s --config custom.yaml     # Use custom config
        """,
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="config/config.yaml",
        help="Path to configuration file (default: config/config.yaml)",
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Convert remaining reports after a failure and report all failures at the end",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Route the discovered PDFs and list them without converting",
    )

    return parser.parse_args(argv)


def print_plan(plan) -> None:
    """Print the dry-run listing."""
    for pdf_path, descriptor, action in plan:
        if descriptor is None:
            print(f"  ERROR    {pdf_path.name}: {action}")
        elif descriptor.kind is ReportKind.YEARLY:
            print(f"  {action:<8} {pdf_path.name} -> {descriptor.output_file_name} ({descriptor.start_year})")
        else:
            print(
                f"  {action:<8} {pdf_path.name} -> {descriptor.output_file_name} "
                f"({descriptor.start_year}-{descriptor.end_year})"
            )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        # Directories are created by run_conversion, so a dry run writes nothing
        settings = Settings.from_yaml(args.config)
    except (FileNotFoundError, KeyError, TypeError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger("convert_reports").error(f"Configuration error: {e}")
        return 1

    logger = setup_logging(settings.logging, verbose=args.verbose)
    logger.info(f"Project: {settings.project['name']} v{settings.project['version']}")

    try:
        if args.dry_run:
            logger.info("DRY RUN MODE - No files will be written")
            print_plan(plan_conversion(settings))
            return 0

        fail_fast = False if args.keep_going else None
        summary = run_conversion(settings, fail_fast=fail_fast)

        for name, count in sorted(summary.records.items()):
            logger.info(f"  {name}: {count} record(s)")
        return 0

    except ConversionFailed as e:
        logger.error(str(e))
        return 1

    except ReportConversionError as e:
        logger.error(f"Conversion stopped: {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("Conversion interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
