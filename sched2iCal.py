#!/usr/bin/env python3
"""Faculty schedule to iCalendar converter.

Reads a weekly .cccsched schedule file and writes an iCalendar (.ics) file
with one event per scheduled block for every day of the given period.
"""

import argparse
import logging
import sys
from typing import Optional

from loader import ScheduleExportError, load_path
from transformer import FileSink, ICalTransformer, expand


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a .cccsched faculty schedule to iCalendar format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 sched2iCal.py fall.cccsched --start-date 2025-08-25 --end-date 2025-12-12
  python3 sched2iCal.py fall.cccsched --start-date 2025-08-25 --end-date 2025-12-12 --output fall.ics
        """
    )

    parser.add_argument(
        "schedule_file",
        help="Path to the .cccsched file exported by the schedule builder"
    )

    parser.add_argument(
        "--start-date",
        default=None,
        help="First day of the semester (format: YYYY-MM-DD)"
    )

    parser.add_argument(
        "--end-date",
        default=None,
        help="Last day of the semester, inclusive (format: YYYY-MM-DD)"
    )

    parser.add_argument(
        "-o", "--output",
        default=ICalTransformer.OUTPUT_FILENAME,
        help=f"Output file path (default: {ICalTransformer.OUTPUT_FILENAME})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped schedule items and other details"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the converter."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    # Ensure output file has .ics extension
    output_path = args.output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    try:
        schedule = load_path(args.schedule_file)
        if schedule.is_empty:
            print("Warning: The schedule file has no entries for any day.")

        document = expand(
            schedule,
            args.start_date,
            args.end_date,
            sink=FileSink(output_path)
        )

        print(f"Generated {len(document)} calendar events.")

        if not document.events:
            print("Warning: No events generated. The output file has no events.")

        print(f"Schedule saved to: {output_path}")
        print(f"Period: {args.start_date} to {args.end_date}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except ScheduleExportError as e:
        logging.getLogger(__name__).debug("Export failed: %s", e)
        print(f"Error: {e.user_message}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Could not access file: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
