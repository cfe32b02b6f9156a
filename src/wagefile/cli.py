"""Command-line entry point: template, preview and generate.

Usage:
    wagefile template Employees.xlsx
    wagefile preview Employees.xlsx --batch 7
    wagefile generate Employees.xlsx --batch 7 --year 2025 --quarter 3 --output-dir out/
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Sequence

from wagefile.core.config import AppSettings, OutputConfig
from wagefile.core.exceptions import ValidationError, WageFileError
from wagefile.core.logging_config import configure_logging
from wagefile.output.artifact import quarter_for_month
from wagefile.persistence import create_file_store
from wagefile.services.generator import WageFileGenerator
from wagefile.sources.spreadsheet import SpreadsheetRowSource, write_template


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wagefile", description="Generate fixed-width employee wage files")
    sub = parser.add_subparsers(dest="command", required=True)

    template = sub.add_parser("template", help="Write a blank employee spreadsheet")
    template.add_argument("output", help="Destination .xlsx path")

    preview = sub.add_parser("preview", help="Show the encoded fields of the first row")
    preview.add_argument("input", help="Employee .xlsx file")
    preview.add_argument("--batch", required=True, help="Batch number")

    generate = sub.add_parser("generate", help="Write the quarterly wage file")
    generate.add_argument("input", help="Employee .xlsx file")
    generate.add_argument("--batch", required=True, help="Batch number")
    generate.add_argument("--year", type=int, default=None, help="Filing year (default: current)")
    generate.add_argument("--quarter", type=int, choices=[1, 2, 3, 4], default=None,
                          help="Filing quarter (default: current)")
    generate.add_argument("--output-dir", default=None, help="Output folder (local backend)")
    generate.add_argument("--trailing-newline", action="store_true", default=None,
                          help="End the file with a CRLF")
    return parser


def _settings_for(args: argparse.Namespace) -> AppSettings:
    output_dir = getattr(args, "output_dir", None)
    if output_dir:
        return AppSettings(output=OutputConfig(directory=output_dir))
    return AppSettings()


def run(args: argparse.Namespace, now: datetime | None = None) -> int:
    now = now or datetime.now()
    settings = _settings_for(args)
    configure_logging(settings.log_level)

    if args.command == "template":
        path = write_template(args.output)
        print(f"Template written to {path}")
        return 0

    rows = SpreadsheetRowSource(args.input).rows()
    generator = WageFileGenerator(file_store=create_file_store(settings), settings=settings)

    if args.command == "preview":
        record = generator.preview(rows, now, args.batch)
        print(f"Row {record.row_number}, line length {len(record.line)}")
        for slot in record.fields:
            print(f"{slot.index:>3} {slot.expected_length:>3} [{slot.rendered_value}] {slot.actual_length:>3}")
        print(record.line)
        return 0

    result = generator.generate(
        rows,
        now,
        args.batch,
        year=args.year if args.year is not None else now.year,
        quarter=args.quarter if args.quarter is not None else quarter_for_month(now.month),
        trailing_newline=args.trailing_newline,
    )
    print(f"Generated {result.record_count} record(s) at {result.path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except WageFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
