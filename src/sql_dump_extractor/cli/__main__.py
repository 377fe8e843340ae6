"""
Command-line interface for the SQL dump extractor.

Usage:
    # List tables declared in a dump
    python -m sql_dump_extractor.cli tables backup.sql

    # List tables with extracted row counts
    python -m sql_dump_extractor.cli tables backup.sql --summary

    # Print one table as JSON
    python -m sql_dump_extractor.cli extract backup.sql users

    # Write one table as CSV
    python -m sql_dump_extractor.cli extract backup.sql users --format csv \\
        --output output/users.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sql_dump_extractor.config import get_settings
from sql_dump_extractor.extractor import extract_table, list_table_names, summarize_tables
from sql_dump_extractor.io.exporter import EXPORT_FORMATS, export_rows, render_rows
from sql_dump_extractor.parser import DroppedRow, ParsedRow
from sql_dump_extractor.utils.logging import configure_logging


def _row_columns(rows: List[ParsedRow], fallback: List[str]) -> List[str]:
    """Column order for tabular output: first-seen order across all rows."""
    columns: List[str] = []
    seen = set()
    for row in rows:
        for column in row:
            if column not in seen:
                seen.add(column)
                columns.append(column)
    return columns or list(fallback)


def cmd_tables(args: argparse.Namespace) -> int:
    """List the tables declared in the dump."""
    try:
        if args.summary:
            summary = summarize_tables(args.dump_file)
            print(f"Found {len(summary)} tables:\n")
            for i, (name, extraction) in enumerate(summary.items(), 1):
                print(
                    f"  {i:2}. {name}: {extraction.row_count:,} rows"
                    f" ({extraction.dropped:,} dropped)"
                )
        else:
            names = sorted(list_table_names(args.dump_file))
            print(f"Found {len(names)} tables:\n")
            for i, name in enumerate(names, 1):
                print(f"  {i:2}. {name}")
        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading dump file: {e}", file=sys.stderr)
        return 1


def cmd_extract(args: argparse.Namespace) -> int:
    """Extract one table and print or save its rows."""
    dropped: List[DroppedRow] = []

    try:
        available = list_table_names(args.dump_file)
        if available and args.table not in available:
            print(f"Error: Table '{args.table}' not found in dump file.", file=sys.stderr)
            print(f"Available tables: {', '.join(sorted(available))}", file=sys.stderr)
            return 1

        extraction = extract_table(args.dump_file, args.table, on_drop=dropped.append)
        columns = _row_columns(extraction.rows, extraction.columns)
        fmt = args.format or get_settings().export_format

        output = args.output
        if output is None and args.save:
            output = Path(get_settings().export_dir) / f"{args.table}.{fmt}"

        if output is None:
            print(render_rows(extraction.rows, columns, fmt))
        else:
            path = export_rows(extraction.rows, columns, Path(output), fmt)
            print(f"Wrote {extraction.row_count:,} rows to {path}", file=sys.stderr)

        if dropped:
            print(f"Dropped {len(dropped):,} rows", file=sys.stderr)
            if args.show_dropped:
                for item in dropped:
                    print(
                        f"  statement {item.statement}: {item.reason.value}"
                        f" (expected {item.expected} values, got {len(item.values)})",
                        file=sys.stderr,
                    )
        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="sql_dump_extractor.cli",
        description="Extract table rows from MySQL dump files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    tables_parser = subparsers.add_parser(
        "tables", help="List tables declared in the dump file"
    )
    tables_parser.add_argument("dump_file", help="Path to MySQL dump file")
    tables_parser.add_argument(
        "--summary",
        "-s",
        action="store_true",
        help="Extract every table and show row counts",
    )

    extract_parser = subparsers.add_parser(
        "extract", help="Extract the rows of one table"
    )
    extract_parser.add_argument("dump_file", help="Path to MySQL dump file")
    extract_parser.add_argument("table", help="Table name as written in the dump")
    extract_parser.add_argument(
        "--format",
        "-f",
        choices=EXPORT_FORMATS,
        default=None,
        help="Output format (default: DUMPX_EXPORT_FORMAT or json)",
    )
    extract_parser.add_argument(
        "--output", "-o", default=None, help="Write rows to this file"
    )
    extract_parser.add_argument(
        "--save",
        action="store_true",
        help="Write rows to <DUMPX_EXPORT_DIR>/<table>.<format>",
    )
    extract_parser.add_argument(
        "--show-dropped",
        action="store_true",
        help="List every dropped row on stderr",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG, force=True)

    if args.command == "tables":
        return cmd_tables(args)
    elif args.command == "extract":
        return cmd_extract(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
