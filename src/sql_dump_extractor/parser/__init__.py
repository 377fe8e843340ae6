"""
MySQL dump parsing core.

Layered leaves first: value lexer, row tuple splitter, statement scanner, plus
table name discovery.
"""

from .models import DropHook, DroppedRow, DropReason, ParsedRow, TableExtraction
from .statements import StatementScanner, scan_table_rows
from .tables import find_table_names
from .tuples import ScanState, iter_structural, split_row_tuples, split_rows, split_values
from .values import TypedValue, lex_value, unescape_sql_string

__all__ = [
    "DropHook",
    "DroppedRow",
    "DropReason",
    "ParsedRow",
    "ScanState",
    "StatementScanner",
    "TableExtraction",
    "TypedValue",
    "find_table_names",
    "iter_structural",
    "lex_value",
    "scan_table_rows",
    "split_row_tuples",
    "split_rows",
    "split_values",
    "unescape_sql_string",
]
