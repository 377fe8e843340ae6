"""
SQL dump extractor.

Reconstructs typed row data for a named table directly from the ``INSERT INTO``
statements of a MySQL logical dump, without a SQL engine.
"""

__version__ = "0.1.0"

from sql_dump_extractor.extractor import (  # noqa: E402
    DumpFile,
    extract_table,
    list_table_names,
    parse_table,
    summarize_tables,
)

__all__ = [
    "DumpFile",
    "extract_table",
    "list_table_names",
    "parse_table",
    "summarize_tables",
]
