"""
Dump extraction entry points.

Each call reads the dump file from disk, scans it to completion and returns;
nothing is cached or shared between calls, so concurrent calls against the same
file are safe.

Usage:
    >>> from sql_dump_extractor import list_table_names, parse_table
    >>> if "users" in list_table_names("backup.sql"):
    ...     rows = parse_table("backup.sql", "users")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from sql_dump_extractor.config import get_settings
from sql_dump_extractor.parser import (
    DropHook,
    ParsedRow,
    TableExtraction,
    find_table_names,
    scan_table_rows,
)
from sql_dump_extractor.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DumpFile:
    """Whole dump file contents, read once."""

    path: Path
    text: str

    @classmethod
    def read(
        cls,
        path: PathLike,
        encoding: Optional[str] = None,
        errors: Optional[str] = None,
    ) -> "DumpFile":
        """
        Read a dump file into memory.

        Args:
            path: Path to the MySQL dump file.
            encoding: Text encoding, defaults to the configured dump_encoding.
            errors: Codec error handler, defaults to dump_encoding_errors.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file cannot be read.
        """
        dump_path = Path(path)
        if not dump_path.exists():
            raise FileNotFoundError(f"Dump file not found: {path}")

        settings = get_settings()
        with open(
            dump_path,
            "r",
            encoding=encoding or settings.dump_encoding,
            errors=errors or settings.dump_encoding_errors,
            newline="",
        ) as f:
            text = f.read()

        logger.debug(
            "extractor.dump_loaded",
            path=str(dump_path),
            size_chars=len(text),
        )
        return cls(path=dump_path, text=text)

    def lines(self) -> List[str]:
        """Lines without their ``\\n`` terminator."""
        return self.text.split("\n")


def extract_table(
    dump_path: PathLike,
    table_name: str,
    *,
    on_drop: Optional[DropHook] = None,
) -> TableExtraction:
    """
    Extract every row of ``table_name`` along with scan counters.

    Args:
        dump_path: Path to the MySQL dump file.
        table_name: Table name as written between backticks in the dump.
        on_drop: Called once for each row or statement that was skipped.

    Returns:
        TableExtraction with rows in statement order.
    """
    dump = DumpFile.read(dump_path)
    extraction = scan_table_rows(dump.lines(), table_name, on_drop=on_drop)

    logger.debug(
        "extractor.table_extracted",
        path=str(dump.path),
        table=table_name,
        statements=extraction.statements,
        rows=extraction.row_count,
    )
    return extraction


def parse_table(
    dump_path: PathLike,
    table_name: str,
    *,
    on_drop: Optional[DropHook] = None,
) -> List[ParsedRow]:
    """
    Return the rows of ``table_name`` as column -> value mappings.

    Malformed rows are skipped silently unless ``on_drop`` is given.

    Raises:
        FileNotFoundError: If the dump file does not exist.
        OSError: If the dump file cannot be read.
    """
    return extract_table(dump_path, table_name, on_drop=on_drop).rows


def list_table_names(dump_path: PathLike) -> Set[str]:
    """Return the names of all tables created in the dump (empty if none)."""
    return find_table_names(DumpFile.read(dump_path).text)


def summarize_tables(dump_path: PathLike) -> Dict[str, TableExtraction]:
    """
    Extract every table in the dump, keyed by name in sorted order.

    Each table is scanned independently, so this costs one file pass per table.
    """
    summary: Dict[str, TableExtraction] = {}
    for table_name in sorted(list_table_names(dump_path)):
        summary[table_name] = extract_table(dump_path, table_name)

    logger.info(
        "extractor.summary_complete",
        path=str(dump_path),
        tables=len(summary),
        total_rows=sum(t.row_count for t in summary.values()),
    )
    return summary
