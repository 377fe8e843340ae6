"""
File export for extracted table rows.

Writes ParsedRow lists to CSV or JSON. Output directories are created on
demand; I/O failures are logged and re-raised.
"""

import csv
import io
import json
from pathlib import Path
from typing import List, Sequence

from sql_dump_extractor.parser import ParsedRow
from sql_dump_extractor.utils.logging import get_logger

logger = get_logger(__name__)

EXPORT_FORMATS = ("json", "csv")


def _csv_cell(value: object) -> object:
    return "" if value is None else value


def _write_csv(rows: Sequence[ParsedRow], columns: Sequence[str], handle) -> None:
    writer = csv.writer(handle)
    writer.writerow(columns)
    for row in rows:
        writer.writerow([_csv_cell(row.get(column)) for column in columns])


def render_rows(
    rows: Sequence[ParsedRow], columns: Sequence[str], fmt: str = "json"
) -> str:
    """Render rows as a JSON array or CSV text (header first)."""
    if fmt == "json":
        return json.dumps(list(rows), ensure_ascii=False, indent=2)
    if fmt == "csv":
        buffer = io.StringIO(newline="")
        _write_csv(rows, columns, buffer)
        return buffer.getvalue()
    raise ValueError(f"Unsupported export format: {fmt} (expected one of {EXPORT_FORMATS})")


def _ensure_parent(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("exporter.mkdir_failed", output_dir=str(path.parent), error=str(e))
        raise


def write_rows_csv(
    rows: Sequence[ParsedRow], columns: Sequence[str], path: Path
) -> Path:
    """
    Write rows to a CSV file with a header line.

    Args:
        rows: Extracted rows
        columns: Column order for the header and cells
        path: Destination file

    Returns:
        The path written

    Raises:
        OSError: If directory creation or file writing fails
    """
    path = Path(path)
    _ensure_parent(path)
    try:
        with path.open("w", newline="", encoding="utf-8") as f:
            _write_csv(rows, columns, f)
    except OSError as e:
        logger.error("exporter.write_failed", filepath=str(path), error=str(e))
        raise

    logger.info("exporter.csv_written", filepath=str(path), count=len(rows))
    return path


def write_rows_json(rows: Sequence[ParsedRow], path: Path) -> Path:
    """Write rows to a UTF-8 JSON array file."""
    path = Path(path)
    _ensure_parent(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(list(rows), f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error("exporter.write_failed", filepath=str(path), error=str(e))
        raise

    logger.info("exporter.json_written", filepath=str(path), count=len(rows))
    return path


def export_rows(
    rows: List[ParsedRow], columns: Sequence[str], path: Path, fmt: str
) -> Path:
    """Write rows to ``path`` in ``fmt`` (json or csv)."""
    if fmt == "csv":
        return write_rows_csv(rows, columns, path)
    if fmt == "json":
        return write_rows_json(rows, path)
    raise ValueError(f"Unsupported export format: {fmt} (expected one of {EXPORT_FORMATS})")
