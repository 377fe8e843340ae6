"""
Statement scanner for MySQL dump files.

Walks the dump line by line looking for ``INSERT INTO `<table>``` headers of
one target table, buffers each statement until the line that ends it with
``;``, then splits the ``VALUES`` tail into rows and zips every row against
the statement's column list.

Rows whose value count differs from the column count are dropped. Nothing is
logged per row; pass ``on_drop`` to observe drops.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional

from sql_dump_extractor.parser.models import (
    DropHook,
    DroppedRow,
    DropReason,
    TableExtraction,
)
from sql_dump_extractor.parser.tuples import split_rows, split_values
from sql_dump_extractor.parser.values import lex_value

# Keywords are case-insensitive, identifiers are not.
INSERT_PREFIX = r"\s*(?i:INSERT)\s+(?:(?i:IGNORE)\s+)?(?i:INTO)\s+`{table}`"
CREATE_PREFIX = (
    r"\s*(?i:CREATE)\s+(?i:TABLE)\s+(?:(?i:IF)\s+(?i:NOT)\s+(?i:EXISTS)\s+)?`{table}`"
)
COLUMN_GROUP_PATTERN = re.compile(r"\s*\(([^)]*)\)")


class ScannerState(Enum):
    """Line scanner state."""

    IDLE = "idle"
    DEFINING = "defining"
    ACCUMULATING = "accumulating"


def parse_column_list(group: str) -> List[str]:
    """Turn ```id`, `name``` into ``["id", "name"]``."""
    columns = [part.strip().strip("`") for part in group.split(",")]
    return [column for column in columns if column]


def parse_create_columns(statement: str) -> List[str]:
    """
    Column names of a ``CREATE TABLE`` statement.

    Only definitions starting with a backticked identifier count; key and
    constraint clauses are skipped.
    """
    start = statement.find("(")
    end = statement.rfind(")")
    if start == -1 or end <= start:
        return []

    columns = []
    for definition in split_values(statement[start + 1 : end]):
        if definition.startswith("`"):
            closing = definition.find("`", 1)
            if closing > 1:
                columns.append(definition[1:closing])
    return columns


class StatementScanner:
    """
    Extract the rows of one table from the lines of a dump.

    A scanner holds no state between ``scan`` calls; every buffer lives in
    the call itself.

    Args:
        table_name: Exact (case-sensitive) table name as it appears between
            backticks in the dump.
        on_drop: Optional callback invoked once per dropped row or statement.
    """

    def __init__(self, table_name: str, on_drop: Optional[DropHook] = None):
        self.table_name = table_name
        self.on_drop = on_drop

        escaped = re.escape(table_name)
        self._needle = f"`{table_name}`"
        self._insert_header: re.Pattern[str] = re.compile(
            INSERT_PREFIX.format(table=escaped)
        )
        self._values_anchor: re.Pattern[str] = re.compile(
            INSERT_PREFIX.format(table=escaped) + r"\s*(?:\([^)]*\)\s*)?(?i:VALUES)"
        )
        self._create_header: re.Pattern[str] = re.compile(
            CREATE_PREFIX.format(table=escaped)
        )

    def scan(self, lines: Iterable[str]) -> TableExtraction:
        """
        Scan ``lines`` (without line terminators) and return every row of the
        target table in statement order.
        """
        result = TableExtraction(table=self.table_name)
        state = ScannerState.IDLE
        buffer: List[str] = []
        columns: List[str] = []
        create_columns: List[str] = []

        for line in lines:
            if state is ScannerState.IDLE:
                if self._needle not in line:
                    continue

                header = self._insert_header.match(line)
                if header:
                    group = COLUMN_GROUP_PATTERN.match(line, header.end())
                    columns = (
                        parse_column_list(group.group(1))
                        if group
                        else list(create_columns)
                    )
                    buffer = [line]
                    state = ScannerState.ACCUMULATING
                elif self._create_header.match(line):
                    buffer = [line]
                    state = ScannerState.DEFINING
                else:
                    continue
            else:
                buffer.append(line)

            if not line.rstrip().endswith(";"):
                continue

            statement = "\n".join(buffer)
            if state is ScannerState.ACCUMULATING:
                self._dispatch(statement, columns, result)
            else:
                create_columns = parse_create_columns(statement)
            buffer = []
            columns = []
            state = ScannerState.IDLE

        # Best effort for a final statement cut off before its ";"
        if state is ScannerState.ACCUMULATING and buffer:
            self._dispatch("\n".join(buffer), columns, result)

        return result

    def _dispatch(
        self, statement: str, columns: List[str], result: TableExtraction
    ) -> None:
        result.statements += 1
        if columns:
            result.columns = list(columns)

        anchor = self._values_anchor.match(statement)
        if not anchor:
            self._drop(
                result,
                DroppedRow(
                    table=self.table_name,
                    reason=DropReason.MISSING_VALUES_CLAUSE,
                    statement=result.statements,
                    expected=len(columns),
                ),
            )
            return

        values_text = statement[anchor.end() :].rstrip()
        if values_text.endswith(";"):
            values_text = values_text[:-1]

        for values in split_rows(values_text):
            if len(values) != len(columns):
                self._drop(
                    result,
                    DroppedRow(
                        table=self.table_name,
                        reason=DropReason.ARITY_MISMATCH,
                        statement=result.statements,
                        expected=len(columns),
                        values=tuple(values),
                    ),
                )
                continue
            result.rows.append(
                {column: lex_value(value) for column, value in zip(columns, values)}
            )

    def _drop(self, result: TableExtraction, dropped: DroppedRow) -> None:
        result.dropped += 1
        if self.on_drop is not None:
            self.on_drop(dropped)


def scan_table_rows(
    lines: Iterable[str],
    table_name: str,
    on_drop: Optional[DropHook] = None,
) -> TableExtraction:
    """Convenience wrapper around :class:`StatementScanner`."""
    return StatementScanner(table_name, on_drop=on_drop).scan(lines)
