"""Result and diagnostic types produced by the statement scanner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Tuple

from sql_dump_extractor.parser.values import TypedValue

ParsedRow = Dict[str, TypedValue]


class DropReason(str, Enum):
    """Why a row or statement produced no ParsedRow."""

    ARITY_MISMATCH = "arity_mismatch"
    MISSING_VALUES_CLAUSE = "missing_values_clause"


@dataclass(frozen=True)
class DroppedRow:
    """A tuple (or whole statement) skipped during extraction."""

    table: str
    reason: DropReason
    statement: int
    expected: int
    values: Tuple[str, ...] = ()


DropHook = Callable[[DroppedRow], None]


@dataclass
class TableExtraction:
    """Rows extracted for one table, with per-run counters."""

    table: str
    columns: List[str] = field(default_factory=list)
    rows: List[ParsedRow] = field(default_factory=list)
    statements: int = 0
    dropped: int = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)
