"""
Row tuple splitter for the ``VALUES`` tail of an ``INSERT`` statement.

Boundary detection only: escapes and quotes are kept verbatim in the output
and decoded later by :mod:`sql_dump_extractor.parser.values`.

``iter_structural`` is the single state machine shared by both levels of
splitting. It classifies each character as structural (outside any string
literal and not preceded by a backslash) or literal content, so that commas
and parentheses inside quoted data never act as separators.
"""

from enum import Enum
from typing import Iterator, List, Tuple

from sql_dump_extractor.parser.values import QUOTE_CHARS


class ScanState(Enum):
    """Character scanner state."""

    IDLE = "idle"
    IN_STRING = "in_string"
    ESCAPED = "escaped"


def iter_structural(text: str) -> Iterator[Tuple[str, bool]]:
    """
    Yield ``(char, structural)`` for every character of ``text``.

    A backslash makes the next character literal. Inside a string, a doubled
    opening quote (``''`` or ``""``) is literal content and keeps the string
    open; a single one closes it.
    """
    state = ScanState.IDLE
    resume = ScanState.IDLE
    quote = ""
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if state is ScanState.ESCAPED:
            state = resume
            yield char, False
        elif char == "\\":
            resume = state
            state = ScanState.ESCAPED
            yield char, False
        elif state is ScanState.IN_STRING:
            if char == quote:
                if i + 1 < n and text[i + 1] == quote:
                    yield char, False
                    yield char, False
                    i += 2
                    continue
                state = ScanState.IDLE
            yield char, False
        elif char in QUOTE_CHARS:
            state = ScanState.IN_STRING
            quote = char
            yield char, False
        else:
            yield char, True

        i += 1


def split_row_tuples(values_text: str) -> List[str]:
    """
    Split ``(...), (...), ...`` into the inner text of each top-level group.

    Text between groups is discarded. Blank groups are skipped. A group left
    open at the end of input (unterminated string or missing ``)``) is not
    returned.

    Args:
        values_text: Everything after ``VALUES`` without the trailing ``;``.

    Returns:
        Row contents in input order.
    """
    rows: List[str] = []
    buffer: List[str] = []
    depth = 0

    for char, structural in iter_structural(values_text):
        if structural and char == "(":
            depth += 1
            if depth == 1:
                buffer = []
                continue
        elif structural and char == ")" and depth > 0:
            depth -= 1
            if depth == 0:
                row = "".join(buffer)
                if row.strip():
                    rows.append(row)
                buffer = []
                continue

        if depth > 0:
            buffer.append(char)

    return rows


def split_values(row_text: str) -> List[str]:
    """
    Split the content of one row tuple on top-level commas.

    Each slot is trimmed; quotes and escapes are left in place. Commas inside
    nested parentheses, e.g. a function call emitted by the dump tool, do not
    split.
    """
    values: List[str] = []
    buffer: List[str] = []
    depth = 0

    for char, structural in iter_structural(row_text):
        if structural:
            if char == "(":
                depth += 1
            elif char == ")" and depth > 0:
                depth -= 1
            elif char == "," and depth == 0:
                values.append("".join(buffer).strip())
                buffer = []
                continue
        buffer.append(char)

    values.append("".join(buffer).strip())
    return values


def split_rows(values_text: str) -> List[List[str]]:
    """Split a ``VALUES`` tail into rows of raw value slots."""
    return [split_values(row) for row in split_row_tuples(values_text)]
