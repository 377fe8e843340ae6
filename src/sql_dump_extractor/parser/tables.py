"""Table name discovery from ``CREATE TABLE`` headers."""

import re
from typing import Set

CREATE_TABLE_PATTERN = re.compile(
    r"(?i:CREATE)\s+(?i:TABLE)\s+(?:(?i:IF)\s+(?i:NOT)\s+(?i:EXISTS)\s+)?`([^`]+)`"
)


def find_table_names(text: str) -> Set[str]:
    """Return the distinct table names declared in ``text``."""
    return set(CREATE_TABLE_PATTERN.findall(text))
