"""
Value lexer for MySQL ``INSERT`` row tuples.

Turns one comma-delimited value slot (already trimmed, surrounding quotes still
present for string literals) into a typed Python scalar:

- ``NULL`` / ``null``  -> ``None``
- quoted literal       -> ``str`` with escapes resolved
- decimal number       -> ``int`` or ``float``
- anything else        -> the token unchanged, as ``str``

The lexer never raises; tokens it cannot classify are kept as text.
"""

import re
from typing import Union

TypedValue = Union[None, int, float, str]

NULL_TOKENS = frozenset({"NULL", "null"})
QUOTE_CHARS = ("'", '"')
NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?", re.ASCII)

# Backslash escapes emitted by mysqldump. Any other escaped character is kept
# without its backslash, including \% and \_ (MySQL itself keeps those two).
ESCAPE_MAP = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\x00",
    "b": "\b",
    "Z": "\x1a",
}


def unescape_sql_string(body: str, quote: str = "'") -> str:
    """
    Resolve SQL escape sequences in a single left-to-right pass.

    ``\\\\n`` therefore becomes a backslash followed by ``n``, never a newline.
    A doubled ``quote`` character collapses to one.

    Args:
        body: String literal content without its surrounding quotes.
        quote: The quote character that delimited the literal.

    Returns:
        The decoded string.
    """
    if "\\" not in body and quote * 2 not in body:
        return body

    out = []
    i = 0
    n = len(body)
    while i < n:
        char = body[i]
        if char == "\\" and i + 1 < n:
            following = body[i + 1]
            out.append(ESCAPE_MAP.get(following, following))
            i += 2
            continue
        if char == quote and i + 1 < n and body[i + 1] == quote:
            out.append(quote)
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


def is_quoted(token: str) -> bool:
    return len(token) >= 2 and token[0] in QUOTE_CHARS and token[-1] == token[0]


def parse_number(token: str) -> Union[int, float, None]:
    """Return the numeric value of ``token`` or None if it is not a plain decimal."""
    match = NUMBER_PATTERN.fullmatch(token)
    if not match:
        return None
    try:
        if match.group(1):
            return float(token)
        return int(token)
    except ValueError:
        return None


def lex_value(token: str) -> TypedValue:
    """
    Convert one trimmed value slot into a typed scalar.

    Args:
        token: Value substring from a row tuple, e.g. ``'Ann'``, ``42``, ``NULL``.

    Returns:
        None, an int/float, or a str.

    Example:
        >>> lex_value("'it\\\\'s a test'")
        "it's a test"
        >>> lex_value("-3.5")
        -3.5
    """
    if token in NULL_TOKENS:
        return None

    if is_quoted(token):
        return unescape_sql_string(token[1:-1], token[0])

    number = parse_number(token)
    if number is not None:
        return number

    return token
