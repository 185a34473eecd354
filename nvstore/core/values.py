"""String encodings for typed values.

Everything in the table is a string; these helpers turn Python values into
that representation and back. Parsing is lenient in the way C's ``atoi`` and
``atof`` are: the longest numeric prefix is used and garbage reads as zero,
never as an error. Formatting is locale independent.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

__all__ = [
    "TRUE_LITERALS",
    "parse_boolean",
    "parse_int",
    "parse_float",
    "token_index",
    "format_boolean",
    "format_int",
    "format_float",
    "format_int_token",
]

TRUE_LITERALS = ("true", "1")

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# Leading whitespace as understood by C's isspace().
_C_SPACE = " \t\n\v\f\r"

_INT_PREFIX_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX_RE = re.compile(
    r"""[+-]?(?:
            (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
          | inf(?:inity)?
          | nan
        )""",
    re.IGNORECASE | re.VERBOSE,
)


def parse_boolean(text: str) -> bool:
    return text in TRUE_LITERALS


def parse_int(text: str) -> int:
    """Parse the leading decimal integer of *text* (0 if there is none).

    >>> parse_int("  42px")
    42
    >>> parse_int("mapv")
    0
    """
    match = _INT_PREFIX_RE.match(text.lstrip(_C_SPACE))
    if match is None:
        return 0
    return max(INT_MIN, min(INT_MAX, int(match.group(0))))


def parse_float(text: str) -> float:
    """Parse the leading floating point number of *text* (0.0 if there is none)."""
    match = _FLOAT_PREFIX_RE.match(text.lstrip(_C_SPACE))
    if match is None:
        return 0.0
    return float(match.group(0))


def token_index(text: str, tokens: Sequence[str]) -> Optional[int]:
    """Return the position of *text* in *tokens*, or None if it is not one of them."""
    for index, token in enumerate(tokens):
        if token == text:
            return index
    return None


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def format_int(value: int) -> str:
    return "%d" % value


def format_float(value: float) -> str:
    # Ten significant digits, "%g" style; % formatting ignores the locale.
    return "%.10g" % value


def format_int_token(value: int, tokens: Sequence[str]) -> str:
    """Encode *value* as its token, falling back to the plain decimal number.

    The fallback cannot be read back as a token; it reads as the default.
    """
    if 0 <= value < len(tokens):
        return tokens[value]
    return format_int(value)
