"""Numeric token scanning for path data.

A numeric token is an optional whitespace run, an optional ``-``, one or
more digits, optionally a ``.`` followed by more digits, and at most one
separator character (comma, whitespace or ``+``) which is discarded.
"""

from typing import List, Optional, Tuple

from .config import DIGITS, SEPARATORS, WHITESPACE
from .errors import NumericTokenError


def match_number(text: str, pos: int = 0) -> Optional[Tuple[str, int]]:
    """Match one numeric token at ``pos``.

    Returns the number's text and the index just past the token (including
    its separator), or None if ``text`` has no numeric token at ``pos``.
    """
    end = len(text)
    i = pos
    while i < end and text[i] in WHITESPACE:
        i += 1
    start = i
    if i < end and text[i] == "-":
        i += 1
    digits_start = i
    while i < end and text[i] in DIGITS:
        i += 1
    if i == digits_start:
        return None
    if i < end and text[i] == ".":
        i += 1
        while i < end and text[i] in DIGITS:
            i += 1
    number = text[start:i]
    if i < end and text[i] in SEPARATORS:
        i += 1
    return number, i


def match_numeric_run(text: str, pos: int = 0) -> int:
    """Return the index just past the longest run of numeric tokens at ``pos``.

    Returns ``pos`` itself when no token matches. A trailing whitespace run
    that does not lead to another number is left unconsumed.
    """
    while True:
        token = match_number(text, pos)
        if token is None:
            return pos
        pos = token[1]


def scan_numbers(text: str) -> List[float]:
    """Strip numeric tokens off ``text`` until it is exhausted."""
    values = []
    pos = 0
    while pos < len(text):
        token = match_number(text, pos)
        if token is None:
            raise NumericTokenError(text[pos:])
        number, pos = token
        values.append(_atof(number))
    return values


def _atof(number: str) -> float:
    try:
        return float(number)
    except ValueError:
        raise NumericTokenError(number) from None
