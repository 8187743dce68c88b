"""Vector text parsing and formatting.

Vectors are typed as free-form text: numbers separated by commas and/or
whitespace. Anything that is not a number is dropped without complaint.

Example:
    >>> parse_vector("2, 1")
    [2.0, 1.0]
    >>> parse_vector("a, 2, b")
    [2.0]
    >>> format_vector_input("1 2 3 ")
    '1, 2, 3, '
"""

import math
import re
from typing import List, Optional, Sequence


SEPARATOR_PATTERN = re.compile(r"[\s,]+")

# Leading numeric prefix of a token, the same prefix a browser's parseFloat reads
NUMBER_PREFIX_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Only ASCII digits count; parseFloat rejects other scripts' digits
DIGIT_GAP_PATTERN = re.compile(r"([0-9])\s+(?=[0-9])")

TRAILING_SPACE_PATTERN = re.compile(r"([0-9]) \Z")


def parse_number(token: str) -> Optional[float]:
    """Parse the numeric prefix of a single token.

    Returns None when the token has no numeric prefix or the value
    is not finite.
    """
    match = NUMBER_PREFIX_PATTERN.match(token.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def parse_vector(text: str) -> List[float]:
    """Turn free-form text into an ordered list of numbers.

    Args:
        text: Tokens separated by any run of commas and/or whitespace.

    Returns:
        The valid numbers in input order. Empty for empty or all-invalid input.
    """
    if not text:
        return []

    values = []
    for token in SEPARATOR_PATTERN.split(text):
        if not token:
            continue
        value = parse_number(token)
        if value is not None:
            values.append(value)
    return values


def format_vector_input(value: str) -> str:
    """Normalize text typed into a vector field.

    Whitespace between two digits becomes ", " (pasting "1 2 3" gives
    "1, 2, 3") and a space typed right after a digit becomes ", ".
    """
    value = DIGIT_GAP_PATTERN.sub(r"\1, ", value)

    return TRAILING_SPACE_PATTERN.sub(r"\1, ", value)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_vector(values: Sequence[float]) -> str:
    """Render numbers as vector field text, e.g. [2.0, 0.5] -> "2, 0.5"."""
    return ", ".join(format_number(v) for v in values)
