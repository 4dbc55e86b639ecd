"""Integer validation shared by every numeric input.

Prices, product IDs and quantities all arrive as text typed by a user.
They are parsed with ``parse_integer`` and then range-checked with
``is_valid_integer``; neither function raises.
"""

from __future__ import annotations

import math
import re

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_valid_integer(
    value: object,
    min_value: float = 0,
    max_value: float = math.inf,
) -> bool:
    """Return True iff *value* is a whole number in ``[min_value, max_value]``.

    ``bool`` is rejected even though it subclasses ``int``.  Floats count
    as whole numbers only when finite and integral (``3.0`` yes, ``nan`` no).
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        number: float = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
        number = value
    else:
        return False
    return min_value <= number <= max_value


def parse_integer(text: str | None) -> int | None:
    """Parse base-10 integer text, or return None if it isn't one."""
    if text is None:
        return None
    text = text.strip()
    # ASCII digits only; int() alone also takes "1_000" and non-Latin digits.
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text, 10)
