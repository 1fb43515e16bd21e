"""Line-number selection parsing."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[+-]?[0-9]+")


class LineNumberError(ValueError):
    """Raised when a requested line number cannot be used."""


def parse_line_numbers(value: str) -> frozenset[int]:
    """Parse a comma-separated list such as ``"1, 3,5"`` into a set.

    Empty tokens are skipped. Order and duplicates do not matter.

    Raises:
        LineNumberError: a token is not an integer or is not positive.
    """
    result = set()
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        # Plain ASCII digits only; int() would also take "1_0" or "٣".
        if not _NUMBER.fullmatch(part):
            raise LineNumberError(f"invalid line number '{part}'")
        num = int(part)
        if num <= 0:
            raise LineNumberError(f"line number must be positive: {num}")
        result.add(num)
    return frozenset(result)


def resolve_selection(line: int = 0, lines: str = "") -> frozenset[int] | None:
    """Turn the ``-l``/``-line`` flag values into a selection.

    A positive single ``line`` wins over ``lines``. Returns None when every
    line should be kept.
    """
    if line > 0:
        return frozenset({line})
    if lines:
        selected = parse_line_numbers(lines)
        if selected:
            return selected
    return None
