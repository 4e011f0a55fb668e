"""Natural-order string comparison.

Makes "item2" sort before "item10" instead of after it, ignoring letter case.
"""

from __future__ import annotations

import re

_DIGIT_RUNS = re.compile(r"(\d+)")


def natural_key(text: str) -> list[str | tuple[int, str]]:
    """Generate a sort key for natural (human-friendly) ordering.

    Splitting on digit runs always yields text at even positions and
    numbers at odd positions, so two keys never compare text against a number.
    A digit run becomes (length, digits) with leading zeros stripped, which
    orders by numeric value for runs of any length.

    Example:
        >>> sorted(["img10", "img2", "IMG1"], key=natural_key)
        ['IMG1', 'img2', 'img10']
    """

    def convert(index: int, fragment: str) -> str | tuple[int, str]:
        if index % 2:
            digits = fragment.lstrip("0")
            return (len(digits), digits)
        return fragment.casefold()

    return [convert(i, f) for i, f in enumerate(_DIGIT_RUNS.split(text))]


def natural_compare(x: str | None, y: str | None) -> int:
    """
    Three-way natural comparison of two values.

    Returns a negative number if x sorts first, positive if y does,
    zero if they are equivalent. A missing value (None) sorts after
    every present value; two missing values are equal.
    """
    if x is None or y is None:
        if x is None and y is None:
            return 0
        return 1 if x is None else -1

    kx, ky = natural_key(x), natural_key(y)
    if kx < ky:
        return -1
    if kx > ky:
        return 1
    return 0
