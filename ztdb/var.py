"""A single named variable and its ordered time/value samples."""

from __future__ import annotations

import bisect
import sys
import warnings
from typing import Iterator, TextIO

from .common import MAX_VAR_SIZE, ZTDB_MAX, ZTDB_RANGE, ZTDB_UNKNOWN

_MAX_PRECISION = 12

# Decimal digit count for widths up to 29 bits: (largest width, digits).
_DECIMAL_WIDTHS = ((3, 1), (6, 2), (9, 3), (13, 4), (16, 5), (19, 6), (23, 7), (26, 8))


def _time_key(pair: tuple[int, int]) -> int:
    return pair[0]


class Var:
    """A variable of 1 to 64 bits holding time/value pairs ordered by time.

    Pairs with equal times keep the order in which they were added.
    """

    def __init__(self, name: str, size: int) -> None:
        if size > MAX_VAR_SIZE:
            warnings.warn(
                f"variable {name!r} size {size} > {MAX_VAR_SIZE} - truncated to {MAX_VAR_SIZE}",
                stacklevel=2,
            )
            size = MAX_VAR_SIZE
        if size <= 0:
            warnings.warn(f"variable {name!r} size {size} == 0 - set to 1", stacklevel=2)
            size = 1
        self.name = name
        self.size = size
        self.max = ZTDB_MAX >> (MAX_VAR_SIZE - size)
        self._pairs: list[tuple[int, int]] = []

    def __repr__(self) -> str:
        return f"Var(name={self.name!r}, size={self.size}, samples={len(self)})"

    def add(self, time: int, value: int) -> None:
        """Store a sample; values too wide for the variable become ZTDB_RANGE."""
        if value > self.max and value != ZTDB_UNKNOWN:
            value = ZTDB_RANGE
        bisect.insort_right(self._pairs, (time, value), key=_time_key)

    def first(self) -> tuple[int, int] | None:
        """Return the earliest (time, value) pair, or None when empty."""
        return self._pairs[0] if self._pairs else None

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def at(self, target: int) -> tuple[int, int] | None:
        """Return the first pair at or after ``target``, or None past the end."""
        index = bisect.bisect_left(self._pairs, target, key=_time_key)
        if index == len(self._pairs):
            return None
        return self._pairs[index]

    def time_precise(self, time: int, precision: int) -> float:
        """Convert a raw time into a value with ``precision`` decimal digits moved right."""
        if not 0 <= precision <= _MAX_PRECISION:
            raise ValueError(f"precision {precision} is not between 0 and {_MAX_PRECISION}")
        return float(time) / 10**precision

    def value_width(self, hex: bool) -> int:
        """Number of digits needed to print any value of this variable."""
        if hex:
            return (self.size + 3) // 4
        if self.size >= 30:
            return 10
        for limit, digits in _DECIMAL_WIDTHS:
            if self.size <= limit:
                return digits
        return 9

    def value_string(self, value: int, hex: bool) -> str:
        """Format a value, padded to the variable's width; U for unknown, R for out of range."""
        width = self.value_width(hex)
        if value in (ZTDB_UNKNOWN, ZTDB_RANGE):
            marker = "U" if value == ZTDB_UNKNOWN else "R"
            return marker * (width + (2 if hex else 0))
        if hex:
            return f"0x{value:0{width}x}"
        return f"{value:>{width}d}"

    def dump(
        self,
        prefix: str = "",
        precision: int = 0,
        hex: bool = False,
        file: TextIO | None = None,
    ) -> None:
        """Write a readable listing of all samples."""
        out = file if file is not None else sys.stdout
        print(f"{prefix} # Time/Value pairs={len(self)}", file=out)
        for time, value in self._pairs:
            shown = self.time_precise(time, precision)
            print(f"{prefix} {shown:10.{precision}f} -> {self.value_string(value, hex)}", file=out)