"""Incremental type and null detection for a single column.

A column starts out numeric. Every non-null value is parsed as a 64-bit
float until the first failure; from then on the column is a string column
for the rest of the analysis and all values compare as raw text.

Min/max are tracked as Bound values, a small tagged union of
numeric, text and absent. Comparing text against a bound that was set while
the column was still numeric renders the number with the fixed-width
"%020.6f" format first. That rendering is an approximation: numbers wider
than 20 characters or with more than 6 decimals can misorder against text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from tablestats.core.models import ColumnType

NULL_TOKENS = frozenset({"", "NULL", "null"})

_INFINITY_LITERALS = frozenset({"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"})


def is_null(value: str) -> bool:
    """Check whether a raw field value counts as null.

    Surrounding whitespace is ignored. Only the empty string and the exact
    tokens "NULL" and "null" are null.
    """
    return value.strip() in NULL_TOKENS


def parse_float(text: str) -> float | None:
    """Parse text as a 64-bit float, or return None.

    Only ASCII input is accepted, so non-ASCII digits do not count as
    numbers. Digit separators are rejected, and so are finite literals that
    overflow to infinity. Explicit "inf"/"nan" literals are accepted.
    """
    if not text.isascii() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isinf(value) and text.lower() not in _INFINITY_LITERALS:
        return None
    return value


class BoundKind(str, Enum):
    """Which variant a Bound holds."""

    NUMERIC = "numeric"
    TEXT = "text"
    ABSENT = "absent"


@dataclass(frozen=True)
class Bound:
    """A min or max value: a number, a piece of text, or nothing yet."""

    kind: BoundKind = BoundKind.ABSENT
    number: float = 0.0
    text: str = ""

    @classmethod
    def numeric(cls, value: float) -> Bound:
        return cls(kind=BoundKind.NUMERIC, number=value)

    @classmethod
    def of_text(cls, value: str) -> Bound:
        return cls(kind=BoundKind.TEXT, text=value)

    @property
    def is_absent(self) -> bool:
        return self.kind is BoundKind.ABSENT

    def as_text(self) -> str:
        """Render the bound for lexicographic comparison."""
        if self.kind is BoundKind.NUMERIC:
            return "%020.6f" % self.number
        return self.text

    def value(self) -> float | str | None:
        """Unwrap into a plain Python value."""
        if self.kind is BoundKind.NUMERIC:
            return self.number
        if self.kind is BoundKind.TEXT:
            return self.text
        return None

    def lower(self, candidate: Bound) -> Bound:
        """Return whichever of self and candidate is the new minimum."""
        if self.is_absent or _less(candidate, self):
            return candidate
        return self

    def higher(self, candidate: Bound) -> Bound:
        """Return whichever of self and candidate is the new maximum."""
        if self.is_absent or _less(self, candidate):
            return candidate
        return self


ABSENT = Bound()


def _less(a: Bound, b: Bound) -> bool:
    if a.kind is BoundKind.NUMERIC and b.kind is BoundKind.NUMERIC:
        return a.number < b.number
    return a.as_text() < b.as_text()


class TypeClassifier:
    """Observes the values of one column and infers its type.

    Type only ever widens toward string: once a value fails to parse as a
    number the column never becomes numeric again.
    """

    def __init__(self) -> None:
        self.null_count = 0
        self.still_numeric = True
        self.has_decimal_point = False
        self.numeric_values: list[float] = []
        self.min_bound: Bound = ABSENT
        self.max_bound: Bound = ABSENT

    def observe_missing(self) -> None:
        """Record a field that is absent from a short record."""
        self.null_count += 1

    def observe(self, raw: str) -> None:
        """Feed one raw field value."""
        value = raw.strip()
        if is_null(value):
            self.null_count += 1
            return

        if self.still_numeric:
            number = parse_float(value)
            if number is not None:
                self.numeric_values.append(number)
                if "." in value:
                    self.has_decimal_point = True
                candidate = Bound.numeric(number)
            else:
                self._widen_to_string()
                candidate = Bound.of_text(value)
        else:
            candidate = Bound.of_text(value)

        self.min_bound = self.min_bound.lower(candidate)
        self.max_bound = self.max_bound.higher(candidate)

    def _widen_to_string(self) -> None:
        self.still_numeric = False
        self.has_decimal_point = False
        self.numeric_values = []

    @property
    def column_type(self) -> ColumnType:
        if not self.still_numeric:
            return ColumnType.STRING
        if self.has_decimal_point:
            return ColumnType.FLOAT64
        return ColumnType.INT64
