# ****************************************************************************
#
# Copyright (C) 2019-2026, GMLab Developers.
# This file is part of GMLab.
#
# GMLab is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# GMLab is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# with this download. If not, see <http://www.gnu.org/licenses/>
#
# ****************************************************************************
"""
Numeric validity ranges and range checking.

A Range is a bounded interval of real values with one of three boundary
kinds:

- closed      [lower, upper]
- open-closed (lower, upper]
- closed-open [lower, upper)

Range checks return the checked value unchanged, so they can be used
inline, and raise OutOfRangeError otherwise.

Example
-------
>>> MAG_RANGE = Range.closed(-2.0, 9.7)
>>> check_in_range(MAG_RANGE, 'Magnitude', 6.5)
6.5
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from math import inf, isnan, nextafter
from typing import Optional


class RangeKind(enum.Enum):
    """
    Boundary semantics of a Range.
    """

    CLOSED = ('[', ']')
    OPEN_CLOSED = ('(', ']')
    CLOSED_OPEN = ('[', ')')

    @property
    def lower_closed(self) -> bool:
        return self.value[0] == '['

    @property
    def upper_closed(self) -> bool:
        return self.value[1] == ']'


class OutOfRangeError(ValueError):
    """
    Raised when a value lies outside its declared valid range.

    Attributes
    ----------
    field
        Label of the checked quantity (e.g. 'Magnitude').
    value
        The offending value.
    bound
        The violated bound (lower or upper); None for NaN values.
    kind
        The RangeKind of the violated range.
    range
        The violated Range itself.
    """

    def __init__(self, field: str, value: float, rng: 'Range'):
        self.field = field
        self.value = value
        self.range = rng
        self.kind = rng.kind
        self.bound = rng.violated_bound(value)
        super().__init__(
            f'{field} [{value}] not in range {rng}'
        )

    def __reduce__(self):
        return (type(self), (self.field, self.value, self.range))


@dataclass(frozen=True)
class Range:
    """
    Immutable bounded interval.

    Attributes
    ----------
    lower
        Lower bound.
    upper
        Upper bound.
    kind
        Boundary semantics (see RangeKind).
    """

    lower: float
    upper: float
    kind: RangeKind = RangeKind.CLOSED

    def __post_init__(self) -> None:
        if not self.lower <= self.upper:
            raise ValueError(
                f'Invalid range: lower bound {self.lower} '
                f'exceeds upper bound {self.upper}'
            )

    @classmethod
    def closed(cls, lower: float, upper: float) -> 'Range':
        return cls(float(lower), float(upper), RangeKind.CLOSED)

    @classmethod
    def open_closed(cls, lower: float, upper: float) -> 'Range':
        return cls(float(lower), float(upper), RangeKind.OPEN_CLOSED)

    @classmethod
    def closed_open(cls, lower: float, upper: float) -> 'Range':
        return cls(float(lower), float(upper), RangeKind.CLOSED_OPEN)

    def __str__(self) -> str:
        left, right = self.kind.value
        return f'{left}{self.lower}..{self.upper}{right}'

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def contains(self, value: float) -> bool:
        """
        Return True if value lies inside the interval. NaN is never
        contained.
        """
        if isnan(value):
            return False

        if self.kind.lower_closed:
            above = value >= self.lower
        else:
            above = value > self.lower

        if self.kind.upper_closed:
            below = value <= self.upper
        else:
            below = value < self.upper

        return above and below

    def violated_bound(self, value: float) -> Optional[float]:
        """
        Return the bound violated by value, or None if value is inside
        the range (or is NaN).
        """
        if isnan(value) or self.contains(value):
            return None

        if value <= self.lower:
            return self.lower
        return self.upper

    def clamp(self, value: float) -> float:
        """
        Saturate value to the interval. Values beyond an open bound are
        moved to the closest representable float inside the interval.
        NaN cannot be clamped and raises OutOfRangeError.
        """
        if self.contains(value):
            return value

        bound = self.violated_bound(value)
        if bound is None:
            raise OutOfRangeError('Value', value, self)

        if bound == self.lower:
            if self.kind.lower_closed:
                return self.lower
            return nextafter(self.lower, inf)

        if self.kind.upper_closed:
            return self.upper
        return nextafter(self.upper, -inf)


def check_in_range(rng: Range, label: str, value: float) -> float:
    """
    Verify that value lies inside rng.

    Parameters
    ----------
    rng
        The valid Range.
    label
        Name of the checked quantity, used in the error message.
    value
        Value to check.

    Returns
    -------
    float
        The supplied value, for use inline.

    Raises
    ------
    OutOfRangeError
        If value is outside rng (or is NaN).
    """
    if not rng.contains(value):
        raise OutOfRangeError(label, value, rng)
    return value
