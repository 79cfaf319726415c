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
Rupture and site description passed to GMPEs, and the per-model
constraints on its fields.

Conventions
-----------
- Distances and depths are in km (depths positive down).
- Angles are in degrees.
- Vs30 is in m/s; z1p0 (depth to Vs = 1 km/s) is in km.
- NaN marks a field as unknown; unknown fields may only be left
  unset when the target GMPE does not read them.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from math import isnan, nan
from typing import Dict, Iterable, Mapping, Optional

from gmlab.libutils.ranges import Range, check_in_range


class Field(enum.Enum):
    """
    GMPE input fields: (attribute, label, unit, default).
    """

    MAG = ('mag', 'Magnitude', None, 6.5)
    RJB = ('rjb', 'Joyner-Boore Distance', 'km', 10.0)
    RRUP = ('rrup', 'Rupture Distance', 'km', 10.3)
    DIP = ('dip', 'Dip', 'degrees', 90.0)
    ZTOP = ('ztop', 'Depth to Top of Rupture', 'km', 0.5)
    RAKE = ('rake', 'Rake', 'degrees', 0.0)
    VS30 = ('vs30', 'Vs30', 'm/s', 760.0)
    Z1P0 = ('z1p0', 'Depth to Vs=1.0 km/s', 'km', nan)

    def __init__(self, attribute, label, unit, default):
        self.attribute = attribute
        self.label = label
        self.unit = unit
        self.default = default

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class GmmInput:
    """
    Rupture and site parameters of a single GMPE evaluation.

    Attributes
    ----------
    mag
        Moment magnitude.
    rjb
        Joyner-Boore distance (km).
    rrup
        Closest distance to the rupture plane (km).
    dip
        Rupture dip (degrees).
    ztop
        Depth to the top of the rupture (km).
    rake
        Rupture rake (degrees).
    vs30
        Time-averaged shear-wave velocity of the top 30 m (m/s).
    z1p0
        Depth to a shear-wave velocity of 1.0 km/s (km), NaN if unknown.
    """

    mag: float = Field.MAG.default
    rjb: float = Field.RJB.default
    rrup: float = Field.RRUP.default
    dip: float = Field.DIP.default
    ztop: float = Field.ZTOP.default
    rake: float = Field.RAKE.default
    vs30: float = Field.VS30.default
    z1p0: float = Field.Z1P0.default

    def __post_init__(self) -> None:
        for fld in Field:
            value = getattr(self, fld.attribute)
            try:
                object.__setattr__(self, fld.attribute, float(value))
            except (TypeError, ValueError):
                raise TypeError(
                    f'{fld.label} must be a real number, got {value!r}'
                ) from None

    def get(self, fld: Field) -> float:
        """Return the value of a field."""
        return getattr(self, fld.attribute)

    def replace(self, **changes) -> 'GmmInput':
        """Return a copy with the given attributes replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)


class Constraints:
    """
    Valid ranges of the GMPE input fields supported by a model.
    Unconstrained fields are accepted with any value.

    Example
    -------
    >>> c = Constraints({Field.MAG: Range.closed(5.0, 8.5)})
    >>> c.validate(GmmInput(mag=6.0))
    """

    def __init__(self, ranges: Mapping[Field, Range]):
        for fld, rng in ranges.items():
            if not isinstance(fld, Field):
                raise TypeError(f'Not a GMPE input field: {fld!r}')
            if not isinstance(rng, Range):
                raise TypeError(f'Not a valid range for {fld}: {rng!r}')
        self._ranges = dict(ranges)

    @classmethod
    def with_distances(cls, rmax: float,
                       ranges: Mapping[Field, Range]) -> 'Constraints':
        """
        Build constraints with both distance metrics set to [0..rmax].
        """
        full = {Field.RJB: Range.closed(0.0, rmax),
                Field.RRUP: Range.closed(0.0, rmax)}
        full.update(ranges)
        return cls(full)

    def __contains__(self, fld: Field) -> bool:
        return fld in self._ranges

    def __getitem__(self, fld: Field) -> Range:
        return self._ranges[fld]

    def get(self, fld: Field) -> Optional[Range]:
        return self._ranges.get(fld)

    def fields(self):
        return [f for f in Field if f in self._ranges]

    def validate(self, gmm_input: GmmInput,
                 fields: Optional[Iterable[Field]] = None) -> GmmInput:
        """
        Check the constrained fields of gmm_input (only those listed
        in fields, if given).

        Returns
        -------
        GmmInput
            The supplied input, for use inline.

        Raises
        ------
        OutOfRangeError
            On the first field violating its range.
        """
        check = self.fields() if fields is None else fields
        for fld in check:
            rng = self._ranges.get(fld)
            if rng is not None:
                check_in_range(rng, fld.label, gmm_input.get(fld))
        return gmm_input

    def clamp(self, gmm_input: GmmInput) -> GmmInput:
        """
        Return a copy of gmm_input with every constrained field
        saturated into its range. Unknown (NaN) fields are left as they
        are.
        """
        changes = {}
        for fld, rng in self._ranges.items():
            value = gmm_input.get(fld)
            if isnan(value):
                continue
            clamped = rng.clamp(value)
            if clamped != value:
                changes[fld.attribute] = clamped
        return gmm_input.replace(**changes) if changes else gmm_input
