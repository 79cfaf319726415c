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
Intensity measure types (IMTs).

Spectral accelerations are identified by their response period.
Accepted string forms are 'PGA', 'SA-0.20', 'SA(0.2)' and 'SA0P2'
(case insensitive). Members are ordered: PGA first, then spectral
accelerations by increasing period.
"""

from __future__ import annotations

import enum
import re
from typing import Optional, Union

_SA_PATTERN = re.compile(
    r'^SA\s*(?:-|\()?\s*([0-9]*\.?[0-9]+)\s*\)?$'
)
_SA_ENUM_PATTERN = re.compile(r'^SA([0-9]+)P([0-9]+)$')


class Imt(enum.Enum):
    """
    Supported intensity measure types. The value is the response
    period in seconds (None for PGA).
    """

    PGA = None
    SA0P01 = 0.01
    SA0P02 = 0.02
    SA0P03 = 0.03
    SA0P05 = 0.05
    SA0P075 = 0.075
    SA0P1 = 0.1
    SA0P15 = 0.15
    SA0P2 = 0.2
    SA0P25 = 0.25
    SA0P3 = 0.3
    SA0P4 = 0.4
    SA0P5 = 0.5
    SA0P75 = 0.75
    SA1P0 = 1.0
    SA1P5 = 1.5
    SA2P0 = 2.0
    SA3P0 = 3.0
    SA4P0 = 4.0
    SA5P0 = 5.0
    SA7P5 = 7.5
    SA10P0 = 10.0

    @property
    def period(self) -> Optional[float]:
        """Response period (s), None for non spectral IMTs."""
        return self.value

    @property
    def is_sa(self) -> bool:
        return self.value is not None

    @property
    def label(self) -> str:
        """Label in the coefficient-file notation (e.g. 'SA-0.20')."""
        if self is Imt.PGA:
            return 'PGA'
        if round(self.value, 2) == self.value:
            return f'SA-{self.value:.2f}'
        return f'SA-{self.value:g}'

    def __lt__(self, other):
        if not isinstance(other, Imt):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_period(cls, period: float) -> 'Imt':
        """
        Return the spectral acceleration IMT for a period (s).
        """
        for imt in cls:
            if imt.is_sa and abs(imt.value - float(period)) < 1e-9:
                return imt
        raise ValueError(f'Not a supported spectral period: {period}')

    @classmethod
    def from_string(cls, value: Union[str, float, 'Imt']) -> 'Imt':
        """
        Parse an IMT from a string, a period or an Imt instance.
        """
        if isinstance(value, Imt):
            return value

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.from_period(value)

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f'Not a valid intensity measure type: {value!r}')

        text = value.strip().upper()

        if text == 'PGA':
            return cls.PGA

        if text in cls.__members__:
            return cls[text]

        match = _SA_PATTERN.match(text)
        if match:
            return cls.from_period(float(match.group(1)))

        match = _SA_ENUM_PATTERN.match(text)
        if match:
            return cls.from_period(float(f'{match.group(1)}.{match.group(2)}'))

        raise ValueError(f'Not a valid intensity measure type: {value!r}')


_ORDER = {imt: i for i, imt in enumerate(Imt)}
