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
Implementation of the Idriss (2014) NGA-West2 GMPE for active shallow
crustal regions.

Idriss, I. M. (2014). An NGA-West2 empirical model for estimating the
horizontal spectral values generated by shallow crustal earthquakes.
Earthquake Spectra, 30(3), 1155-1177. doi:10.1193/070613EQS195M

Component: RotD50. Units: g (natural log).

Notes
-----
- Vs30 is capped at 1200 m/s as recommended by the author.
- The recommended distance limit of 150 km is declared as a
  constraint only.
- PGA uses the 0.01 s spectral coefficients.
"""

from dataclasses import dataclass

import numpy as _np

from gmlab.libutils.ranges import Range

from .base import GMPE as _GMPE
from .base import ScalarGroundMotion
from .faultstyle import RAKE_RANGE, FaultStyle, rake_to_fault_style
from .imt import Imt
from .inputs import Constraints, Field


@dataclass(frozen=True)
class IdrissCoefficients:
    imt: Imt
    a1_lo: float
    a2_lo: float
    b1_lo: float
    b2_lo: float
    a1_hi: float
    a2_hi: float
    b1_hi: float
    b2_hi: float
    a3: float
    xi: float
    gamma: float
    phi: float


class Idriss2014(_GMPE):
    """
    Idriss (2014) GMPE.

    Median = magnitude-regime intercept/slope + quadratic magnitude
    saturation + magnitude-dependent geometric spreading + anelastic
    term + capped Vs30 site term + reverse-faulting term.
    Sigma depends on period and magnitude only.
    """

    NAME = 'Idriss (2014)'
    REFERENCE_VELOCITY = 760.
    DISTANCE_METRIC = 'rupture'
    MAGNITUDE_TYPE = 'Mw'

    CONSTRAINTS = Constraints.with_distances(150.0, {
        Field.MAG: Range.closed(5.0, 8.5),
        Field.DIP: Range.closed(0.0, 90.0),
        Field.ZTOP: Range.closed(0.0, 20.0),
        Field.RAKE: RAKE_RANGE,
        Field.VS30: Range.closed_open(450.0, 1500.0),
        # From Abrahamson et al. (2014)
        Field.Z1P0: Range.closed(0.0, 3.0),
    })

    REQUIRES = (Field.MAG, Field.RRUP, Field.RAKE, Field.VS30)

    _COEFF_FILE = 'idriss_2014.json'
    _COEFF_ROW = IdrissCoefficients

    # Model constants
    _MAG_HINGE = 6.75
    _MREF = 8.5
    _RRUP_OFFSET = 10.0
    _VS30_CAP = 1200.0

    _SIGMA_0 = 1.18
    _SIGMA_T = 0.035
    _SIGMA_M = 0.06
    _T_MIN = 0.05
    _T_MAX = 3.0
    _M_MIN = 5.0
    _M_MAX = 7.5

    @classmethod
    def compute(cls, coeff, gmm_input):
        mean = cls.compute_mean(coeff, gmm_input)
        sigma = cls.compute_stddev(coeff.imt, gmm_input.mag)
        return ScalarGroundMotion(mean, sigma)

    @classmethod
    def magnitude_coefficients(cls, C, mag):
        """
        Select the (a1, a2, b1, b2) set of the magnitude regime.
        """
        if mag > cls._MAG_HINGE:
            return C.a1_hi, C.a2_hi, C.b1_hi, C.b2_hi
        return C.a1_lo, C.a2_lo, C.b1_lo, C.b2_lo

    @classmethod
    def compute_mean(cls, C, gmm_input):
        mag = gmm_input.mag
        rrup = gmm_input.rrup

        a1, a2, b1, b2 = cls.magnitude_coefficients(C, mag)

        mean = a1 + a2*mag + C.a3*(cls._MREF - mag)**2
        mean -= (b1 + b2*mag)*_np.log(rrup + cls._RRUP_OFFSET)
        mean += C.xi*_np.log(min(gmm_input.vs30, cls._VS30_CAP))
        mean += C.gamma*rrup

        if rake_to_fault_style(gmm_input.rake) is FaultStyle.REVERSE:
            mean += C.phi

        return float(mean)

    @classmethod
    def compute_stddev(cls, imt, mag):
        # PGA takes the short-period floor
        period = cls._T_MIN if imt.period is None else imt.period
        period = _np.clip(period, cls._T_MIN, cls._T_MAX)
        mag = _np.clip(mag, cls._M_MIN, cls._M_MAX)

        sigma = cls._SIGMA_0 + cls._SIGMA_T*_np.log(period)
        sigma -= cls._SIGMA_M*mag

        return float(sigma)
