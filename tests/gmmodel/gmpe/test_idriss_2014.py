#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
Unit tests for :mod:`gmlab.gmmodel.gmpe.idriss_2014`.

Reference values were computed once from the published equation and
the packaged coefficient table.
"""

from __future__ import annotations

import unittest
from dataclasses import replace

from gmlab.gmmodel.gmpe.base import ScalarGroundMotion
from gmlab.gmmodel.gmpe.coefficients import (
    CoefficientTable,
    MissingPeriodError,
)
from gmlab.gmmodel.gmpe.idriss_2014 import Idriss2014
from gmlab.gmmodel.gmpe.imt import Imt
from gmlab.gmmodel.gmpe.inputs import GmmInput
from gmlab.libutils.ranges import OutOfRangeError

# (imt, mag, rrup, rake, vs30) -> (mean, sigma)
REFERENCE = [
    ((Imt.PGA, 7.0, 20.0, 90.0, 760.0),
     (-1.784836415724, 0.655149370426)),
    ((Imt.SA1P0, 7.0, 20.0, 90.0, 760.0),
     (-2.871777410699, 0.760000000000)),
    ((Imt.SA0P2, 6.0, 35.0, 0.0, 500.0),
     (-2.062465517888, 0.763669673065)),
]


class TestIdriss2014Reference(unittest.TestCase):

    def test_reference_values(self) -> None:
        for (imt, mag, rrup, rake, vs30), (mean, sigma) in REFERENCE:
            gmm_input = GmmInput(mag=mag, rrup=rrup, rake=rake, vs30=vs30)
            gm = Idriss2014(imt).evaluate(gmm_input)

            self.assertIsInstance(gm, ScalarGroundMotion)
            self.assertAlmostEqual(gm.mean, mean, delta=1e-6,
                                   msg=f'mean mismatch for {imt}')
            self.assertAlmostEqual(gm.sigma, sigma, delta=1e-6,
                                   msg=f'sigma mismatch for {imt}')

    def test_pga_equals_short_period_mean(self) -> None:
        gmm_input = GmmInput(mag=6.5, rrup=15.0, vs30=600.0)
        pga = Idriss2014(Imt.PGA).evaluate(gmm_input)
        sa = Idriss2014(Imt.SA0P01).evaluate(gmm_input)
        self.assertAlmostEqual(pga.mean, sa.mean, places=12)

    def test_all_imts_supported(self) -> None:
        self.assertEqual(Idriss2014.supported_imts(), list(Imt))

    def test_constructor_accepts_strings(self) -> None:
        self.assertIs(Idriss2014('SA-1.00').imt, Imt.SA1P0)
        self.assertIs(Idriss2014(0.2).imt, Imt.SA0P2)


class TestIdriss2014Terms(unittest.TestCase):
    """
    Magnitude regimes, site cap, style term and sigma clips.
    """

    def setUp(self) -> None:
        self.gmpe = Idriss2014(Imt.SA0P2)
        self.base = GmmInput(mag=6.0, rrup=30.0, rake=0.0, vs30=760.0)

    def test_magnitude_regime_switch(self) -> None:
        eps = 1e-6
        coeff = self.gmpe.coeff

        lo = Idriss2014.magnitude_coefficients(coeff, 6.75 - eps)
        hi = Idriss2014.magnitude_coefficients(coeff, 6.75 + eps)
        self.assertEqual(lo, (coeff.a1_lo, coeff.a2_lo,
                              coeff.b1_lo, coeff.b2_lo))
        self.assertEqual(hi, (coeff.a1_hi, coeff.a2_hi,
                              coeff.b1_hi, coeff.b2_hi))
        self.assertNotEqual(lo, hi)

        # Exactly at the hinge the low regime applies
        self.assertEqual(Idriss2014.magnitude_coefficients(coeff, 6.75), lo)

    def test_magnitude_regime_is_not_interpolated(self) -> None:
        # Intercepts differing by 1 at the hinge show up as a jump
        coeff = replace(self.gmpe.coeff, a1_hi=self.gmpe.coeff.a1_hi + 1.0)
        eps = 1e-9

        below = Idriss2014.compute_mean(
            coeff, self.base.replace(mag=6.75 - eps))
        above = Idriss2014.compute_mean(
            coeff, self.base.replace(mag=6.75 + eps))
        self.assertGreater(above - below, 0.99)

    def test_magnitude_regime_jump_long_period(self) -> None:
        # From 0.3 s the published intercepts do not meet at the hinge
        gmpe = Idriss2014(Imt.SA1P0)
        eps = 1e-9

        below = gmpe.evaluate(self.base.replace(mag=6.75 - eps))
        above = gmpe.evaluate(self.base.replace(mag=6.75 + eps))

        c = gmpe.coeff
        jump = (c.a1_hi + 6.75*c.a2_hi) - (c.a1_lo + 6.75*c.a2_lo)
        self.assertAlmostEqual(jump, 0.537100, delta=1e-6)
        self.assertAlmostEqual(above.mean - below.mean, jump, delta=1e-6)
        self.assertEqual(above.sigma, below.sigma)

    def test_magnitude_scaling_slope_changes(self) -> None:
        def mean(mag):
            return self.gmpe.evaluate(self.base.replace(mag=mag)).mean

        dm = 0.05
        slope_lo = (mean(6.75) - mean(6.75 - dm))/dm
        slope_hi = (mean(6.75 + 2.*dm) - mean(6.75 + dm))/dm
        self.assertGreater(abs(slope_lo - slope_hi), 0.1)

    def test_site_cap(self) -> None:
        coeff = self.gmpe.coeff
        at_cap = Idriss2014.compute_mean(coeff, self.base.replace(vs30=1200.0))
        above = Idriss2014.compute_mean(coeff, self.base.replace(vs30=3000.0))
        self.assertEqual(at_cap, above)

        # Same through the validated path, within the model range
        gm_cap = self.gmpe.evaluate(self.base.replace(vs30=1200.0))
        gm_high = self.gmpe.evaluate(self.base.replace(vs30=1450.0))
        self.assertEqual(gm_cap.mean, gm_high.mean)

        below = self.gmpe.evaluate(self.base.replace(vs30=1100.0))
        self.assertNotEqual(below.mean, gm_cap.mean)

    def test_reverse_faulting_term(self) -> None:
        reverse = self.gmpe.evaluate(self.base.replace(rake=90.0))
        strike_slip = self.gmpe.evaluate(self.base.replace(rake=0.0))
        normal = self.gmpe.evaluate(self.base.replace(rake=-90.0))

        self.assertAlmostEqual(reverse.mean - strike_slip.mean,
                               self.gmpe.coeff.phi, places=12)
        self.assertEqual(normal.mean, strike_slip.mean)
        self.assertEqual(reverse.sigma, strike_slip.sigma)

    def test_distance_offset_inside_log(self) -> None:
        # Zero distance is finite and differs from small distances
        at_zero = self.gmpe.evaluate(self.base.replace(rrup=0.0))
        at_one = self.gmpe.evaluate(self.base.replace(rrup=1.0))
        self.assertTrue(at_zero.mean > at_one.mean)

    def test_sigma_period_clips(self) -> None:
        gmm_input = self.base

        def sigma(imt):
            return Idriss2014(imt).evaluate(gmm_input).sigma

        self.assertEqual(sigma(Imt.SA0P01), sigma(Imt.SA0P05))
        self.assertEqual(sigma(Imt.PGA), sigma(Imt.SA0P05))
        self.assertEqual(sigma(Imt.SA3P0), sigma(Imt.SA10P0))
        self.assertNotEqual(sigma(Imt.SA1P0), sigma(Imt.SA3P0))

    def test_sigma_magnitude_clips(self) -> None:
        s = Idriss2014.compute_stddev
        self.assertEqual(s(Imt.SA1P0, 5.0), s(Imt.SA1P0, 4.0))
        self.assertEqual(s(Imt.SA1P0, 7.5), s(Imt.SA1P0, 8.5))
        self.assertAlmostEqual(s(Imt.SA1P0, 6.0) - s(Imt.SA1P0, 7.0),
                               0.06, places=12)

    def test_sigma_independent_of_distance_and_site(self) -> None:
        a = self.gmpe.evaluate(self.base)
        b = self.gmpe.evaluate(self.base.replace(rrup=120.0, vs30=500.0))
        self.assertEqual(a.sigma, b.sigma)


class TestIdriss2014Validation(unittest.TestCase):
    """
    Out-of-range inputs are rejected, never corrected.
    """

    def setUp(self) -> None:
        self.gmpe = Idriss2014(Imt.PGA)

    def test_out_of_range_inputs(self) -> None:
        for changes in ({'mag': 4.9}, {'mag': 8.6}, {'rrup': 150.1},
                        {'rrup': -1.0}, {'vs30': 1500.0}, {'vs30': 449.0},
                        {'rake': 181.0}):
            with self.assertRaises(OutOfRangeError, msg=str(changes)):
                self.gmpe.evaluate(GmmInput(mag=6.0).replace(**changes))

    def test_unread_fields_are_not_validated(self) -> None:
        gmm_input = GmmInput(mag=6.0, dip=120.0, ztop=50.0, rjb=500.0)
        self.gmpe.evaluate(gmm_input)

    def test_missing_period_fails_at_construction(self) -> None:
        class _PgaOnly(Idriss2014):
            @classmethod
            def coefficient_table(cls):
                row = Idriss2014.coefficient_table().for_imt(Imt.PGA)
                return CoefficientTable({Imt.PGA: row})

        self.assertIs(_PgaOnly(Imt.PGA).imt, Imt.PGA)
        with self.assertRaises(MissingPeriodError):
            _PgaOnly(Imt.SA1P0)


if __name__ == "__main__":
    unittest.main()
