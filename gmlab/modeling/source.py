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
Earthquake source parameters: supported ranges of depth, width and
magnitude, and moment/magnitude/slip conversions.

Depths follow the positive-down convention of seismology.
"""

import numpy as _np

from gmlab.libutils.ranges import Range, check_in_range

# Overall earthquake depth (km)
MIN_DEPTH = -5.0
MAX_DEPTH = 700.0
DEPTH_RANGE = Range.closed(MIN_DEPTH, MAX_DEPTH)

CRUSTAL_DEPTH_RANGE = Range.closed(0.0, 40.0)
CRUSTAL_WIDTH_RANGE = Range.open_closed(0.0, 60.0)

SLAB_DEPTH_RANGE = Range.closed(20.0, 700.0)

INTERFACE_DEPTH_RANGE = Range.closed(0.0, 60.0)
INTERFACE_WIDTH_RANGE = Range.open_closed(0.0, 200.0)

# Not bound to any particular magnitude scale
MIN_MAG = -2.0
MAX_MAG = 9.7
MAG_RANGE = Range.closed(MIN_MAG, MAX_MAG)

# Shear modulus (N/m2)
SHEAR_MODULUS = 3e10

# Hanks & Kanamori scaling constant for moment in N*m
_SCALE_N_M = 9.05


def validate_depth(depth):
    """
    Verify that a crustal rupture depth is within [0..40] km.
    """
    return check_in_range(CRUSTAL_DEPTH_RANGE, 'Depth', depth)


def validate_slab_depth(depth):
    """
    Verify that an intraslab rupture depth is within [20..700] km.
    """
    return check_in_range(SLAB_DEPTH_RANGE, 'Subduction Slab Depth', depth)


def validate_interface_depth(depth):
    """
    Verify that an interface rupture depth is within [0..60] km.
    """
    return check_in_range(INTERFACE_DEPTH_RANGE,
                          'Subduction Interface Depth', depth)


def validate_width(width):
    """
    Verify that a crustal rupture width is within (0..60] km.
    """
    return check_in_range(CRUSTAL_WIDTH_RANGE, 'Width', width)


def validate_interface_width(width):
    """
    Verify that an interface rupture width is within (0..200] km.
    """
    return check_in_range(INTERFACE_WIDTH_RANGE,
                          'Subduction Interface Width', width)


def check_depth(depth):
    """
    Ensure that -5 <= depth <= 700 km.

    :param float depth:
        Earthquake depth (km, positive down)

    :return float depth:
        The validated depth

    :raises OutOfRangeError:
        If depth is outside [-5..700] km
    """
    return check_in_range(DEPTH_RANGE, 'Depth', depth)


def check_magnitude(magnitude):
    """
    Ensure that -2.0 <= magnitude <= 9.7.

    :param float magnitude:
        Magnitude of any scale

    :return float magnitude:
        The validated magnitude

    :raises OutOfRangeError:
        If magnitude is outside [-2.0..9.7]
    """
    return check_in_range(MAG_RANGE, 'Magnitude', magnitude)


def magnitude_to_moment(mw):
    """
    Hanks & Kanamori equation (moment in N*m)
    """
    return 10.**(1.5*mw + _SCALE_N_M)


def moment_to_magnitude(m0):
    """
    Hanks & Kanamori equation (moment in N*m)
    """
    return (_np.log10(m0) - _SCALE_N_M)/1.5


def moment(area, slip, mu=SHEAR_MODULUS):
    """
    Seismic moment of a fault area with average slip. If slip rate
    is given, moment rate is returned.

    :param float area:
        Fault area (m2)

    :param float slip:
        Average slip (m) or slip rate (m/t)

    :param float mu:
        Shear modulus (N/m2)

    :return float m0:
        Moment (N*m) or moment rate (N*m/t)
    """
    return mu*area*slip


def slip(area, m0, mu=SHEAR_MODULUS):
    """
    Average slip across a fault area releasing the given moment. If
    moment rate is given, slip rate is returned.

    :param float area:
        Fault area (m2)

    :param float m0:
        Moment (N*m) or moment rate (N*m/t)

    :param float mu:
        Shear modulus (N/m2)

    :return float slip:
        Slip (m) or slip rate (m/t)
    """
    return m0/(area*mu)
