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
Style-of-faulting classification from rake angle.
"""

import enum
from math import isnan

from gmlab.libutils.ranges import Range

RAKE_RANGE = Range.closed(-180.0, 180.0)


class FaultStyle(enum.Enum):
    """
    Style of faulting.
    """

    STRIKE_SLIP = 'strike-slip'
    NORMAL = 'normal'
    REVERSE = 'reverse'
    UNKNOWN = 'undetermined'


def rake_to_fault_style(rake):
    """
    Classify a rake angle (degrees) using +/-45 degree bands around
    pure reverse (90) and pure normal (-90) slip:

        45 < rake < 135       reverse
        -135 < rake < -45     normal
        otherwise             strike-slip

    Rakes outside [-180, 180] and NaN are undetermined.
    """
    if isnan(rake) or not RAKE_RANGE.contains(rake):
        return FaultStyle.UNKNOWN

    if 45.0 < rake < 135.0:
        return FaultStyle.REVERSE

    if -135.0 < rake < -45.0:
        return FaultStyle.NORMAL

    return FaultStyle.STRIKE_SLIP
