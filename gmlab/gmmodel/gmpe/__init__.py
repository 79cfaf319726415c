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
Ground motion prediction equations.

Example
-------
>>> from gmlab.gmmodel.gmpe import GmmInput, create_gmpe
>>> gmpe = create_gmpe('Idriss2014', 'SA-1.00')
>>> gm = gmpe.evaluate(GmmInput(mag=7.0, rrup=20.0, rake=90.0))
>>> gm.mean, gm.sigma
"""

from .base import GMPE, ScalarGroundMotion
from .coefficients import (
    CoefficientError,
    CoefficientTable,
    MissingCoefficientError,
    MissingPeriodError,
)
from .faultstyle import FaultStyle, rake_to_fault_style
from .imt import Imt
from .inputs import Constraints, Field, GmmInput
from .registry import Gmm, create_gmpe, get_gmpe_class, list_gmpes


__all__ = [
    "GMPE",
    "ScalarGroundMotion",
    "CoefficientError",
    "CoefficientTable",
    "MissingCoefficientError",
    "MissingPeriodError",
    "FaultStyle",
    "rake_to_fault_style",
    "Imt",
    "Constraints",
    "Field",
    "GmmInput",
    "Gmm",
    "create_gmpe",
    "get_gmpe_class",
    "list_gmpes",
]
