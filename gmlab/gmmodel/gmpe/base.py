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
"""

import abc as _abc
import os as _os
from dataclasses import dataclass

import numpy as _np
from scipy.stats import norm as _norm

from .coefficients import CoefficientTable
from .imt import Imt


@dataclass(frozen=True)
class ScalarGroundMotion:
    """
    Ground motion as natural-log mean and standard deviation.
    """

    mean: float
    sigma: float

    def __iter__(self):
        return iter((self.mean, self.sigma))

    @property
    def median(self):
        """Median ground motion in linear units."""
        return float(_np.exp(self.mean))

    def percentile(self, p):
        """
        Natural-log ground motion not exceeded with probability p.
        """
        if not 0. < p < 1.:
            raise ValueError('Probability must be in the range (0, 1)')
        return float(self.mean + _norm.ppf(p)*self.sigma)

    def epsilon(self, level):
        """
        Number of standard deviations between a natural-log ground
        motion level and the mean.
        """
        return float((level - self.mean)/self.sigma)


class GMPE(metaclass=_abc.ABCMeta):
    """
    Base class for ground motion prediction equation models (GMPEs).

    An instance is bound to one intensity measure type; its
    coefficients are loaded and checked at construction time.
    """

    _COEFF_FILE = None
    _COEFF_SET = 'default'
    _COEFF_ROW = None

    # Input fields read by the equation
    REQUIRES = ()

    def __init__(self, imt):
        """
        :param imt:
            Imt instance, IMT string (e.g. 'SA-1.00') or period (s)

        :raises ValueError:
            If imt is not one of the Imt members (e.g. an unlisted
            period such as 0.33 s)

        :raises MissingPeriodError:
            If imt is a valid Imt without coefficients for this model
        """
        self.imt = Imt.from_string(imt)
        self.coeff = self.coefficient_table().for_imt(self.imt)

    def __repr__(self):
        return f'{type(self).__name__}({self.imt})'

    @property
    @_abc.abstractmethod
    def NAME(self):
        pass

    @property
    @_abc.abstractmethod
    def REFERENCE_VELOCITY(self):
        pass

    @property
    @_abc.abstractmethod
    def DISTANCE_METRIC(self):
        pass

    @property
    @_abc.abstractmethod
    def MAGNITUDE_TYPE(self):
        pass

    @property
    @_abc.abstractmethod
    def CONSTRAINTS(self):
        pass

    @classmethod
    def coefficient_table(cls):
        """
        Loads the coefficients from a separate file in json format.
        File has to be stored in the 'data' directory next to the
        GMPE class.
        """
        full_path = _os.path.dirname(__file__)
        path_file = _os.path.join(full_path, 'data', cls._COEFF_FILE)
        return CoefficientTable.from_json(path_file, cls._COEFF_ROW,
                                          cls._COEFF_SET)

    @classmethod
    def supported_imts(cls):
        """
        List the available intensity measure types for the gmpe.
        """
        return cls.coefficient_table().imts()

    def evaluate(self, gmm_input):
        """
        Validate the input fields read by the equation and compute
        the ground motion.

        :param GmmInput gmm_input:
            Rupture and site description

        :return ScalarGroundMotion:
            Natural-log mean and standard deviation

        :raises OutOfRangeError:
            If a required field is outside the model constraints
        """
        self.CONSTRAINTS.validate(gmm_input, self.REQUIRES)
        return self.compute(self.coeff, gmm_input)

    @classmethod
    @_abc.abstractmethod
    def compute(cls, coeff, gmm_input):
        """
        Equation kernel: ground motion from a coefficient row and an
        already validated input.
        """
        pass
