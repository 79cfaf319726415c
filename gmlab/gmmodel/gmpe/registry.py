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
GMPE registry: lookup of ground motion models by identifier.

Each model is a member of the Gmm enum, which can be resolved from its
identifier (e.g. 'IDRISS_14'), its class name ('Idriss2014') or one of
its aliases. GMPE instances are immutable once built, so one shared
instance is kept per (model, IMT) pair.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List, Tuple, Type

from .base import GMPE
from .idriss_2014 import Idriss2014
from .imt import Imt

logger = logging.getLogger(__name__)

_INSTANCE_CACHE: Dict[Tuple['Gmm', Imt], GMPE] = {}


class Gmm(enum.Enum):
    """
    Registered ground motion models: (class, aliases).
    """

    IDRISS_14 = (Idriss2014, ('Idriss_2014', 'idriss2014'))

    def __init__(self, gmpe_class, aliases):
        self.gmpe_class = gmpe_class
        self.aliases = aliases

    def __str__(self) -> str:
        return self.gmpe_class.NAME

    def instance(self, imt: Any) -> GMPE:
        """
        Return the shared model instance for an intensity measure type
        (Imt, IMT string or period).
        """
        imt = Imt.from_string(imt)
        key = (self, imt)
        gmpe = _INSTANCE_CACHE.get(key)
        if gmpe is None:
            logger.debug('Creating %s for %s', self, imt)
            gmpe = self.gmpe_class(imt)
            _INSTANCE_CACHE[key] = gmpe
        return gmpe

    @classmethod
    def from_name(cls, name: str) -> 'Gmm':
        """
        Resolve an identifier, class name or alias.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        for gmm in cls:
            if name in (gmm.name, gmm.gmpe_class.__name__) or \
                    name in gmm.aliases:
                return gmm
        available = ', '.join(list_gmpes())
        raise KeyError(f'Unknown GMPE {name!r}. Available: {available}')


def list_gmpes() -> List[str]:
    """
    Return the sorted class names of the registered GMPEs.
    """
    return sorted(gmm.gmpe_class.__name__ for gmm in Gmm)


def get_gmpe_class(name: str) -> Type[GMPE]:
    """
    Return the GMPE class registered under a name or alias.
    """
    return Gmm.from_name(name).gmpe_class


def create_gmpe(name: str, imt: Any) -> GMPE:
    """
    Return the shared GMPE registered under name, bound to an
    intensity measure type.
    """
    return Gmm.from_name(name).instance(imt)


def supported_imts(name: str) -> List[Imt]:
    """
    List the intensity measure types supported by a registered GMPE.
    """
    return get_gmpe_class(name).supported_imts()


def clear_caches() -> None:
    """
    Drop the shared instances (mainly for tests).
    """
    _INSTANCE_CACHE.clear()
