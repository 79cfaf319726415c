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
Period-indexed GMPE coefficient tables.

Each GMPE declares a frozen dataclass describing one row of its
coefficient table (one field per named coefficient plus the 'imt'
field). A CoefficientTable is filled once from a JSON resource and is
read-only afterwards.

Coefficient file format
-----------------------
{
  "coefficients": {
    "<coeff_set>": {
      "keys": ["<name1>", "<name2>", ...],
      "type": {
        "<imt>": [<value1>, <value2>, ...],
        ...
      }
    }
  }
}

IMT keys are parsed with Imt.from_string (e.g. "PGA", "SA-0.20").
Every field of the row dataclass must appear in "keys": a missing name
is reported when the file is loaded, not when a model is evaluated.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Type

from .imt import Imt

logger = logging.getLogger(__name__)

_TABLE_CACHE: Dict[Tuple[str, str, type], 'CoefficientTable'] = {}


class CoefficientError(KeyError):
    """Base class of coefficient configuration errors."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


class MissingPeriodError(CoefficientError):
    """Raised when a coefficient table has no row for an IMT."""

    def __init__(self, imt, available=()):
        self.imt = imt
        self.available = tuple(available)
        names = ', '.join(str(i) for i in self.available)
        super().__init__(
            f'Not a valid intensity measure type: {imt}. '
            f'Available: {names}'
        )


class MissingCoefficientError(CoefficientError):
    """Raised when a coefficient source lacks a required coefficient."""

    def __init__(self, names, source=None):
        self.names = tuple(names)
        self.source = source
        where = f' in {source}' if source else ''
        super().__init__(
            f'Missing coefficient(s) {", ".join(self.names)}{where}'
        )


def coefficient_names(row_type: Type) -> List[str]:
    """
    Return the coefficient names of a row dataclass (all fields but
    'imt').
    """
    return [f.name for f in dataclasses.fields(row_type) if f.name != 'imt']


class CoefficientTable:
    """
    Immutable mapping of Imt to typed coefficient rows.
    """

    def __init__(self, rows: Mapping[Imt, Any]):
        if not rows:
            raise ValueError('Coefficient table must contain at least one row')
        ordered = dict(sorted(rows.items(), key=lambda kv: kv[0]))
        self._rows = MappingProxyType(ordered)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Imt]:
        return iter(self._rows)

    def __contains__(self, imt) -> bool:
        return imt in self._rows

    def for_imt(self, imt: Imt):
        """
        Extract the coefficient row of a given intensity measure type.

        Raises
        ------
        MissingPeriodError
            If the table has no row for imt.
        """
        try:
            return self._rows[imt]
        except KeyError:
            raise MissingPeriodError(imt, self.imts()) from None

    def imts(self) -> List[Imt]:
        """
        List the available intensity measure types.
        """
        return list(self._rows)

    @classmethod
    def from_mapping(cls, keys, values: Mapping[Any, List[float]],
                     row_type: Type, source=None) -> 'CoefficientTable':
        """
        Build a table from coefficient names and per-IMT value lists.

        Parameters
        ----------
        keys
            Coefficient names, in column order.
        values
            Mapping of IMT (Imt or any string accepted by
            Imt.from_string) to the list of values.
        row_type
            Frozen dataclass of one row.
        source
            Optional description of the origin (used in errors).
        """
        keys = list(keys)
        required = coefficient_names(row_type)

        missing = [name for name in required if name not in keys]
        if missing:
            raise MissingCoefficientError(missing, source)

        rows = {}
        for key, vals in values.items():
            imt = Imt.from_string(key)
            if len(vals) != len(keys):
                raise ValueError(
                    f'Row {key!r} has {len(vals)} values, '
                    f'expected {len(keys)}'
                )
            if imt in rows:
                raise ValueError(f'Duplicate row for {imt}')

            coeff = dict(zip(keys, (float(v) for v in vals)))
            rows[imt] = row_type(
                imt=imt, **{name: coeff[name] for name in required}
            )

        return cls(rows)

    @classmethod
    def from_json(cls, json_file: str, row_type: Type,
                  coeff_set: str = 'default') -> 'CoefficientTable':
        """
        Load (and cache) a coefficient table from a json file.
        """
        cache_key = (str(json_file), coeff_set, row_type)
        if cache_key in _TABLE_CACHE:
            return _TABLE_CACHE[cache_key]

        logger.debug('Loading coefficient set %r from %s',
                     coeff_set, json_file)

        with open(json_file, 'r', encoding='utf-8') as jf:
            raw = json.load(jf)

        try:
            data = raw['coefficients'][coeff_set]
        except (KeyError, TypeError):
            raise ValueError(
                f'Coefficient set {coeff_set!r} not found in {json_file}'
            ) from None

        table = cls.from_mapping(data['keys'], data['type'], row_type,
                                 source=json_file)

        _TABLE_CACHE[cache_key] = table
        return table


def clear_cache() -> None:
    """
    Clear the table cache (mainly for tests).
    """
    _TABLE_CACHE.clear()
