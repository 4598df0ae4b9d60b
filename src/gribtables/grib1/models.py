from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple, TypeAlias


@dataclass(frozen=True)
class ParameterRecord:
    """One row of a GRIB1 parameter table (Table 2 or a center's local table)."""

    code: int
    abbreviation: str
    name: str
    unit: str


class LevelTypeRecord(NamedTuple):
    """Name and unit of a GRIB1 level type (Table 3). Unit is empty when dimensionless."""

    name: str
    unit: str


ParameterTable: TypeAlias = Mapping[int, ParameterRecord]


def build_table(records: Iterable[ParameterRecord]) -> ParameterTable:
    """
    Build a read-only code -> record mapping.

    Raises:
        ValueError: If a code does not fit in one octet or two records share it
    """
    table: dict[int, ParameterRecord] = {}
    for record in records:
        if not 0 <= record.code <= 255:
            raise ValueError(f"parameter code must fit in one octet, got {record.code}")
        if record.code in table:
            raise ValueError(
                f"duplicate parameter code {record.code}: "
                f"{table[record.code].abbreviation!r} and {record.abbreviation!r}"
            )
        table[record.code] = record
    return MappingProxyType(table)


@dataclass(frozen=True)
class Owned:
    """Center handle backed by the center's own parameter table."""

    table: ParameterTable


@dataclass(frozen=True)
class Delegate:
    """Center handle that reuses the WMO standard table without overrides."""


CenterTable: TypeAlias = Owned | Delegate
