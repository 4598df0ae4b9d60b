"""
Originating-center dispatch for GRIB1 parameter tables.

Each listed center maps to a handle: Owned(table) for a center with its own
local table, Delegate() for a center that reuses the WMO standard table.
Centers not listed here delegate implicitly, so dispatch never fails.

A handle selects a table; it does not chain tables. A code missing from an
owned table is missing for that center even if the standard table has it.
"""

from collections.abc import Mapping
from types import MappingProxyType

from grib2io import tables as grib2io_tables

from gribtables.grib1.models import CenterTable, Delegate, Owned, ParameterTable
from gribtables.grib1.tables import ECMWF_TABLE, STANDARD_TABLE

ECMWF = 98
NCEP = 7

CENTER_TABLES: Mapping[int, CenterTable] = MappingProxyType({
    ECMWF: Owned(ECMWF_TABLE),
    # NCEP Office Note 388 Table 2 is not shipped; NCEP fields resolve against Table 2.
    NCEP: Delegate(),
})

_STANDARD = Delegate()


def select_table(center_id: int) -> CenterTable:
    """Return the table handle for a center. Unlisted centers get Delegate()."""
    return CENTER_TABLES.get(center_id, _STANDARD)


def resolve_table(handle: CenterTable) -> ParameterTable:
    """Turn a dispatcher handle into the concrete parameter table."""
    if isinstance(handle, Owned):
        return handle.table
    return STANDARD_TABLE


def center_name(center_id: int) -> str | None:
    """
    Get the WMO name of an originating center.

    GRIB1 and GRIB2 share Common Code Table C-1, so the name is read from
    grib2io's originating_centers table.

    Args:
        center_id: Originating center code from section 1 of the message

    Returns:
        Center name, or None if the code does not fit in one octet or is not in
        the table.
    """
    # grib2io matches misses against range keys as strings, so 60000 would read as "Reserved"
    if not 0 <= center_id <= 255:
        return None
    return grib2io_tables.get_value_from_table(center_id, "originating_centers")
