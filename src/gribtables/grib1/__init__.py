"""
GRIB1 code-table utilities.

This module resolves the integer codes a GRIB1 decoder extracts from a message
header into descriptive metadata: parameter abbreviation, name and unit, and
level-type name and unit.

Usage:
    from gribtables.grib1 import lookup_parameter, lookup_level_type

    record = lookup_parameter(center_id, parameter_number)
    name = record.abbreviation if record else f"var{parameter_number}"
    level_name, level_unit = lookup_level_type(level_type)

All tables are immutable and built at import time; every function is pure.
"""

from gribtables.grib1.centers import (
    CENTER_TABLES,
    center_name,
    resolve_table,
    select_table,
)
from gribtables.grib1.fields import LabeledField, label_field
from gribtables.grib1.levels import LEVEL_TYPES, UNKNOWN_LEVEL, lookup_level_type
from gribtables.grib1.models import (
    CenterTable,
    Delegate,
    LevelTypeRecord,
    Owned,
    ParameterRecord,
    ParameterTable,
)
from gribtables.grib1.parameters import generic_parameter, get_shortname, lookup_parameter, parameter_table
from gribtables.grib1.tables import ECMWF_TABLE, STANDARD_TABLE

__all__ = [
    "CENTER_TABLES",
    "CenterTable",
    "Delegate",
    "ECMWF_TABLE",
    "LEVEL_TYPES",
    "LabeledField",
    "LevelTypeRecord",
    "Owned",
    "ParameterRecord",
    "ParameterTable",
    "STANDARD_TABLE",
    "UNKNOWN_LEVEL",
    "center_name",
    "generic_parameter",
    "get_shortname",
    "label_field",
    "lookup_level_type",
    "lookup_parameter",
    "parameter_table",
    "resolve_table",
    "select_table",
]
