"""
Parameter lookups for GRIB1 messages.

Resolves (originating center, parameter number) from sections 1 and 2 of a
GRIB1 message into abbreviation, name and unit.
"""

from gribtables.grib1.centers import resolve_table, select_table
from gribtables.grib1.models import ParameterRecord, ParameterTable


def parameter_table(center_id: int) -> ParameterTable:
    """Return the parameter table a center's messages are resolved against."""
    return resolve_table(select_table(center_id))


def lookup_parameter(center_id: int, parameter_number: int) -> ParameterRecord | None:
    """
    Get parameter metadata for a center and parameter number.

    Args:
        center_id: Originating center code (ECMWF is 98, NCEP is 7)
        parameter_number: Indicator of parameter from the product definition section

    Returns:
        The matching record, or None if the center's table has no such code.
        An owned center table does not fall back to the standard table.

    Examples:
        >>> lookup_parameter(98, 131).abbreviation
        'u'
        >>> lookup_parameter(98, 999) is None
        True
    """
    return parameter_table(center_id).get(parameter_number)


def get_shortname(center_id: int, parameter_number: int) -> str:
    """
    Get the abbreviation for a parameter, suitable for variable identifiers.

    Falls back to 'var{parameter_number}' for codes with no metadata.

    Examples:
        >>> get_shortname(7, 61)
        'tp'
        >>> get_shortname(98, 3)
        'var3'
    """
    record = lookup_parameter(center_id, parameter_number)
    if record is None:
        return generic_parameter(parameter_number).abbreviation
    return record.abbreviation


def generic_parameter(parameter_number: int) -> ParameterRecord:
    """
    Build the placeholder record used for a parameter with no metadata.

    Examples:
        >>> generic_parameter(3)
        ParameterRecord(code=3, abbreviation='var3', name='Parameter 3', unit='')
    """
    return ParameterRecord(
        code=parameter_number,
        abbreviation=f"var{parameter_number}",
        name=f"Parameter {parameter_number}",
        unit="",
    )
