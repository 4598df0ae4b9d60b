from dataclasses import dataclass

import numpy as np

from gribtables.grib1.levels import lookup_level_type
from gribtables.grib1.models import ParameterRecord
from gribtables.grib1.parameters import generic_parameter, lookup_parameter


@dataclass(frozen=True)
class LabeledField:
    """
    A decoded GRIB1 data array with its parameter and level metadata.

    values is the 2D (Nj, Ni) array produced by the decoder. The metadata
    fields are the resolved labels; center_id and parameter_number keep the
    raw codes so unresolved fields stay traceable.
    """

    values: np.ndarray
    variable: str
    name: str
    unit: str
    level_name: str
    level_unit: str
    level_value: float | None
    center_id: int
    parameter_number: int

    def __post_init__(self) -> None:
        if not isinstance(self.values, np.ndarray):
            raise ValueError(f"values must be a numpy array, got {type(self.values).__name__}")
        if self.values.ndim != 2:
            raise ValueError(f"values must be 2-dimensional, got shape {self.values.shape}")

    @property
    def label(self) -> str:
        """Display label, e.g. 't @ 500 hPa' or 'tp @ surface'."""
        if self.level_value is None:
            return f"{self.variable} @ {self.level_name}"
        level = f"{self.level_value:g} {self.level_unit}".rstrip()
        return f"{self.variable} @ {level}"

    @property
    def shape(self) -> tuple[int, ...]:
        return self.values.shape


def label_field(
    values: np.ndarray,
    *,
    center_id: int,
    parameter_number: int,
    level_type: int,
    level_value: float | None = None,
    record: ParameterRecord | None = None,
) -> LabeledField:
    """
    Attach GRIB1 parameter and level metadata to a decoded array.

    Codes with no parameter metadata get generic_parameter's labels: 'var{n}',
    'Parameter {n}' and an empty unit.

    Args:
        values: 2D decoded data array
        center_id: Originating center code
        parameter_number: Indicator of parameter
        level_type: Indicator of type of level
        level_value: Level value in the level type's unit, None for single-level types
        record: Already-resolved parameter record; looked up from the codes when None

    Raises:
        ValueError: If values is not a 2D numpy array
    """
    if record is None:
        record = lookup_parameter(center_id, parameter_number) or generic_parameter(parameter_number)
    level = lookup_level_type(level_type)
    return LabeledField(
        values=values,
        variable=record.abbreviation,
        name=record.name,
        unit=record.unit,
        level_name=level.name,
        level_unit=level.unit,
        level_value=level_value,
        center_id=center_id,
        parameter_number=parameter_number,
    )
