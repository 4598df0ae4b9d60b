"""
Dagster resources for labelling decoded GRIB1 fields.

This module provides:
1. Grib1TablesResource: parameter and level-type lookups for assets

LOOKUP POLICY:
The underlying gribtables.grib1 lookups never fail: a parameter miss is None
and an unknown level type is ("unknown", ""). The resource turns a parameter
miss into either a generic record (var{n}) or, with fail_on_unknown=True, a
dagster.Failure so a run stops on fields it cannot label.

CONFIGURATION:
Wired from environment variables in resources() below:
- GRIB1_FAIL_ON_UNKNOWN - fail on unknown parameters (default: false)
- GRIB1_DEFAULT_CENTER  - center used when a caller passes None (default: 98)
"""
import os

import numpy as np

import dagster as dg
from gribtables.grib1.centers import ECMWF, center_name
from gribtables.grib1.fields import LabeledField, label_field
from gribtables.grib1.levels import lookup_level_type
from gribtables.grib1.models import LevelTypeRecord, ParameterRecord
from gribtables.grib1.parameters import generic_parameter, lookup_parameter

_TRUTHY = {"true", "1", "yes", "on"}


class Grib1TablesResource(dg.ConfigurableResource):
    """
    GRIB1 code-table lookups for Dagster assets.

    Attributes:
        fail_on_unknown: Raise dagster.Failure on unknown parameters instead of labelling them generically
        default_center: Originating center used when a caller passes center_id=None

    Example usage in an asset:
        @dg.asset
        def my_asset(grib1_tables: Grib1TablesResource):
            record = grib1_tables.describe_parameter(98, 167)
            # ... record.abbreviation == "t2m" ...
    """

    fail_on_unknown: bool = False
    default_center: int = ECMWF

    def _center(self, center_id: int | None) -> int:
        return self.default_center if center_id is None else center_id

    def describe_parameter(
        self,
        center_id: int | None,
        parameter_number: int,
        context: dg.AssetExecutionContext | None = None,
    ) -> ParameterRecord:
        """
        Resolve a parameter, falling back to a generic record on a miss.

        Args:
            center_id: Originating center code, or None for default_center
            parameter_number: Indicator of parameter
            context: Optional asset context; its logger is used when given

        Returns:
            The table record, or generic_parameter(parameter_number)

        Raises:
            dagster.Failure: If fail_on_unknown is set and the parameter is unknown
        """
        center = self._center(center_id)
        record = lookup_parameter(center, parameter_number)
        if record is not None:
            return record

        log = context.log if context is not None else dg.get_dagster_logger()
        if self.fail_on_unknown:
            log.error(f"Unknown GRIB1 parameter: center={center}, parameter={parameter_number}")
            raise dg.Failure(
                description=f"No GRIB1 parameter metadata for center {center}, parameter {parameter_number}",
                metadata={
                    "center_id": center,
                    "center_name": center_name(center) or "",
                    "parameter_number": parameter_number,
                },
            )

        log.warning(
            f"Unknown GRIB1 parameter: center={center}, parameter={parameter_number}, "
            f"labelling as var{parameter_number}"
        )
        return generic_parameter(parameter_number)

    def describe_level(self, level_type: int) -> LevelTypeRecord:
        """Resolve a level type. Unknown codes return ("unknown", "")."""
        return lookup_level_type(level_type)

    def label_field(
        self,
        values: np.ndarray,
        *,
        center_id: int | None,
        parameter_number: int,
        level_type: int,
        level_value: float | None = None,
        context: dg.AssetExecutionContext | None = None,
    ) -> LabeledField:
        """
        Attach metadata to a decoded 2D array, applying the fail_on_unknown policy first.

        Raises:
            dagster.Failure: If fail_on_unknown is set and the parameter is unknown
            ValueError: If values is not a 2D numpy array
        """
        center = self._center(center_id)
        record = self.describe_parameter(center, parameter_number, context=context)
        return label_field(
            values,
            center_id=center,
            parameter_number=parameter_number,
            level_type=level_type,
            level_value=level_value,
            record=record,
        )


# -----------------------------------------------------------------------------
# Resource Definitions - Wired up for use by assets
# -----------------------------------------------------------------------------

@dg.definitions
def resources():
    return dg.Definitions(
        resources={
            "grib1_tables": Grib1TablesResource(
                fail_on_unknown=os.environ.get("GRIB1_FAIL_ON_UNKNOWN", "false").lower() in _TRUTHY,
                default_center=int(os.environ.get("GRIB1_DEFAULT_CENTER", ECMWF)),
            ),
        }
    )
