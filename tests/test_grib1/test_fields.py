"""
Tests for grib1.fields module.
"""

import dataclasses

import numpy as np
import pytest

from gribtables.grib1.fields import LabeledField, label_field
from gribtables.grib1.models import ParameterRecord
from gribtables.grib1.parameters import generic_parameter


@pytest.fixture
def values():
    """Provide a small 2D field."""
    return np.arange(12, dtype=np.float32).reshape(3, 4)


class TestLabelField:
    """Tests for label_field function."""

    def test_labels_known_parameter_and_level(self, values):
        """Should attach ECMWF parameter and isobaric level metadata."""
        field = label_field(values, center_id=98, parameter_number=130, level_type=100, level_value=500)

        assert field.variable == "t"
        assert field.name == "Temperature"
        assert field.unit == "K"
        assert field.level_name == "isobaric"
        assert field.level_unit == "hPa"
        assert field.level_value == 500
        assert field.values is values

    def test_uses_generic_label_for_unknown_parameter(self, values):
        """Unknown parameters should get var{n} and an empty unit."""
        field = label_field(values, center_id=98, parameter_number=3, level_type=1)

        assert field.variable == "var3"
        assert field.name == "Parameter 3"
        assert field.unit == ""
        assert field.center_id == 98
        assert field.parameter_number == 3

    def test_unknown_level_type_is_labelled_unknown(self, values):
        """Unknown level types should carry the unknown sentinel."""
        field = label_field(values, center_id=7, parameter_number=61, level_type=250)

        assert field.level_name == "unknown"
        assert field.level_unit == ""

    def test_unknown_parameter_matches_generic_parameter(self, values):
        """Fallback labels should be exactly generic_parameter's record."""
        field = label_field(values, center_id=7, parameter_number=200, level_type=1)
        generic = generic_parameter(200)

        assert (field.variable, field.name, field.unit) == (generic.abbreviation, generic.name, generic.unit)

    def test_uses_given_record_without_lookup(self, values):
        """A resolved record should be used as-is instead of the table entry."""
        record = ParameterRecord(130, "ta", "Air temperature", "K")

        field = label_field(values, center_id=98, parameter_number=130, level_type=100, record=record)

        assert field.variable == "ta"
        assert field.name == "Air temperature"
        assert field.parameter_number == 130

    def test_rejects_one_dimensional_values(self):
        """Should raise ValueError for non-2D arrays."""
        with pytest.raises(ValueError, match="2-dimensional"):
            label_field(np.zeros(5), center_id=98, parameter_number=11, level_type=1)

    def test_rejects_non_array_values(self):
        """Should raise ValueError for plain lists."""
        with pytest.raises(ValueError, match="numpy array"):
            label_field([[1.0, 2.0]], center_id=98, parameter_number=11, level_type=1)


class TestLabeledField:
    """Tests for LabeledField dataclass."""

    def test_label_with_level_value_and_unit(self, values):
        field = label_field(values, center_id=98, parameter_number=130, level_type=100, level_value=500)
        assert field.label == "t @ 500 hPa"

    def test_label_with_dimensionless_level_value(self, values):
        """Empty level units should not leave trailing whitespace."""
        field = label_field(values, center_id=98, parameter_number=167, level_type=102, level_value=0)
        assert field.label == "t2m @ 0"

    def test_label_without_level_value(self, values):
        field = label_field(values, center_id=7, parameter_number=61, level_type=1)
        assert field.label == "tp @ surface"

    def test_shape_matches_values(self, values):
        field = label_field(values, center_id=98, parameter_number=11, level_type=1)
        assert field.shape == (3, 4)

    def test_is_frozen(self, values):
        field = label_field(values, center_id=98, parameter_number=11, level_type=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            field.variable = "x"

    def test_direct_construction_validates(self):
        with pytest.raises(ValueError, match="2-dimensional"):
            LabeledField(
                values=np.zeros((2, 2, 2)),
                variable="t",
                name="Temperature",
                unit="K",
                level_name="surface",
                level_unit="",
                level_value=None,
                center_id=98,
                parameter_number=11,
            )
