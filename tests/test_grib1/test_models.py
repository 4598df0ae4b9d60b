"""
Tests for grib1.models module.
"""

import dataclasses

import pytest

from gribtables.grib1.models import (
    Delegate,
    LevelTypeRecord,
    Owned,
    ParameterRecord,
    build_table,
)


class TestParameterRecord:
    """Tests for ParameterRecord dataclass."""

    def test_is_frozen(self):
        """Records should be immutable."""
        record = ParameterRecord(11, "t", "Temperature", "K")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.unit = "C"

    def test_compares_by_value(self):
        assert ParameterRecord(11, "t", "Temperature", "K") == ParameterRecord(11, "t", "Temperature", "K")

    def test_is_hashable(self):
        record = ParameterRecord(11, "t", "Temperature", "K")
        assert {record: 1}[record] == 1


class TestLevelTypeRecord:
    """Tests for LevelTypeRecord."""

    def test_equals_plain_tuple(self):
        assert LevelTypeRecord("isobaric", "hPa") == ("isobaric", "hPa")

    def test_is_immutable(self):
        record = LevelTypeRecord("surface", "")

        with pytest.raises(AttributeError):
            record.unit = "m"


class TestBuildTable:
    """Tests for build_table function."""

    def test_keys_records_by_code(self):
        """Should map each record's code to the record."""
        records = (
            ParameterRecord(1, "pres", "Pressure", "Pa"),
            ParameterRecord(11, "t", "Temperature", "K"),
        )

        table = build_table(records)

        assert dict(table) == {1: records[0], 11: records[1]}

    def test_allows_shared_abbreviations(self):
        """Abbreviations do not need to be unique."""
        table = build_table((
            ParameterRecord(1, "sp", "Surface pressure", "Pa"),
            ParameterRecord(134, "sp", "Surface pressure", "Pa"),
        ))

        assert len(table) == 2

    def test_rejects_duplicate_codes(self):
        """Should raise ValueError when two records share a code."""
        with pytest.raises(ValueError, match="duplicate parameter code 11"):
            build_table((
                ParameterRecord(11, "t", "Temperature", "K"),
                ParameterRecord(11, "tt", "Other temperature", "K"),
            ))

    @pytest.mark.parametrize("code", [-1, 256])
    def test_rejects_codes_outside_one_octet(self, code):
        """Should raise ValueError for codes a GRIB1 message cannot carry."""
        with pytest.raises(ValueError, match="one octet"):
            build_table((ParameterRecord(code, "x", "X", ""),))

    def test_returns_read_only_mapping(self):
        """Built tables should reject mutation."""
        table = build_table((ParameterRecord(1, "pres", "Pressure", "Pa"),))

        with pytest.raises(TypeError):
            table[2] = ParameterRecord(2, "prmsl", "Pressure reduced to MSL", "Pa")


class TestCenterHandles:
    """Tests for Owned and Delegate handles."""

    def test_owned_wraps_table(self):
        table = build_table((ParameterRecord(1, "pres", "Pressure", "Pa"),))
        assert Owned(table).table is table

    def test_owned_and_delegate_are_distinct(self):
        table = build_table(())
        assert Owned(table) != Delegate()
