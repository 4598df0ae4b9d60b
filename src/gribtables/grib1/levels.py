"""
GRIB1 level types (Table 3).

Every code resolves: codes missing from the table return UNKNOWN_LEVEL, which
is ordinary data and not an error.
"""

from collections.abc import Mapping
from types import MappingProxyType

from gribtables.grib1.models import LevelTypeRecord

UNKNOWN_LEVEL = LevelTypeRecord("unknown", "")

# Reference: https://codes.ecmwf.int/grib/format/grib1/level/3/
LEVEL_TYPES: Mapping[int, LevelTypeRecord] = MappingProxyType({
    1: LevelTypeRecord("surface", ""),
    2: LevelTypeRecord("cloud_base", ""),
    3: LevelTypeRecord("cloud_top", ""),
    4: LevelTypeRecord("isotherm_zero", "m"),
    100: LevelTypeRecord("isobaric", "hPa"),
    102: LevelTypeRecord("mean_sea_level", ""),
    103: LevelTypeRecord("fixed_height", "m"),
    105: LevelTypeRecord("fixed_height_above_ground", "m"),
    106: LevelTypeRecord("sigma", "sigma"),
    107: LevelTypeRecord("sigma_height", "sigma"),
    108: LevelTypeRecord("sigma_pressure", "sigma"),
    109: LevelTypeRecord("hybrid", "hybrid"),
    111: LevelTypeRecord("depth_below_surface", "m"),
    112: LevelTypeRecord("layer_between_depths", "m"),
    113: LevelTypeRecord("isentropic", "K"),
    114: LevelTypeRecord("layer_between_isentropic", "K"),
    200: LevelTypeRecord("entire_atmosphere", ""),
    201: LevelTypeRecord("entire_ocean", ""),
})


def lookup_level_type(level_type: int) -> LevelTypeRecord:
    """
    Get name and unit for a GRIB1 level type code.

    Examples:
        >>> lookup_level_type(100)
        LevelTypeRecord(name='isobaric', unit='hPa')
        >>> lookup_level_type(250)
        LevelTypeRecord(name='unknown', unit='')
    """
    return LEVEL_TYPES.get(level_type, UNKNOWN_LEVEL)
