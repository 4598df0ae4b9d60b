"""
GRIB1 parameter tables.

Pure data module: every table is built once at import time and is read-only.

Currently ships:
- WMO standard Table 2 (subset used by the fallback path for every center)
- ECMWF local table 128 (center 98)

Other centers either delegate to the standard table or are not listed at all;
see gribtables.grib1.centers for the dispatch rules.
"""

from gribtables.grib1.models import ParameterRecord, ParameterTable, build_table

# WMO GRIB1 Table 2 - Parameters
# Reference: https://codes.ecmwf.int/grib/format/grib1/parameter/2/
STANDARD_TABLE: ParameterTable = build_table((
    ParameterRecord(1, "pres", "Pressure", "Pa"),
    ParameterRecord(2, "prmsl", "Pressure reduced to MSL", "Pa"),
    ParameterRecord(7, "gh", "Geopotential height", "gpm"),
    ParameterRecord(11, "t", "Temperature", "K"),
    ParameterRecord(33, "u", "U-component of wind", "m s-1"),
    ParameterRecord(34, "v", "V-component of wind", "m s-1"),
    ParameterRecord(39, "w", "Vertical velocity", "Pa s-1"),
    ParameterRecord(51, "q", "Specific humidity", "kg kg-1"),
    ParameterRecord(52, "r", "Relative humidity", "%"),
    ParameterRecord(61, "tp", "Total precipitation", "kg m-2"),
))

# ECMWF local Table 128 (center 98)
# Reference: https://codes.ecmwf.int/grib/param-db/
# Abbreviations repeat across codes (1/134 "sp", 51/53/133 "q", 61/228 "tp"); codes do not.
ECMWF_TABLE: ParameterTable = build_table((
    ParameterRecord(1, "sp", "Surface pressure", "Pa"),
    ParameterRecord(2, "prmsl", "Pressure reduced to MSL", "Pa"),
    ParameterRecord(11, "t", "Temperature", "K"),
    ParameterRecord(20, "vit", "Visibility", "m"),
    ParameterRecord(22, "clmr", "Mixing ratio", "kg kg-1"),
    ParameterRecord(29, "lvt", "Type of low vegetation", "~"),
    ParameterRecord(31, "ci", "Sea-ice cover", "(0-1)"),
    ParameterRecord(32, "asn", "Snow albedo", "(0-1)"),
    ParameterRecord(33, "rsn", "Snow density", "kg m-3"),
    ParameterRecord(34, "sstk", "Sea surface temperature", "K"),
    ParameterRecord(39, "swvl1", "Volumetric soil water layer 1", "m3 m-3"),
    ParameterRecord(44, "es", "Snow evaporation", "m of water equivalent"),
    ParameterRecord(47, "dsrp", "Direct solar radiation", "W m-2 s"),
    ParameterRecord(49, "10fg", "10 metre wind gust", "m s-1"),
    ParameterRecord(50, "lspf", "Large-scale precipitation fraction", "s"),
    ParameterRecord(51, "q", "Specific humidity", "kg kg-1"),
    ParameterRecord(52, "r", "Relative humidity", "%"),
    ParameterRecord(53, "q", "Humidity mixing ratio", "kg kg-1"),
    ParameterRecord(54, "pwat", "Precipitable water", "kg m-2"),
    ParameterRecord(59, "prate", "Precipitation rate", "kg m-2 s-1"),
    ParameterRecord(61, "tp", "Total precipitation", "m"),
    ParameterRecord(66, "lsff", "Lake shape factor", "dimensionless"),
    ParameterRecord(67, "lmlt", "Lake mix-layer temperature", "K"),
    ParameterRecord(71, "tcc", "Total cloud cover", "%"),
    ParameterRecord(78, "tclw", "Total column cloud liquid water", "kg m-2"),
    ParameterRecord(79, "tciw", "Total column cloud ice water", "kg m-2"),
    ParameterRecord(89, "sunsd", "Sunshine duration", "s"),
    ParameterRecord(121, "mx2t", "Maximum temperature at 2 metres", "K"),
    ParameterRecord(122, "mn2t", "Minimum temperature at 2 metres", "K"),
    ParameterRecord(123, "10fg", "10 metre wind gust", "m s-1"),
    ParameterRecord(124, "emis", "Surface emissivity", "dimensionless"),
    ParameterRecord(125, "veg", "Vegetation fraction", "(0-1)"),
    ParameterRecord(126, "sltyp", "Soil type", "dimensionless"),
    ParameterRecord(127, "cape", "Convective available potential energy", "J kg-1"),
    ParameterRecord(128, "cin", "Convective inhibition", "J kg-1"),
    ParameterRecord(129, "z", "Geopotential", "m2 s-2"),
    ParameterRecord(130, "t", "Temperature", "K"),
    ParameterRecord(131, "u", "U component of wind", "m s-1"),
    ParameterRecord(132, "v", "V component of wind", "m s-1"),
    ParameterRecord(133, "q", "Specific humidity", "kg kg-1"),
    ParameterRecord(134, "sp", "Surface pressure", "Pa"),
    ParameterRecord(135, "w", "Vertical velocity", "Pa s-1"),
    ParameterRecord(136, "tcw", "Total column water", "kg m-2"),
    ParameterRecord(137, "tcwv", "Total column water vapour", "kg m-2"),
    ParameterRecord(139, "stl1", "Soil temperature level 1", "K"),
    ParameterRecord(141, "sd", "Snow depth", "m of water equivalent"),
    ParameterRecord(143, "cp", "Convective precipitation", "m"),
    ParameterRecord(144, "sf", "Snowfall", "m of water equivalent"),
    ParameterRecord(148, "chnk", "Charnock", "dimensionless"),
    ParameterRecord(151, "prmsl", "Pressure reduced to MSL", "Pa"),
    ParameterRecord(157, "r", "Relative humidity", "%"),
    ParameterRecord(159, "blh", "Boundary layer height", "m"),
    ParameterRecord(164, "tcc", "Total cloud cover", "(0-1)"),
    ParameterRecord(165, "u10", "10 metre U wind component", "m s-1"),
    ParameterRecord(166, "v10", "10 metre V wind component", "m s-1"),
    ParameterRecord(167, "t2m", "2 metre temperature", "K"),
    ParameterRecord(168, "d2m", "2 metre dewpoint temperature", "K"),
    ParameterRecord(169, "ssrd", "Surface solar radiation downwards", "J m-2"),
    ParameterRecord(179, "ttr", "Top net thermal radiation", "J m-2"),
    ParameterRecord(186, "lcc", "Low cloud cover", "(0-1)"),
    ParameterRecord(187, "mcc", "Medium cloud cover", "(0-1)"),
    ParameterRecord(188, "hcc", "High cloud cover", "(0-1)"),
    ParameterRecord(213, "vimd", "Vertically integrated moisture divergence", "kg m-2"),
    ParameterRecord(217, "sdwe", "Standard deviation wave height", "m"),
    ParameterRecord(218, "mpww", "Mean wave period based on second moment", "s"),
    ParameterRecord(219, "p1ww", "Mean wave period based on first moment", "s"),
    ParameterRecord(220, "mzww", "Mean zero-crossing wave period", "s"),
    ParameterRecord(221, "ipww", "Mean period of wind waves", "s"),
    ParameterRecord(226, "10ws", "10 metre wind speed", "m s-1"),
    ParameterRecord(228, "tp", "Total precipitation", "m"),
    ParameterRecord(229, "iews", "Instantaneous eastward turbulent surface stress", "N m-2"),
    ParameterRecord(230, "inss", "Instantaneous northward turbulent surface stress", "N m-2"),
    ParameterRecord(231, "ishf", "Instantaneous surface heat flux", "W m-2"),
    ParameterRecord(232, "ie", "Instantaneous moisture flux", "kg m-2 s-1"),
    ParameterRecord(234, "lsrh", "Logarithm of surface roughness length for heat", "dimensionless"),
    ParameterRecord(235, "skt", "Skin temperature", "K"),
    ParameterRecord(236, "stl4", "Soil temperature level 4", "K"),
    ParameterRecord(237, "swvl4", "Volumetric soil water layer 4", "m3 m-3"),
    ParameterRecord(238, "tsn", "Temperature of snow layer", "K"),
    ParameterRecord(239, "csf", "Convective snowfall", "m of water equivalent"),
    ParameterRecord(240, "lsf", "Large-scale snowfall", "m of water equivalent"),
    ParameterRecord(241, "acf", "Accumulated cloud fraction tendency", "(-1 to 1)"),
    ParameterRecord(243, "fal", "Forecast albedo", "(0-1)"),
    ParameterRecord(244, "fsr", "Forecast surface roughness", "m"),
    ParameterRecord(246, "clwc", "Cloud liquid water content", "kg kg-1"),
    ParameterRecord(247, "ciwc", "Cloud ice water content", "kg kg-1"),
))
