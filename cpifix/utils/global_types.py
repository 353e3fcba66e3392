"""
Global type enumerations shared across the library.

Enumerations:
- InflationIndexTypes: standard published price indices, used to look up
  the conventions of a ready-made index (see
  cpifix.market.indices.standard_indices)

Example:
    >>> ukrpi = zero_index(InflationIndexTypes.UK_RPI, curve_handle)
"""

from enum import Enum


class InflationIndexTypes(Enum):
    UK_RPI = 1
    UK_CPI = 2
    US_CPI_U = 3
    EU_HICP = 4
    EU_HICPXT = 5
    FR_HICP = 6
    ZA_CPI = 7
    AU_CPI = 8
