"""
Market indices package for inflation indices.

Provides index management for:
- Zero (price level) and year-on-year inflation indices with historical
  fixings shared through the IndexManager
- Interpolation of fixings within a publication period
- Forecast fixings from zero and year-on-year inflation curves
- Lagged CPI fixings as referenced by inflation-linked instruments
"""

from .inflation_index import (InflationIndex, ZeroInflationIndex,
                              YoYInflationIndex)
from .index_manager import IndexManager
from .time_series import TimeSeries
from .cpi import CPIInterpTypes, lagged_fixing
from .standard_indices import zero_index, yoy_index

__all__ = ['InflationIndex', 'ZeroInflationIndex', 'YoYInflationIndex',
           'IndexManager', 'TimeSeries', 'CPIInterpTypes', 'lagged_fixing',
           'zero_index', 'yoy_index']
