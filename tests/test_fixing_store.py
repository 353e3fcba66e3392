"""
Tests for the fixing time series and the index manager.

Reference: cpifix/market/indices/time_series.py,
           cpifix/market/indices/index_manager.py
"""

import numpy as np
import pandas as pd
import pytest

from cpifix.utils.date import Date
from cpifix.utils.error import LibError
from cpifix.market.indices.index_manager import IndexManager
from cpifix.market.indices.time_series import TimeSeries


class TestTimeSeries:
    """Sparse date to value map"""

    def test_missing_is_none(self):
        ts = TimeSeries()
        assert ts[Date(1, 1, 2024)] is None
        assert ts.empty()

    def test_set_and_get(self):
        ts = TimeSeries()
        ts[Date(1, 1, 2024)] = 130
        assert ts[Date(1, 1, 2024)] == 130.0
        assert Date(1, 1, 2024) in ts
        assert Date(2, 1, 2024) not in ts

    def test_ordered_views(self):
        ts = TimeSeries()
        ts[Date(1, 2, 2024)] = 2.0
        ts[Date(1, 1, 2024)] = 1.0
        assert ts.dates() == [Date(1, 1, 2024), Date(1, 2, 2024)]
        np.testing.assert_array_equal(ts.values(), [1.0, 2.0])
        assert ts.first_date() == Date(1, 1, 2024)
        assert ts.last_date() == Date(1, 2, 2024)

    def test_empty_first_date(self):
        with pytest.raises(LibError):
            TimeSeries().first_date()

    def test_non_date_key(self):
        with pytest.raises(LibError):
            TimeSeries()["2024-01-01"] = 1.0

    def test_to_pandas(self):
        ts = TimeSeries()
        ts[Date(1, 1, 2024)] = 1.0
        ts[Date(1, 2, 2024)] = 2.0
        series = ts.to_pandas("UK RPI")
        assert isinstance(series.index, pd.DatetimeIndex)
        assert series.name == "UK RPI"
        assert series[pd.Timestamp(2024, 2, 1)] == 2.0


class TestIndexManager:
    """Histories shared by index name"""

    def test_names_case_insensitive(self):
        manager = IndexManager.instance()
        manager.get_history("uk rpi")[Date(1, 1, 2024)] = 1.0
        assert manager.has_history("UK RPI")
        assert manager.get_history("UK RPI")[Date(1, 1, 2024)] == 1.0
        assert "UK RPI" in manager.histories()

    def test_set_history_notifies(self, ukrpi, recorder):
        recorder.register_with(ukrpi)
        ts = TimeSeries()
        ts[Date(1, 3, 2024)] = 382.9
        IndexManager.instance().set_history("UK RPI", ts)
        assert recorder.count == 1
        assert ukrpi.fixing(Date(1, 3, 2024)) == 382.9

    def test_clear_history(self, ukrpi):
        ukrpi.add_fixing(Date(1, 3, 2024), 382.9)
        IndexManager.instance().clear_history("UK RPI")
        assert not ukrpi.has_historical_fixing(Date(1, 3, 2024))
        assert len(ukrpi.time_series()) == 0
