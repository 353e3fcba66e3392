"""
Tests for the ready-made published inflation indices.

Reference: cpifix/market/indices/standard_indices.py
"""

import pytest

from cpifix.utils.currency import CurrencyTypes
from cpifix.utils.date import Date
from cpifix.utils.error import LibError
from cpifix.utils.frequency import FrequencyTypes
from cpifix.utils.global_types import InflationIndexTypes
from cpifix.utils.observable import Handle
from cpifix.market.indices import (zero_index, yoy_index, ZeroInflationIndex,
                                   YoYInflationIndex)


class TestStandardZeroIndices:
    """Conventions of the published price indices"""

    @pytest.mark.parametrize("index_type, name", [
        (InflationIndexTypes.UK_RPI, "UK RPI"),
        (InflationIndexTypes.UK_CPI, "UK CPI"),
        (InflationIndexTypes.US_CPI_U, "USA CPI"),
        (InflationIndexTypes.EU_HICP, "EU HICP"),
        (InflationIndexTypes.EU_HICPXT, "EU HICPXT"),
        (InflationIndexTypes.FR_HICP, "France HICP"),
        (InflationIndexTypes.ZA_CPI, "South Africa CPI"),
        (InflationIndexTypes.AU_CPI, "Australia CPI"),
    ])
    def test_names(self, index_type, name):
        index = zero_index(index_type)
        assert isinstance(index, ZeroInflationIndex)
        assert index.name() == name
        assert index.revised() is False
        assert index.interpolated() is False

    def test_uk_rpi_conventions(self):
        index = zero_index(InflationIndexTypes.UK_RPI)
        assert index.frequency() == FrequencyTypes.MONTHLY
        assert index.availability_lag() == "1M"
        assert index.currency() == CurrencyTypes.GBP

    def test_au_cpi_is_quarterly(self):
        index = zero_index(InflationIndexTypes.AU_CPI)
        assert index.frequency() == FrequencyTypes.QUARTERLY
        assert index.availability_lag() == "2M"
        assert index.currency() == CurrencyTypes.AUD

    def test_handle_is_bound(self, flat_zero_curve):
        handle = Handle(flat_zero_curve)
        index = zero_index(InflationIndexTypes.UK_RPI, handle)
        assert index.zero_inflation_curve() is handle

    def test_quarterly_fixing_covers_quarter(self, evaluation_date):
        index = zero_index(InflationIndexTypes.AU_CPI)
        index.add_fixing(Date(1, 1, 2024), 136.4)
        assert index.fixing(Date(15, 3, 2024)) == 136.4

    def test_unknown_type(self):
        with pytest.raises(LibError):
            zero_index("UK_RPI")


class TestStandardYoYIndices:
    """Year-on-year ratio indices on the same conventions"""

    def test_yoy_is_ratio(self):
        index = yoy_index(InflationIndexTypes.EU_HICP)
        assert isinstance(index, YoYInflationIndex)
        assert index.name() == "EU YY_HICP"
        assert index.ratio() is True
        assert index.interpolated() is False
        assert index.currency() == CurrencyTypes.EUR

    def test_interpolated_yoy(self):
        index = yoy_index(InflationIndexTypes.UK_RPI, interpolated=True)
        assert index.interpolated() is True
        assert index.yoy_inflation_curve().empty()
