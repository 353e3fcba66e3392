"""
Tests for lagged CPI fixings with instrument-level interpolation.

Uses a flat monthly index with February 2024 = 100 and March 2024 = 103,
observed with a three month lag.

Reference: cpifix/market/indices/cpi.py
"""

import pytest

from cpifix.utils.date import Date
from cpifix.utils.error import UnsupportedInterpolationError
from cpifix.market.indices.cpi import (CPIInterpTypes, lagged_fixing,
                                       effective_interpolation_type)


@pytest.fixture
def cpi_index(ukrpi):
    ukrpi.add_fixing(Date(1, 2, 2024), 100.0)
    ukrpi.add_fixing(Date(1, 3, 2024), 103.0)
    return ukrpi


class TestLaggedFixing:
    """Flat, linear and index-convention lagged fixings"""

    def test_flat_uses_lagged_period(self, cpi_index):
        value = lagged_fixing(cpi_index, Date(20, 5, 2024), "3M",
                              CPIInterpTypes.FLAT)
        assert value == 100.0

    def test_linear_equals_flat_at_period_start(self, cpi_index):
        dt = Date(1, 5, 2024)
        flat = lagged_fixing(cpi_index, dt, "3M", CPIInterpTypes.FLAT)
        linear = lagged_fixing(cpi_index, dt, "3M", CPIInterpTypes.LINEAR)
        assert flat == linear == 100.0

    def test_linear_weight_from_unlagged_period(self, cpi_index,
                                                strict_tolerance):
        # 15 days into May (31 days) moving from February to March
        value = lagged_fixing(cpi_index, Date(16, 5, 2024), "3M",
                              CPIInterpTypes.LINEAR)
        expected = 100.0 + 3.0 * 15.0 / 31.0
        assert abs(value - expected) < strict_tolerance

    def test_as_index_on_flat_index(self, cpi_index):
        value = lagged_fixing(cpi_index, Date(16, 5, 2024), "3M",
                              CPIInterpTypes.AS_INDEX)
        assert value == 100.0

    def test_unsupported_interpolation(self, cpi_index):
        with pytest.raises(UnsupportedInterpolationError) as exc:
            lagged_fixing(cpi_index, Date(16, 5, 2024), "3M", "CUBIC")
        assert exc.value.interp_type == "CUBIC"


class TestEffectiveInterpolation:
    """AS_INDEX resolves to the index's own convention"""

    def test_flat_index(self, ukrpi):
        assert effective_interpolation_type(
            ukrpi, CPIInterpTypes.AS_INDEX) == CPIInterpTypes.FLAT

    def test_interpolated_index(self, ukrpi_interpolated):
        assert effective_interpolation_type(
            ukrpi_interpolated, CPIInterpTypes.AS_INDEX) == CPIInterpTypes.LINEAR

    def test_explicit_tag_unchanged(self, ukrpi):
        assert effective_interpolation_type(
            ukrpi, CPIInterpTypes.LINEAR) == CPIInterpTypes.LINEAR
