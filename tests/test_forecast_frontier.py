"""
Tests for the historical / forecast frontier of zero and year-on-year
indices across publication frequencies and availability lags.

Each case sweeps fixing dates day by day from well inside the published
history to beyond the evaluation date and checks the classification on
both sides of the frontier.

Reference: cpifix/market/indices/inflation_index.py
"""

import pytest

from cpifix.utils.currency import CurrencyTypes
from cpifix.utils.date import Date, negate_tenor
from cpifix.utils.frequency import FrequencyTypes, frequency_tenor
from cpifix.utils.inflation import inflation_period
from cpifix.utils.region import UNITED_KINGDOM
from cpifix.market.indices.inflation_index import (ZeroInflationIndex,
                                                   YoYInflationIndex)

FREQUENCIES = [FrequencyTypes.MONTHLY, FrequencyTypes.QUARTERLY,
               FrequencyTypes.SEMI_ANNUAL, FrequencyTypes.ANNUAL]

LAGS = ["0D", "1M", "2M", "3M", "1Y"]


def historical_fixing_known(today, freq_type, lag):
    """Last day of the last period published by today"""
    today_minus_lag = today.add_tenor(negate_tenor(lag))
    return inflation_period(today_minus_lag, freq_type)[0].add_days(-1)


def latest_needed(dt, freq_type, interpolated):
    """Latest date whose fixing an interpolated or flat fixing reads"""
    if interpolated and dt > inflation_period(dt, freq_type)[0]:
        return dt.add_tenor(frequency_tenor(freq_type))
    return dt


def sweep(known, today):
    """Every day from over a year before the frontier to after today"""
    dt = known.add_days(-400)
    end_dt = today.add_days(40)
    while dt <= end_dt:
        yield dt
        dt = dt.add_days(1)


@pytest.mark.numerical
class TestZeroIndexFrontier:
    """Zero index classification for any frequency and lag"""

    @pytest.mark.parametrize("interpolated", [False, True])
    @pytest.mark.parametrize("lag", LAGS)
    @pytest.mark.parametrize("freq_type", FREQUENCIES)
    def test_bounds(self, evaluation_date, freq_type, lag, interpolated):
        index = ZeroInflationIndex("CPI_" + freq_type.name, UNITED_KINGDOM,
                                   False, interpolated, freq_type, lag,
                                   CurrencyTypes.GBP)
        today = evaluation_date
        known = historical_fixing_known(today, freq_type, lag)

        historical = 0
        forecast = 0
        for dt in sweep(known, today):
            result = index.needs_forecast(dt)
            needed_dt = latest_needed(dt, freq_type, interpolated)

            if dt < known and needed_dt <= known:
                assert result is False, dt
            if dt > today:
                assert result is True, dt

            # nothing is stored so the ambiguous window always forecasts
            assert result == (needed_dt > known), dt

            if result:
                forecast += 1
            else:
                historical += 1

        assert historical > 0
        assert forecast > 0

    @pytest.mark.parametrize("freq_type", FREQUENCIES)
    def test_stored_fixing_moves_frontier(self, evaluation_date, freq_type):
        index = ZeroInflationIndex("CPI_" + freq_type.name, UNITED_KINGDOM,
                                   False, False, freq_type, "0D",
                                   CurrencyTypes.GBP)
        known = historical_fixing_known(evaluation_date, freq_type, "0D")
        current_start = known.add_days(1)

        assert index.needs_forecast(current_start) is True
        index.add_fixing(current_start, 100.0)
        assert index.needs_forecast(current_start) is False
        assert index.needs_forecast(evaluation_date) is False
        assert index.needs_forecast(evaluation_date.add_days(1)) is True


@pytest.mark.numerical
class TestYoYIndexFrontier:
    """Year-on-year frontier ignores stored fixings"""

    @pytest.mark.parametrize("interpolated", [False, True])
    @pytest.mark.parametrize("lag", LAGS)
    @pytest.mark.parametrize("freq_type", FREQUENCIES)
    def test_bounds(self, evaluation_date, freq_type, lag, interpolated):
        index = YoYInflationIndex("YY_" + freq_type.name, UNITED_KINGDOM,
                                  False, interpolated, True, freq_type, lag,
                                  CurrencyTypes.GBP)
        today = evaluation_date
        known = historical_fixing_known(today, freq_type, lag)

        frontier = known.add_days(1)
        if interpolated:
            frontier = frontier.add_tenor(
                negate_tenor(frequency_tenor(freq_type)))

        assert index.needs_forecast(frontier.add_days(-1)) is False
        assert index.needs_forecast(frontier) is True

        for dt in sweep(known, today):
            result = index.needs_forecast(dt)

            # an interpolated rate always reads the following period
            needed_dt = dt
            if interpolated:
                needed_dt = dt.add_tenor(frequency_tenor(freq_type))

            if needed_dt <= known:
                assert result is False, dt
            if dt > today:
                assert result is True, dt

            assert result == (dt >= frontier), dt

    def test_stored_fixings_do_not_move_frontier(self, evaluation_date):
        index = YoYInflationIndex("YY_RF", UNITED_KINGDOM, False, False, True,
                                  FrequencyTypes.MONTHLY, "1M",
                                  CurrencyTypes.GBP)
        index.add_fixing(Date(1, 5, 2024), 0.03)
        assert index.needs_forecast(Date(1, 5, 2024)) is True
