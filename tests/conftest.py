"""
Pytest configuration file for cpifix library tests
Provides common fixtures and test configuration
"""
import os
import sys
import pytest

# Add the cpifix package to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import key modules for fixtures
from cpifix.utils.date import Date
from cpifix.utils.currency import CurrencyTypes
from cpifix.utils.frequency import FrequencyTypes
from cpifix.utils.observable import Handle, Observer
from cpifix.utils.region import UNITED_KINGDOM
from cpifix.utils.settings import Settings, SavedSettings
from cpifix.market.curves.inflation_curve import (ZeroInflationCurve,
                                                  YoYInflationCurve)
from cpifix.market.indices.index_manager import IndexManager
from cpifix.market.indices.inflation_index import (ZeroInflationIndex,
                                                   YoYInflationIndex)


@pytest.fixture(autouse=True)
def clean_market_state():
    """Restore the evaluation date and drop all fixings after each test"""
    with SavedSettings():
        yield
    IndexManager.instance().clear_histories()


@pytest.fixture
def evaluation_date():
    """Standard evaluation date, set on the global settings"""
    dt = Date(15, 6, 2024)
    Settings.instance().evaluation_date = dt
    return dt


@pytest.fixture
def flat_zero_curve():
    """Zero inflation curve at a constant 3% from April 2024"""
    dates = [Date(1, 4, 2024), Date(1, 4, 2025), Date(1, 4, 2030)]
    return ZeroInflationCurve(Date(15, 6, 2024), dates, [0.03, 0.03, 0.03],
                              observation_lag="3M")


@pytest.fixture
def sloped_yoy_curve():
    """Year-on-year curve rising from 1% to 2% over 2020"""
    dates = [Date(1, 1, 2020), Date(1, 1, 2021), Date(1, 1, 2025)]
    return YoYInflationCurve(Date(15, 6, 2020), dates, [0.01, 0.02, 0.02],
                             observation_lag="3M")


@pytest.fixture
def ukrpi(evaluation_date, flat_zero_curve):
    """Flat monthly RPI-like index bound to the flat zero curve"""
    return ZeroInflationIndex("RPI", UNITED_KINGDOM, False, False,
                              FrequencyTypes.MONTHLY, "1M",
                              CurrencyTypes.GBP, Handle(flat_zero_curve))


@pytest.fixture
def ukrpi_interpolated(evaluation_date, flat_zero_curve):
    """Interpolated monthly index bound to the flat zero curve"""
    return ZeroInflationIndex("RPI_INTERP", UNITED_KINGDOM, False, True,
                              FrequencyTypes.MONTHLY, "1M",
                              CurrencyTypes.GBP, Handle(flat_zero_curve))


@pytest.fixture
def make_yoy_index():
    """Factory for year-on-year indices with a given ratio/interpolation"""
    def _make(ratio, interpolated, handle=None):
        family = "YY_" + ("R" if ratio else "Q") + ("I" if interpolated else "F")
        return YoYInflationIndex(family, UNITED_KINGDOM, False, interpolated,
                                 ratio, FrequencyTypes.MONTHLY, "1M",
                                 CurrencyTypes.GBP, handle)
    return _make


class RecordingObserver(Observer):
    """Observer counting the notifications it receives"""

    def __init__(self):
        self.count = 0

    def update(self):
        self.count += 1


@pytest.fixture
def recorder():
    return RecordingObserver()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom test markers"""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "numerical: marks tests with numerical precision requirements")


# Pytest collection hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add default markers"""
    for item in items:
        # Add 'unit' marker to all tests by default
        if not any(item.iter_markers()):
            item.add_marker(pytest.mark.unit)

        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)


# Utility functions for tests
@pytest.fixture
def tolerance():
    """Standard numerical tolerance for floating point comparisons"""
    return 1e-6


@pytest.fixture
def strict_tolerance():
    """Strict numerical tolerance for high precision tests"""
    return 1e-10
