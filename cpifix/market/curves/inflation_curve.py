"""
Inflation term structures quoted as zero-coupon or year-on-year rates.

Provides the curves that inflation indices forecast from:
- ZeroInflationCurve: zero-coupon inflation rates z(T) relative to the
  index fixing at the curve's base date, I(T) = I(base) * (1 + z(T))^T
- YoYInflationCurve: year-on-year inflation rates

Both curves are built directly from pillar dates and rates, the first
pillar being the base date. Rates between pillars come from an
Interpolator and are held flat beyond the last pillar when extrapolation
is allowed.

A query date is shifted back by an observation lag before being read off
the curve. Passing obs_lag=None uses the curve's own lag; indices pass "0D"
because they already work with lagged fixing dates. Flat (non-interpolated)
curves read every date at the start of its publication period.

Curves are observable: update_rates() refits the curve and notifies the
indices that forecast from it.

Example:
    >>> curve = ZeroInflationCurve(
    ...     value_dt=Date(15, 6, 2024),
    ...     dates=[Date(1, 3, 2024), Date(1, 3, 2025), Date(1, 3, 2029)],
    ...     rates=[0.030, 0.030, 0.028],
    ...     freq_type=FrequencyTypes.MONTHLY,
    ...     observation_lag="3M")
    >>> curve.zero_rate(Date(1, 3, 2027), "0D")
"""

import logging

import numpy as np

from cpifix.utils.date import Date, negate_tenor, tenor_to_parts
from cpifix.utils.day_count import DayCount, DayCountTypes
from cpifix.utils.error import LibError
from cpifix.utils.frequency import FrequencyTypes
from cpifix.utils.helpers import (check_argument_types, format_table,
                                  label_to_string)
from cpifix.utils.inflation import inflation_period
from cpifix.utils.observable import Observable
from .interpolator import InterpTypes, Interpolator

logger = logging.getLogger(__name__)

###############################################################################


class InflationCurve(Observable):
    """ Pillar storage, lag handling and range checks common to zero and
    year-on-year inflation curves. """

    def __init__(self,
                 value_dt: Date,
                 dates: list,
                 rates: list,
                 freq_type: FrequencyTypes,
                 observation_lag: str,
                 dc_type: DayCountTypes,
                 interp_type: InterpTypes,
                 interpolated: bool):
        check_argument_types(InflationCurve.__init__, locals())

        if len(dates) == 0:
            raise LibError("Inflation curve needs at least one pillar")

        if len(dates) != len(rates):
            raise LibError("Dates and rates must have the same size")

        tenor_to_parts(observation_lag)
        # raises for frequencies with no publication period
        inflation_period(dates[0], freq_type)

        self._value_dt = value_dt
        self._dates = list(dates)
        self._base_dt = self._dates[0]
        self._freq_type = freq_type
        self._observation_lag = observation_lag
        self._dc_type = dc_type
        self._interp_type = interp_type
        self._interpolated = interpolated

        self._times = np.array([self.time_from_base(dt) for dt in self._dates])
        self._interpolator = Interpolator(interp_type)
        self._build_curve(rates)

###############################################################################

    def _build_curve(self, rates):
        self._rates = np.array(rates, dtype=np.float64)
        self._interpolator.fit(self._times, self._rates)

    def update_rates(self, rates: list):
        """ Replace the pillar rates and notify observers. """
        if len(rates) != len(self._dates):
            raise LibError("Need one rate per pillar date")
        self._build_curve(rates)
        logger.debug("%s rates updated", type(self).__name__)
        self.notify_observers()

###############################################################################

    def value_date(self):
        return self._value_dt

    def base_date(self):
        return self._base_dt

    def observation_lag(self):
        return self._observation_lag

    def day_counter(self):
        return self._dc_type

    def frequency(self):
        return self._freq_type

    def interpolated(self):
        return self._interpolated

    def dates(self):
        return list(self._dates)

    def rates(self):
        return self._rates.copy()

    def max_date(self):
        if self._interpolated:
            return self._dates[-1]
        return inflation_period(self._dates[-1], self._freq_type)[1]

    def time_from_base(self, dt: Date):
        return DayCount(self._dc_type).year_frac(self._base_dt, dt)[0]

###############################################################################

    def _lagged_date(self, dt: Date, obs_lag):
        use_lag = self._observation_lag if obs_lag is None else obs_lag
        lagged_dt = dt.add_tenor(negate_tenor(use_lag))
        if not self._interpolated:
            lagged_dt = inflation_period(lagged_dt, self._freq_type)[0]
        return lagged_dt

    def _check_range(self, dt: Date, extrapolate: bool):
        first_dt = inflation_period(self._base_dt, self._freq_type)[0]
        if dt < first_dt:
            raise LibError(f"Date {dt} is before curve base date "
                           f"{self._base_dt}")

        if not extrapolate and dt > self.max_date():
            raise LibError(f"Date {dt} is past max curve date "
                           f"{self.max_date()}")

    def _rate(self, dt: Date, obs_lag, extrapolate: bool):
        lagged_dt = self._lagged_date(dt, obs_lag)
        self._check_range(lagged_dt, extrapolate)
        return self._interpolator.interpolate(self.time_from_base(lagged_dt))

###############################################################################

    def print_table(self):
        header = ["DATE", "TIME", "RATE_BPS"]
        rows = []
        for dt, t, r in zip(self._dates, self._times, self._rates):
            rows.append([str(dt), round(t, 4), round(r * 10000, 2)])

        print(type(self).__name__.upper() + " DETAILS:")
        print(format_table(header, rows))

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("VALUATION DATE", self._value_dt)
        s += label_to_string("BASE DATE", self._base_dt)
        s += label_to_string("OBSERVATION LAG", self._observation_lag)
        s += label_to_string("FREQUENCY", self._freq_type)
        s += label_to_string("DAY COUNT", self._dc_type)
        s += label_to_string("INTERPOLATION", self._interp_type)
        s += label_to_string("NUM PILLARS", len(self._dates))
        return s

###############################################################################


class ZeroInflationCurve(InflationCurve):
    """ Zero-coupon inflation rates relative to the base date fixing. """

    def __init__(self,
                 value_dt: Date,
                 dates: list,
                 rates: list,
                 freq_type: FrequencyTypes = FrequencyTypes.MONTHLY,
                 observation_lag: str = "3M",
                 dc_type: DayCountTypes = DayCountTypes.ACT_365F,
                 interp_type: InterpTypes = InterpTypes.LINEAR_RATES,
                 interpolated: bool = False):
        check_argument_types(self.__init__, locals())

        super().__init__(value_dt, dates, rates, freq_type, observation_lag,
                         dc_type, interp_type, interpolated)

    def zero_rate(self,
                  dt: Date,
                  obs_lag: str = None,
                  extrapolate: bool = False):
        """ Zero inflation rate observed at dt. obs_lag=None applies the
        curve's own observation lag. """
        return self._rate(dt, obs_lag, extrapolate)

###############################################################################


class YoYInflationCurve(InflationCurve):
    """ Year-on-year inflation rates. """

    def __init__(self,
                 value_dt: Date,
                 dates: list,
                 rates: list,
                 freq_type: FrequencyTypes = FrequencyTypes.MONTHLY,
                 observation_lag: str = "3M",
                 dc_type: DayCountTypes = DayCountTypes.ACT_365F,
                 interp_type: InterpTypes = InterpTypes.LINEAR_RATES,
                 interpolated: bool = False):
        check_argument_types(self.__init__, locals())

        super().__init__(value_dt, dates, rates, freq_type, observation_lag,
                         dc_type, interp_type, interpolated)

    def yoy_rate(self,
                 dt: Date,
                 obs_lag: str = None,
                 extrapolate: bool = False):
        """ Year-on-year inflation rate observed at dt. obs_lag=None applies
        the curve's own observation lag. """
        return self._rate(dt, obs_lag, extrapolate)
