"""
Inflation indices: historical fixings and forecasts of price indices.

Provides an abstract InflationIndex with exactly two implementations:

- ZeroInflationIndex: an absolute price level (UK RPI, US CPI-U, EU HICP).
  Its fixing is the index level, read from history or compounded forward
  from the fixing at the base date of a zero inflation curve.
- YoYInflationIndex: a year-on-year rate. Either a ratio of two level
  fixings one year apart (ratio=True) or a directly published rate series
  (ratio=False). Forecasts come from a year-on-year inflation curve.

For any date an index decides once whether the value is already known
(historical) or must be forecast from its curve, and applies its own
interpolation convention across publication periods:

- A flat index holds the fixing published for a period on every day of
  that period.
- An interpolated index interpolates linearly between the fixing of the
  period containing the date and the fixing of the next period.

Fixings are published once per period. add_fixing() replicates a value on
every calendar day of its period so that any day of the period can be
looked up directly. Histories live in the IndexManager under the index
name and are shared by every instance with that name.

Example:
    >>> Settings.instance().evaluation_date = Date(15, 6, 2024)
    >>> handle = Handle(zero_curve)
    >>> ukrpi = ZeroInflationIndex("RPI", UNITED_KINGDOM, False, False,
    ...                            FrequencyTypes.MONTHLY, "1M",
    ...                            CurrencyTypes.GBP, handle)
    >>> ukrpi.add_fixing(Date(1, 3, 2024), 382.9)
    >>> ukrpi.fixing(Date(20, 3, 2024))
    382.9
    >>> ukrpi.fixing(Date(1, 3, 2026))   # forecast from the curve
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from cpifix.utils.calendar import Calendar, CalendarTypes, BusDayAdjustTypes
from cpifix.utils.currency import CurrencyTypes
from cpifix.utils.date import Date, negate_tenor, tenor_to_parts
from cpifix.utils.error import (LibError, MissingFixingError,
                                DuplicateFixingError, InvalidBaseDateError)
from cpifix.utils.frequency import FrequencyTypes, frequency_tenor
from cpifix.utils.global_vars import g_fixing_tol, g_small
from cpifix.utils.helpers import (check_argument_types, check_dt,
                                  format_table, label_to_string)
from cpifix.utils.inflation import inflation_period, inflation_year_fraction
from cpifix.utils.observable import Handle, Observable, Observer
from cpifix.utils.region import Region
from cpifix.utils.settings import Settings
from .index_manager import IndexManager

logger = logging.getLogger(__name__)

INFLATION_FREQUENCIES = (FrequencyTypes.ANNUAL,
                         FrequencyTypes.SEMI_ANNUAL,
                         FrequencyTypes.QUARTERLY,
                         FrequencyTypes.MONTHLY)

###############################################################################


def _same_fixing(x: float, y: float):
    return abs(x - y) <= g_fixing_tol * max(abs(x), abs(y)) + g_small


def _interpolation_weight(fixing_dt: Date,
                          observation_lag: str,
                          freq_type: FrequencyTypes):
    """ Linear weight of the next period's fixing. The weight is measured in
    the period of the non-lagged observation date fixing_dt + lag, not in
    the period of fixing_dt itself. """

    observation_dt = fixing_dt.add_tenor(observation_lag)
    (start_dt, end_dt) = inflation_period(observation_dt, freq_type)
    days_in_period = end_dt.add_days(1) - start_dt
    return (observation_dt - start_dt) / days_in_period

###############################################################################


class InflationIndex(Observable, Observer, ABC):
    """
    Descriptive state and fixing history shared by all inflation indices.

    The descriptive attributes (name, region, frequency, lags, flags) are
    fixed at construction. The fixing history grows through add_fixing()
    and is never deleted through the index.

    The index observes the evaluation date, because the historical versus
    forecast classification depends on "today", and the IndexManager
    notifier for its name, because fixings may be published through any
    instance sharing the name. Its own observers are told about both.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 freq_type: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes):
        """
        Args:
            family_name: Index family, e.g. "RPI" or "HICP"
            region: Region the index is published for
            revised: Whether published values may later be restated
            interpolated: Whether fixings interpolate within a period
            freq_type: Publication frequency of the index
            availability_lag: Delay between a period's end and the public
                release of its fixing, as a tenor string e.g. "1M"
            currency: Currency of the economy the index measures
        """
        check_argument_types(InflationIndex.__init__, locals())

        if freq_type not in INFLATION_FREQUENCIES:
            raise LibError("Frequency not handled: " + str(freq_type))

        # validates the tenor string
        tenor_to_parts(availability_lag)

        self._family_name = family_name
        self._region = region
        self._revised = revised
        self._interpolated = interpolated
        self._freq_type = freq_type
        self._availability_lag = availability_lag
        self._currency = currency
        self._name = region.name() + " " + family_name

        self.register_with(Settings.instance())
        self.register_with(IndexManager.instance().notifier(self._name))

###############################################################################

    def name(self):
        return self._name

    def family_name(self):
        return self._family_name

    def region(self):
        return self._region

    def revised(self):
        return self._revised

    def interpolated(self):
        return self._interpolated

    def frequency(self):
        return self._freq_type

    def availability_lag(self):
        return self._availability_lag

    def currency(self):
        return self._currency

    def fixing_calendar(self):
        """ Inflation indices publish on a fixed schedule irrespective of
        business days, so the calendar has no holidays. """
        return Calendar(CalendarTypes.NONE)

    def is_valid_fixing_date(self, dt: Date):
        return True

    def time_series(self):
        return IndexManager.instance().get_history(self._name)

    def has_historical_fixing(self, dt: Date):
        return self.time_series()[dt] is not None

###############################################################################

    def add_fixing(self,
                   fixing_dt: Date,
                   value: float,
                   force_overwrite: bool = False):
        """
        Store a published fixing on every day of its publication period.

        Days that already hold the same value are left as they are. Days
        holding a different value are only overwritten when force_overwrite
        is set; otherwise the remaining days are still written and a
        DuplicateFixingError naming the first conflicting day is raised.

        Args:
            fixing_dt: Any date inside the publication period
            value: Published index value
            force_overwrite: Replace existing, different values
        """
        check_argument_types(self.add_fixing, locals())

        (start_dt, end_dt) = inflation_period(fixing_dt, self._freq_type)
        ts = self.time_series()

        duplicated = None
        overwritten = False
        dt = start_dt
        while dt <= end_dt:
            current = ts[dt]
            if current is None:
                ts[dt] = value
            elif not _same_fixing(current, value):
                if force_overwrite:
                    ts[dt] = value
                    overwritten = True
                elif duplicated is None:
                    duplicated = (dt, current)
            dt = dt.add_days(1)

        if overwritten:
            logger.warning("%s fixing for period %s - %s overwritten with %s",
                           self._name, start_dt, end_dt, value)
        else:
            logger.debug("%s fixing %s stored for period %s - %s",
                         self._name, value, start_dt, end_dt)

        IndexManager.instance().notifier(self._name).notify_observers()

        if duplicated is not None:
            raise DuplicateFixingError(self._name, duplicated[0],
                                       duplicated[1], value)

    def add_fixings(self,
                    fixing_dts: list,
                    values: list,
                    force_overwrite: bool = False):
        """ Store several published fixings, one per publication period. """

        if len(fixing_dts) != len(values):
            raise LibError("Fixing dates and values must have the same size")

        for dt, value in zip(fixing_dts, values):
            self.add_fixing(dt, float(value), force_overwrite)

###############################################################################

    def _stored_fixing(self, dt: Date):
        """ Series lookup that fails rather than returning the missing
        sentinel. """
        value = self.time_series()[dt]
        if value is None:
            raise MissingFixingError(self._name, dt)
        return value

    def _today_minus_lag(self, today: Date):
        return today.add_tenor(negate_tenor(self._availability_lag))

###############################################################################

    @abstractmethod
    def fixing(self, fixing_dt: Date, forecast_todays_fixing: bool = False):
        """ Fixing of the index at the given date, historical or forecast. """

    @abstractmethod
    def needs_forecast(self, fixing_dt: Date):
        """ True when the fixing cannot come from the historical series. """

    @abstractmethod
    def forecast_fixing(self, fixing_dt: Date):
        """ Fixing of the index at the given date implied by its curve. """

    @abstractmethod
    def clone(self, handle: Handle):
        """ Same index description bound to another curve handle. """

###############################################################################

    def print_fixings(self):
        """ Print one row per stored publication period. """
        header = ["PERIOD START", "PERIOD END", "FIXING"]
        rows = []
        last_start = None
        for dt, value in self.time_series().items():
            (start_dt, end_dt) = inflation_period(dt, self._freq_type)
            if start_dt != last_start:
                rows.append([str(start_dt), str(end_dt), value])
                last_start = start_dt

        print(self._name.upper() + " FIXINGS:")
        print(format_table(header, rows))

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("NAME", self._name)
        s += label_to_string("REGION", self._region)
        s += label_to_string("REVISED", self._revised)
        s += label_to_string("INTERPOLATED", self._interpolated)
        s += label_to_string("FREQUENCY", self._freq_type)
        s += label_to_string("AVAILABILITY LAG", self._availability_lag)
        s += label_to_string("CURRENCY", self._currency)
        s += label_to_string("NUM FIXING DAYS", len(self.time_series()))
        return s

###############################################################################


class ZeroInflationIndex(InflationIndex):
    """
    Price level index whose forecasts come from a zero inflation curve.

    The curve quotes zero-coupon inflation rates relative to the index
    level at the curve's base date, so a forecast is the base fixing
    compounded at the zero rate of the target period.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 freq_type: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes,
                 zero_inflation: Optional[Handle] = None):
        check_argument_types(self.__init__, locals())

        super().__init__(family_name, region, revised, interpolated,
                         freq_type, availability_lag, currency)

        if zero_inflation is None:
            zero_inflation = Handle()

        self._zero_inflation = zero_inflation
        self.register_with(self._zero_inflation)

###############################################################################

    def zero_inflation_curve(self):
        return self._zero_inflation

    def needs_forecast(self, fixing_dt: Date):
        """
        Stored fixings are never interpolated. An interpolated fixing inside
        a period also needs the next period's fixing, so the availability
        lag plus one more period must have passed to use history.
        """
        check_dt(fixing_dt)
        return self._needs_forecast(fixing_dt,
                                    Settings.instance().evaluation_date)

    def _needs_forecast(self, fixing_dt: Date, today: Date):

        today_minus_lag = self._today_minus_lag(today)
        historical_fixing_known = \
            inflation_period(today_minus_lag, self._freq_type)[0].add_days(-1)

        latest_needed_dt = fixing_dt
        if self._interpolated:
            start_dt = inflation_period(fixing_dt, self._freq_type)[0]
            if fixing_dt > start_dt:
                latest_needed_dt = \
                    fixing_dt.add_tenor(frequency_tenor(self._freq_type))

        if latest_needed_dt <= historical_fixing_known:
            # well before the availability lag so the fixing was published
            result = False
        elif latest_needed_dt > today:
            # cannot be available whatever the series holds
            result = True
        else:
            # might have been published already, so look for it
            first_dt = latest_needed_dt.first_of_month()
            result = self.time_series()[first_dt] is None

        logger.debug("%s fixing at %s needs forecast: %s",
                     self._name, fixing_dt, result)
        return result

###############################################################################

    def fixing(self,
               fixing_dt: Date,
               forecast_todays_fixing: bool = False):
        """ Index level at fixing_dt. Reads the series when the fixing is
        known and forecasts it from the zero curve otherwise. The
        evaluation date is read once for the whole calculation. """
        check_dt(fixing_dt)
        return self._fixing(fixing_dt, Settings.instance().evaluation_date)

    def _fixing(self, fixing_dt: Date, today: Date):

        if self._needs_forecast(fixing_dt, today):
            return self._forecast_fixing(fixing_dt, today)

        (start_dt, end_dt) = inflation_period(fixing_dt, self._freq_type)
        index_1 = self._stored_fixing(start_dt)

        if not self._interpolated or fixing_dt == start_dt:
            # the next fixing is not needed
            return index_1

        index_2 = self._stored_fixing(end_dt.add_days(1))

        curve = self._zero_inflation.current_link()
        weight = _interpolation_weight(fixing_dt, curve.observation_lag(),
                                       self._freq_type)
        return index_1 + (index_2 - index_1) * weight

###############################################################################

    def forecast_fixing(self, fixing_dt: Date):
        """
        Index level at fixing_dt implied by the zero inflation curve.

        The curve is relative to the fixing at its base date, which must
        always be known from history:

            I(t) = I(base) * (1 + z(t)) ** T(base, t)

        where t is the start of the period containing fixing_dt. An
        interpolated index also computes the level at the start of the next
        period and interpolates between the two.
        """
        check_dt(fixing_dt)
        return self._forecast_fixing(fixing_dt,
                                     Settings.instance().evaluation_date)

    def _forecast_fixing(self, fixing_dt: Date, today: Date):

        curve = self._zero_inflation.current_link()
        base_dt = curve.base_date()

        if self._needs_forecast(base_dt, today):
            raise InvalidBaseDateError(self._name, base_dt)

        base_fixing = self._fixing(base_dt, today)

        (start_dt, end_dt) = inflation_period(fixing_dt, self._freq_type)

        z1 = curve.zero_rate(start_dt, "0D", False)
        t1 = inflation_year_fraction(self._freq_type, self._interpolated,
                                     curve.day_counter(), base_dt, start_dt)
        index_1 = base_fixing * (1.0 + z1) ** t1

        if not self._interpolated or fixing_dt <= start_dt:
            return index_1

        next_start_dt = end_dt.add_days(1)
        z2 = curve.zero_rate(next_start_dt, "0D", False)
        t2 = inflation_year_fraction(self._freq_type, self._interpolated,
                                     curve.day_counter(), base_dt,
                                     next_start_dt)
        index_2 = base_fixing * (1.0 + z2) ** t2

        weight = _interpolation_weight(fixing_dt, curve.observation_lag(),
                                       self._freq_type)
        return index_1 + (index_2 - index_1) * weight

###############################################################################

    def clone(self, handle: Handle):
        return ZeroInflationIndex(self._family_name, self._region,
                                  self._revised, self._interpolated,
                                  self._freq_type, self._availability_lag,
                                  self._currency, handle)

###############################################################################


class YoYInflationIndex(InflationIndex):
    """
    Year-on-year inflation rate index.

    With ratio=True the rate is derived from level fixings one year apart,
    I(t) / I(t - 1Y) - 1. With ratio=False the series itself is the
    published year-on-year rate and is used as it is.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 ratio: bool,
                 freq_type: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes,
                 yoy_inflation: Optional[Handle] = None):
        check_argument_types(self.__init__, locals())

        super().__init__(family_name, region, revised, interpolated,
                         freq_type, availability_lag, currency)

        if yoy_inflation is None:
            yoy_inflation = Handle()

        self._ratio = ratio
        self._yoy_inflation = yoy_inflation
        self.register_with(self._yoy_inflation)

###############################################################################

    def ratio(self):
        return self._ratio

    def yoy_inflation_curve(self):
        return self._yoy_inflation

    def needs_forecast(self, fixing_dt: Date):
        """ A flat fixing must be forecast from the first day after the last
        known period. An interpolated fixing needs the following period too,
        so forecasting starts one period earlier. """
        check_dt(fixing_dt)
        return self._needs_forecast(fixing_dt,
                                    Settings.instance().evaluation_date)

    def _needs_forecast(self, fixing_dt: Date, today: Date):

        today_minus_lag = self._today_minus_lag(today)
        last_fix_dt = \
            inflation_period(today_minus_lag, self._freq_type)[0].add_days(-1)

        flat_must_forecast_on = last_fix_dt.add_days(1)
        interp_must_forecast_on = flat_must_forecast_on.add_tenor(
            negate_tenor(frequency_tenor(self._freq_type)))

        if self._interpolated:
            result = fixing_dt >= interp_must_forecast_on
        else:
            result = fixing_dt >= flat_must_forecast_on

        logger.debug("%s fixing at %s needs forecast: %s",
                     self._name, fixing_dt, result)
        return result

###############################################################################

    def fixing(self,
               fixing_dt: Date,
               forecast_todays_fixing: bool = False):
        """ Year-on-year rate at fixing_dt. """
        check_dt(fixing_dt)

        today = Settings.instance().evaluation_date
        if self._needs_forecast(fixing_dt, today):
            return self.forecast_fixing(fixing_dt)

        (start_dt, end_dt) = inflation_period(fixing_dt, self._freq_type)

        if self._ratio and self._interpolated:

            cal = self.fixing_calendar()
            fix_minus_1y = cal.advance(fixing_dt, "-1Y",
                                       BusDayAdjustTypes.MODIFIED_FOLLOWING)
            (start_bef_dt, end_bef_dt) = inflation_period(fix_minus_1y,
                                                          self._freq_type)

            dp = end_dt.add_days(1) - start_dt
            dp_bef = end_bef_dt.add_days(1) - start_bef_dt
            dl = fixing_dt - start_dt
            # may be off by a day around 29 February
            dl_bef = fix_minus_1y - start_bef_dt

            first_fix = self._stored_fixing(start_dt)
            second_fix = self._stored_fixing(end_dt.add_days(1))
            first_fix_bef = self._stored_fixing(start_bef_dt)
            second_fix_bef = self._stored_fixing(end_bef_dt.add_days(1))

            linear_now = first_fix + (second_fix - first_fix) * dl / dp
            linear_bef = first_fix_bef + \
                (second_fix_bef - first_fix_bef) * dl_bef / dp_bef

            return linear_now / linear_bef - 1.0

        elif self._ratio:

            past_fixing = self._stored_fixing(start_dt)
            previous_dt = fixing_dt.add_tenor("-1Y")
            start_bef_dt = inflation_period(previous_dt, self._freq_type)[0]
            previous_fixing = self._stored_fixing(start_bef_dt)

            return past_fixing / previous_fixing - 1.0

        elif self._interpolated:

            # the series is already a year-on-year rate
            dp = end_dt.add_days(1) - start_dt
            dl = fixing_dt - start_dt
            first_fix = self._stored_fixing(start_dt)
            second_fix = self._stored_fixing(end_dt.add_days(1))

            return first_fix + (second_fix - first_fix) * dl / dp

        else:

            return self._stored_fixing(start_dt)

###############################################################################

    def forecast_fixing(self, fixing_dt: Date):
        """ Year-on-year rate at fixing_dt from the curve. A flat index is
        queried at the start of the period, by convention consistent with
        how its curve is built. """
        check_dt(fixing_dt)

        curve = self._yoy_inflation.current_link()

        if self._interpolated:
            dt = fixing_dt
        else:
            dt = inflation_period(fixing_dt, self._freq_type)[0]

        return curve.yoy_rate(dt, "0D")

###############################################################################

    def clone(self, handle: Handle):
        return YoYInflationIndex(self._family_name, self._region,
                                 self._revised, self._interpolated,
                                 self._ratio, self._freq_type,
                                 self._availability_lag, self._currency,
                                 handle)

    def __repr__(self):
        s = super().__repr__()
        s += label_to_string("RATIO", self._ratio)
        return s
