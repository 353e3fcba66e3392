"""
Period arithmetic for inflation indices.

An inflation index publishes one value per period (a month, quarter, half
year or year). Every date belongs to exactly one such period and all the
days of the period share the published fixing.

- inflation_period(dt, freq_type) gives the inclusive [start, end] dates of
  the publication period containing dt.
- inflation_year_fraction(...) gives the time used to compound a curve rate
  between two dates. For interpolated indices this is the plain day count
  fraction. For flat indices the fixing is constant over the whole period,
  so the time is measured between the starts of the two periods.

Example:
    >>> inflation_period(Date(16, 5, 2024), FrequencyTypes.QUARTERLY)
    (01-APR-2024, 30-JUN-2024)
"""

from .date import Date, days_in_month
from .day_count import DayCount, DayCountTypes
from .error import LibError
from .frequency import FrequencyTypes

###############################################################################


def inflation_period(dt: Date,
                     freq_type: FrequencyTypes):
    """ Return the (start, end) dates, both inclusive, of the publication
    period of the given frequency that contains dt. """

    month = dt._m
    year = dt._y

    if freq_type == FrequencyTypes.ANNUAL:
        start_month = 1
        end_month = 12
    elif freq_type == FrequencyTypes.SEMI_ANNUAL:
        start_month = 6 * ((month - 1) // 6) + 1
        end_month = start_month + 5
    elif freq_type == FrequencyTypes.QUARTERLY:
        start_month = 3 * ((month - 1) // 3) + 1
        end_month = start_month + 2
    elif freq_type == FrequencyTypes.MONTHLY:
        start_month = month
        end_month = month
    else:
        raise LibError("Frequency not handled: " + str(freq_type))

    start_dt = Date(1, start_month, year)
    end_dt = Date(days_in_month(end_month, year), end_month, year)
    return (start_dt, end_dt)

###############################################################################


def inflation_year_fraction(freq_type: FrequencyTypes,
                            interpolated: bool,
                            dc_type: DayCountTypes,
                            dt1: Date,
                            dt2: Date):
    """ Year fraction between two dates for compounding inflation rates. """

    day_counter = DayCount(dc_type)

    if interpolated:
        return day_counter.year_frac(dt1, dt2)[0]

    # the fixing is constant for the whole period so the inflation time is
    # the time between period starts
    start1 = inflation_period(dt1, freq_type)[0]
    start2 = inflation_period(dt2, freq_type)[0]
    return day_counter.year_frac(start1, start2)[0]
