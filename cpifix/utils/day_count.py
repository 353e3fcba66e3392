"""
Day count conventions for converting date intervals into year fractions.

Supported conventions:
- ACT_365F: actual days over 365
- ACT_360: actual days over 360
- ACT_ACT_ISDA: actual days split by calendar year, each part over the
  length of its year
- THIRTY_360_BOND: 30/360 bond basis
- SIMPLE: actual days over 365.25

year_frac() always returns the tuple (year fraction, numerator days,
denominator days) so callers can reuse the day counts.

Example:
    >>> dc = DayCount(DayCountTypes.ACT_365F)
    >>> dc.year_frac(Date(1, 1, 2024), Date(1, 1, 2025))
    (1.0027397260273974, 366, 365)
"""

from enum import Enum

from .date import Date, is_leap_year
from .error import LibError

###############################################################################


def is_last_day_of_feb(dt: Date):
    """ Returns True if we are on the last day of February """
    if dt._m == 2:
        if is_leap_year(dt._y):
            return dt._d == 29
        return dt._d == 28
    return False

###############################################################################


class DayCountTypes(Enum):
    THIRTY_360_BOND = 1
    ACT_ACT_ISDA = 5
    ACT_365F = 7
    ACT_360 = 8
    SIMPLE = 11

###############################################################################


class DayCount:
    """ Calculate the fractional day count between two dates according to a
    specified day count convention. """

    def __init__(self,
                 dcc_type: DayCountTypes):
        """ Create Day Count convention by passing in the Day Count Type. """

        if not isinstance(dcc_type, DayCountTypes):
            raise LibError("Need to pass DayCountTypes")

        self._type = dcc_type

    ###########################################################################

    def year_frac(self,
                  dt1: Date,
                  dt2: Date):
        """ Year fraction between dt1 and dt2. Reversed dates give the
        negated fraction. Returns (year_frac, num, den). """

        if dt2 < dt1:
            (acc_factor, num, den) = self.year_frac(dt2, dt1)
            return (-acc_factor, -num, den)

        num_days = dt2 - dt1

        if self._type == DayCountTypes.ACT_365F:
            den = 365
            return (num_days / den, num_days, den)

        elif self._type == DayCountTypes.ACT_360:
            den = 360
            return (num_days / den, num_days, den)

        elif self._type == DayCountTypes.SIMPLE:
            den = 365.25
            return (num_days / den, num_days, den)

        elif self._type == DayCountTypes.ACT_ACT_ISDA:

            y1 = dt1._y
            y2 = dt2._y
            den1 = 366 if is_leap_year(y1) else 365
            den2 = 366 if is_leap_year(y2) else 365

            if y1 == y2:
                return (num_days / den1, num_days, den1)

            days_y1 = Date(1, 1, y1 + 1) - dt1
            days_y2 = dt2 - Date(1, 1, y2)
            acc_factor = days_y1 / den1
            acc_factor += (y2 - y1 - 1)
            acc_factor += days_y2 / den2
            return (acc_factor, num_days, den1)

        elif self._type == DayCountTypes.THIRTY_360_BOND:

            d1 = min(dt1._d, 30)
            d2 = dt2._d
            if d1 == 30 and d2 == 31:
                d2 = 30

            num = 360 * (dt2._y - dt1._y) + 30 * (dt2._m - dt1._m) + (d2 - d1)
            den = 360
            return (num / den, num, den)

        else:
            raise LibError(str(self._type) + " is not one of DayCountTypes")

    ###########################################################################

    def __repr__(self):
        return str(self._type)
