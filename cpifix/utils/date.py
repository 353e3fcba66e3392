"""
Calendar date class used by indices, curves and day counters.

Dates are stored as day, month and year together with their Excel serial
number, which makes differences and comparisons cheap integer operations.
Tenor strings such as "3M", "1Y" or "-2M" can be added directly.

Example:
    >>> dt = Date(15, 6, 2024)
    >>> dt.add_tenor("3M")
    15-SEP-2024
    >>> dt.add_tenor("-1Y")
    15-JUN-2023
    >>> Date(1, 7, 2024) - Date(1, 6, 2024)
    30
"""

import datetime
from typing import Union

from .error import LibError

###############################################################################

SHORT_MONTH_NAMES = ['JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN',
                     'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC']

MONTH_DAYS_NOT_LEAP = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
MONTH_DAYS_LEAP = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# Excel serial numbers count days from 30-Dec-1899
_EXCEL_ORIGIN = datetime.date(1899, 12, 30).toordinal()

###############################################################################


def is_leap_year(y: int):
    """ Test whether year y is a leap year - if so return True, else False """
    return ((y % 4 == 0) and (y % 100 != 0) or (y % 400 == 0))


def days_in_month(m: int, y: int):
    """ Number of days in month m of year y. """
    if is_leap_year(y):
        return MONTH_DAYS_LEAP[m - 1]
    return MONTH_DAYS_NOT_LEAP[m - 1]

###############################################################################


def tenor_to_parts(tenor: str):
    """ Split a tenor string like "3M" or "-1Y" into a signed integer count
    and a unit letter (D, W, M or Y). """

    if not isinstance(tenor, str):
        raise LibError("Tenor must be a string e.g. '5Y'")

    s = tenor.strip().upper()
    sign = 1
    if s.startswith("-"):
        sign = -1
        s = s[1:]
    elif s.startswith("+"):
        s = s[1:]

    if len(s) < 2:
        raise LibError("Tenor " + tenor + " is not valid")

    unit = s[-1]
    if unit not in ("D", "W", "M", "Y"):
        raise LibError("Unknown tenor unit in " + tenor)

    try:
        num = int(s[:-1])
    except ValueError:
        raise LibError("Tenor " + tenor + " is not valid")

    return sign * num, unit


def negate_tenor(tenor: str):
    """ Return the tenor string pointing the other way in time. """
    num, unit = tenor_to_parts(tenor)
    return f"{-num}{unit}"

###############################################################################


class Date():
    """ A date class that stores day, month and year and its Excel serial
    number. Instances are immutable and hashable. """

    def __init__(self,
                 d: int,
                 m: int,
                 y: int,
                 hh: int = 0,
                 mm: int = 0,
                 ss: int = 0):
        """ Create a date given a day of month, month and year. The arguments
        must be in the order day (1-31), month (1-12) and year. Hours,
        minutes and seconds are accepted and ignored. """

        if m < 1 or m > 12:
            raise LibError("Month " + str(m) + " is not valid")

        if d < 1 or d > days_in_month(m, y):
            raise LibError("Date: " + str(d) + " " + str(m) + " " + str(y)
                           + " is not a valid date")

        self._d = d
        self._m = m
        self._y = y
        self._excel_dt = datetime.date(y, m, d).toordinal() - _EXCEL_ORIGIN
        self._weekday = (self._excel_dt + 5) % 7  # Monday is 0

    ###########################################################################

    @classmethod
    def from_date(cls, dt: Union[datetime.date, datetime.datetime]):
        """ Create a Date from a python datetime.date or datetime. """
        return cls(dt.day, dt.month, dt.year)

    @classmethod
    def from_excel(cls, excel_dt: int):
        """ Create a Date from its Excel serial number. """
        return cls.from_date(datetime.date.fromordinal(int(excel_dt) + _EXCEL_ORIGIN))

    @classmethod
    def today(cls):
        return cls.from_date(datetime.date.today())

    ###########################################################################

    def d(self):
        return self._d

    def m(self):
        return self._m

    def y(self):
        return self._y

    def excel_dt(self):
        return self._excel_dt

    def weekday(self):
        return self._weekday

    def datetime(self):
        """ Returns a python datetime.date for this date. """
        return datetime.date(self._y, self._m, self._d)

    ###########################################################################

    def __lt__(self, other):
        return self._excel_dt < other._excel_dt

    def __le__(self, other):
        return self._excel_dt <= other._excel_dt

    def __gt__(self, other):
        return self._excel_dt > other._excel_dt

    def __ge__(self, other):
        return self._excel_dt >= other._excel_dt

    def __eq__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._excel_dt == other._excel_dt

    def __ne__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self._excel_dt != other._excel_dt

    def __hash__(self):
        return hash(self._excel_dt)

    def __sub__(self, other):
        """ Number of calendar days between two dates. """
        if not isinstance(other, Date):
            raise LibError("Can only subtract a Date from a Date")
        return self._excel_dt - other._excel_dt

    ###########################################################################

    def is_weekend(self):
        return self._weekday >= 5

    def eom(self):
        """ Last calendar day of this date's month. """
        return Date(days_in_month(self._m, self._y), self._m, self._y)

    def is_eom(self):
        return self._d == days_in_month(self._m, self._y)

    def first_of_month(self):
        return Date(1, self._m, self._y)

    ###########################################################################

    def add_days(self,
                 num_days: int = 1):
        """ Returns a new date that is num_days after this date. """
        return Date.from_excel(self._excel_dt + int(num_days))

    def add_weekdays(self,
                     num_days: int):
        """ Returns a new date that is num_days weekdays after this date.
        Negative values step backwards. """

        step = 1 if num_days >= 0 else -1
        remaining = abs(num_days)
        dt = self
        while remaining > 0:
            dt = dt.add_days(step)
            if not dt.is_weekend():
                remaining -= 1
        return dt

    def add_months(self,
                   mm: Union[list, int]):
        """ Returns a new date that is mm months after this date. The day is
        clipped to the end of the target month when needed. A list of month
        offsets returns a list of dates. """

        if isinstance(mm, list):
            return [self.add_months(x) for x in mm]

        mm = int(mm)
        m = self._m + mm
        y = self._y + (m - 1) // 12
        m = (m - 1) % 12 + 1
        d = min(self._d, days_in_month(m, y))
        return Date(d, m, y)

    def add_years(self,
                  yy: Union[list, float]):
        """ Returns a new date that is yy years after this date. Fractional
        years are converted to whole months. """

        if isinstance(yy, list):
            return [self.add_years(x) for x in yy]

        mm = int(round(yy * 12.0))
        return self.add_months(mm)

    def add_tenor(self,
                  tenor: Union[list, str]):
        """ Return the date following the Date by a period given by the
        tenor which is a string consisting of a number and a letter, the
        letter being d, w, m, y for day, week, month or year. A leading minus
        sign moves backwards. """

        if isinstance(tenor, list):
            return [self.add_tenor(x) for x in tenor]

        num, unit = tenor_to_parts(tenor)

        if unit == "D":
            return self.add_days(num)
        elif unit == "W":
            return self.add_days(7 * num)
        elif unit == "M":
            return self.add_months(num)
        else:
            return self.add_months(12 * num)

    ###########################################################################

    def __str__(self):
        return f"{self._d:02d}-{SHORT_MONTH_NAMES[self._m - 1]}-{self._y:04d}"

    def __repr__(self):
        return self.__str__()

###############################################################################


def datediff(d1: Date,
             d2: Date):
    """ Calculate the number of days between two dates. """
    return d2._excel_dt - d1._excel_dt
