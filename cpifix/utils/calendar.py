"""
Business day calendars and date adjustment conventions.

Inflation indices publish on a fixed schedule irrespective of business
days, so their fixing calendar is CalendarTypes.NONE which has no holidays
and no weekends. CalendarTypes.WEEKEND only treats Saturdays and Sundays
as holidays.

Business day adjustments:
- NONE: no adjustment
- FOLLOWING: next business day
- MODIFIED_FOLLOWING: next business day unless it is in the next month,
  in which case the previous business day
- PRECEDING: previous business day
- MODIFIED_PRECEDING: previous business day unless it is in the previous
  month, in which case the next business day

Example:
    >>> cal = Calendar(CalendarTypes.WEEKEND)
    >>> cal.adjust(Date(29, 6, 2024), BusDayAdjustTypes.MODIFIED_FOLLOWING)
    28-JUN-2024
"""

from enum import Enum

from .date import Date
from .error import LibError

###############################################################################


class BusDayAdjustTypes(Enum):
    NONE = 1
    FOLLOWING = 2
    MODIFIED_FOLLOWING = 3
    PRECEDING = 4
    MODIFIED_PRECEDING = 5


class CalendarTypes(Enum):
    NONE = 1
    WEEKEND = 2

###############################################################################


class Calendar:
    """ Class to manage designation of payment dates as holidays according to
    a calendar type and to adjust dates that fall on them. """

    def __init__(self,
                 cal_type: CalendarTypes):

        if not isinstance(cal_type, CalendarTypes):
            raise LibError("Need to pass a CalendarTypes")

        self._cal_type = cal_type

    ###########################################################################

    def is_business_day(self,
                        dt: Date):
        if self._cal_type == CalendarTypes.NONE:
            return True
        return not dt.is_weekend()

    def is_holiday(self,
                   dt: Date):
        return not self.is_business_day(dt)

    ###########################################################################

    def adjust(self,
               dt: Date,
               bd_type: BusDayAdjustTypes):
        """ Adjust a date that falls on a holiday according to the business
        day adjustment convention. """

        if not isinstance(bd_type, BusDayAdjustTypes):
            raise LibError("Invalid type passed. Need BusDayAdjustTypes")

        if bd_type == BusDayAdjustTypes.NONE or self.is_business_day(dt):
            return dt

        if bd_type == BusDayAdjustTypes.FOLLOWING:
            return self._roll(dt, 1)

        elif bd_type == BusDayAdjustTypes.MODIFIED_FOLLOWING:
            new_dt = self._roll(dt, 1)
            if new_dt._m != dt._m:
                new_dt = self._roll(dt, -1)
            return new_dt

        elif bd_type == BusDayAdjustTypes.PRECEDING:
            return self._roll(dt, -1)

        elif bd_type == BusDayAdjustTypes.MODIFIED_PRECEDING:
            new_dt = self._roll(dt, -1)
            if new_dt._m != dt._m:
                new_dt = self._roll(dt, 1)
            return new_dt

        else:
            raise LibError("Unknown adjustment convention" + str(bd_type))

    def _roll(self, dt: Date, step: int):
        while not self.is_business_day(dt):
            dt = dt.add_days(step)
        return dt

    ###########################################################################

    def advance(self,
                dt: Date,
                tenor: str,
                bd_type: BusDayAdjustTypes = BusDayAdjustTypes.FOLLOWING):
        """ Move a date by a tenor and adjust the result onto a business
        day. """
        return self.adjust(dt.add_tenor(tenor), bd_type)

    ###########################################################################

    def __repr__(self):
        return str(self._cal_type)
