"""
Sparse date-to-value store for historical index fixings.

Values are keyed by the Excel serial number of their date. Looking up a
date that holds no fixing returns None, the missing sentinel, so callers
can tell "never published" apart from any real value.

Example:
    >>> ts = TimeSeries()
    >>> ts[Date(1, 1, 2024)] = 130.2
    >>> ts[Date(1, 1, 2024)]
    130.2
    >>> ts[Date(1, 2, 2024)] is None
    True
"""

from typing import Dict

import numpy as np
import pandas as pd

from cpifix.utils.date import Date
from cpifix.utils.error import LibError

###############################################################################


class TimeSeries:
    """ Ordered-on-demand mapping from Date to float. """

    def __init__(self):
        self._values: Dict[int, float] = {}

    ###########################################################################

    def __getitem__(self, dt: Date):
        return self._values.get(dt._excel_dt)

    def __setitem__(self, dt: Date, value: float):
        if not isinstance(dt, Date):
            raise LibError("TimeSeries keys must be Dates")
        self._values[dt._excel_dt] = float(value)

    def __contains__(self, dt: Date):
        return dt._excel_dt in self._values

    def __len__(self):
        return len(self._values)

    def empty(self):
        return len(self._values) == 0

    ###########################################################################

    def dates(self):
        return [Date.from_excel(x) for x in sorted(self._values)]

    def values(self):
        return np.array([self._values[x] for x in sorted(self._values)])

    def items(self):
        return [(Date.from_excel(x), self._values[x])
                for x in sorted(self._values)]

    def first_date(self):
        if self.empty():
            raise LibError("Empty time series has no first date")
        return Date.from_excel(min(self._values))

    def last_date(self):
        if self.empty():
            raise LibError("Empty time series has no last date")
        return Date.from_excel(max(self._values))

    ###########################################################################

    def to_pandas(self, name: str = None):
        """ Export as a pandas Series indexed by timestamp. """
        keys = sorted(self._values)
        index = pd.DatetimeIndex(
            [Date.from_excel(x).datetime() for x in keys])
        return pd.Series([self._values[x] for x in keys], index=index,
                         name=name, dtype=float)

    def __repr__(self):
        return f"TimeSeries({len(self._values)} values)"
