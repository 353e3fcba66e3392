"""
Lagged CPI fixings as used by inflation-linked instruments.

Instruments reference a zero inflation index at a date shifted back by an
observation lag and apply their own interpolation convention, which can
differ from the index's:

- AS_INDEX: use the index's own convention at the lagged date
- FLAT: the fixing of the period containing the lagged date
- LINEAR: interpolate between that fixing and the next period's, with the
  weight measured in the period of the non-lagged date

Example:
    >>> lagged_fixing(ukrpi, Date(15, 6, 2024), "3M", CPIInterpTypes.LINEAR)
"""

from enum import Enum

from cpifix.utils.date import Date, negate_tenor
from cpifix.utils.error import UnsupportedInterpolationError
from cpifix.utils.inflation import inflation_period
from .inflation_index import ZeroInflationIndex

###############################################################################


class CPIInterpTypes(Enum):
    AS_INDEX = 0
    FLAT = 1
    LINEAR = 2

###############################################################################


def effective_interpolation_type(index: ZeroInflationIndex,
                                 interp_type: CPIInterpTypes):
    """ Resolve AS_INDEX to the convention the index itself uses. """
    if interp_type == CPIInterpTypes.AS_INDEX:
        if index.interpolated():
            return CPIInterpTypes.LINEAR
        return CPIInterpTypes.FLAT
    return interp_type

###############################################################################


def lagged_fixing(index: ZeroInflationIndex,
                  dt: Date,
                  observation_lag: str,
                  interp_type: CPIInterpTypes):
    """ Index fixing observed at dt with the given lag and interpolation. """

    lagged_dt = dt.add_tenor(negate_tenor(observation_lag))

    if interp_type == CPIInterpTypes.AS_INDEX:
        return index.fixing(lagged_dt)

    elif interp_type == CPIInterpTypes.FLAT:
        fixing_period = inflation_period(lagged_dt, index.frequency())
        return index.fixing(fixing_period[0])

    elif interp_type == CPIInterpTypes.LINEAR:
        fixing_period = inflation_period(lagged_dt, index.frequency())
        interpolation_period = inflation_period(dt, index.frequency())

        if dt == interpolation_period[0]:
            # no interpolation; this avoids asking for the fixing at the end
            # of the period which might need a forecast curve
            return index.fixing(fixing_period[0])

        index_0 = index.fixing(fixing_period[0])
        index_1 = index.fixing(fixing_period[1].add_days(1))

        days_in_period = \
            interpolation_period[1].add_days(1) - interpolation_period[0]
        weight = (dt - interpolation_period[0]) / days_in_period
        return index_0 + (index_1 - index_0) * weight

    else:
        raise UnsupportedInterpolationError(interp_type)
