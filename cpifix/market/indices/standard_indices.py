"""
Ready-made published inflation indices.

Each InflationIndexTypes member maps to the conventions of the published
price index: family name, region, publication frequency, availability lag
and currency. zero_index() builds the price level index and yoy_index()
the matching year-on-year index computed as a ratio of level fixings.

None of the indices are revised and all of them publish flat (the index
value holds for the whole period); an interpolated year-on-year index can
still be requested explicitly.

Example:
    >>> ukrpi = zero_index(InflationIndexTypes.UK_RPI, Handle(zero_curve))
    >>> ukrpi.name()
    'UK RPI'
    >>> yy = yoy_index(InflationIndexTypes.EU_HICP)
    >>> yy.name()
    'EU YY_HICP'
"""

from typing import Optional

from cpifix.utils.currency import CurrencyTypes
from cpifix.utils.error import LibError
from cpifix.utils.frequency import FrequencyTypes
from cpifix.utils.global_types import InflationIndexTypes
from cpifix.utils.observable import Handle
from cpifix.utils.region import (AUSTRALIA, EURO_REGION, FRANCE,
                                 SOUTH_AFRICA, UNITED_KINGDOM, UNITED_STATES)
from .inflation_index import YoYInflationIndex, ZeroInflationIndex

###############################################################################

# family name, region, frequency, availability lag, currency
INDEX_CONVENTIONS = {
    InflationIndexTypes.UK_RPI: ("RPI", UNITED_KINGDOM,
                                 FrequencyTypes.MONTHLY, "1M",
                                 CurrencyTypes.GBP),
    InflationIndexTypes.UK_CPI: ("CPI", UNITED_KINGDOM,
                                 FrequencyTypes.MONTHLY, "1M",
                                 CurrencyTypes.GBP),
    InflationIndexTypes.US_CPI_U: ("CPI", UNITED_STATES,
                                   FrequencyTypes.MONTHLY, "1M",
                                   CurrencyTypes.USD),
    InflationIndexTypes.EU_HICP: ("HICP", EURO_REGION,
                                  FrequencyTypes.MONTHLY, "1M",
                                  CurrencyTypes.EUR),
    InflationIndexTypes.EU_HICPXT: ("HICPXT", EURO_REGION,
                                    FrequencyTypes.MONTHLY, "1M",
                                    CurrencyTypes.EUR),
    InflationIndexTypes.FR_HICP: ("HICP", FRANCE,
                                  FrequencyTypes.MONTHLY, "1M",
                                  CurrencyTypes.EUR),
    InflationIndexTypes.ZA_CPI: ("CPI", SOUTH_AFRICA,
                                 FrequencyTypes.MONTHLY, "1M",
                                 CurrencyTypes.ZAR),
    InflationIndexTypes.AU_CPI: ("CPI", AUSTRALIA,
                                 FrequencyTypes.QUARTERLY, "2M",
                                 CurrencyTypes.AUD),
}

###############################################################################


def _conventions(index_type: InflationIndexTypes):
    if index_type not in INDEX_CONVENTIONS:
        raise LibError("Unknown inflation index type: " + str(index_type))
    return INDEX_CONVENTIONS[index_type]


def zero_index(index_type: InflationIndexTypes,
               handle: Optional[Handle] = None):
    """ Price level index of the given type, forecasting from handle. """

    (family_name, region, freq_type, lag, currency) = _conventions(index_type)

    return ZeroInflationIndex(family_name, region, False, False, freq_type,
                              lag, currency, handle)


def yoy_index(index_type: InflationIndexTypes,
              handle: Optional[Handle] = None,
              interpolated: bool = False):
    """ Year-on-year ratio index on the conventions of the given type. """

    (family_name, region, freq_type, lag, currency) = _conventions(index_type)

    return YoYInflationIndex("YY_" + family_name, region, False, interpolated,
                             True, freq_type, lag, currency, handle)
