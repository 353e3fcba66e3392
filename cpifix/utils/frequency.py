"""
Publication frequency types.

Frequency types:
- ANNUAL: Once per year (frequency = 1)
- SEMI_ANNUAL: Twice per year (frequency = 2)
- TRI_ANNUAL: Three times per year (frequency = 3)
- QUARTERLY: Four times per year (frequency = 4)
- MONTHLY: Twelve times per year (frequency = 12)

Inflation indices are published ANNUAL, SEMI_ANNUAL, QUARTERLY or MONTHLY.
frequency_tenor() gives the length of one publication cycle as a tenor
string so it can be added to a Date.

Example:
    >>> frequency_tenor(FrequencyTypes.QUARTERLY)
    '3M'
"""

from cpifix.utils.error import LibError

from enum import Enum


class FrequencyTypes(Enum):
    ANNUAL = 1
    SEMI_ANNUAL = 2
    TRI_ANNUAL = 3
    QUARTERLY = 4
    MONTHLY = 12


def frequency_tenor(freq_type: FrequencyTypes):
    """ Length of one period of the given frequency as a tenor string. """
    if freq_type == FrequencyTypes.ANNUAL:
        return "1Y"
    elif freq_type in (FrequencyTypes.SEMI_ANNUAL, FrequencyTypes.TRI_ANNUAL,
                       FrequencyTypes.QUARTERLY, FrequencyTypes.MONTHLY):
        return f"{12 // freq_type.value}M"
    else:
        raise LibError("Frequency has no period length: " + str(freq_type))
