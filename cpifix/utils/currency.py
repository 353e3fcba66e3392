"""
Currency type enumeration.

Every inflation index is denominated in the currency of the economy whose
prices it measures; the currency is part of the index's descriptive state
and is reported in its __repr__.

Supported currencies:
- USD: US Dollar
- EUR: Euro
- GBP: British Pound Sterling
- CHF: Swiss Franc
- CAD: Canadian Dollar
- AUD: Australian Dollar
- NZD: New Zealand Dollar
- DKK: Danish Krone
- SEK: Swedish Krona
- JPY: Japanese Yen
- ZAR: South African Rand
- NONE: No currency specified
"""

from enum import Enum

###############################################################################

class CurrencyTypes(Enum):
    USD = 1
    EUR = 2
    GBP = 3
    CHF = 4
    CAD = 5
    AUD = 6
    NZD = 7
    DKK = 8
    SEK = 9
    JPY = 11
    ZAR = 16
    NONE = 15

###############################################################################
