"""
Geographical regions that inflation indices are published for.

A region has a display name, used to build the index name
("UK" + " " + "RPI"), and a short code.
"""

###############################################################################


class Region:
    """ Name and code of the economic region an index describes. """

    def __init__(self,
                 name: str,
                 code: str):
        self._name = name
        self._code = code

    def name(self):
        return self._name

    def code(self):
        return self._code

    def __eq__(self, other):
        if not isinstance(other, Region):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"{self._name} ({self._code})"

###############################################################################


AUSTRALIA = Region("Australia", "AU")
EURO_REGION = Region("EU", "EU")
FRANCE = Region("France", "FR")
SOUTH_AFRICA = Region("South Africa", "ZA")
UNITED_KINGDOM = Region("UK", "UK")
UNITED_STATES = Region("USA", "US")
