"""
Process-wide registry of index fixing histories.

Histories are stored by upper-cased index name rather than on the index
object, so every instance describing the same index (for example the clone
of an index bound to another curve) sees the same fixings. Each name also
has a notifier that indices register with, so publishing a fixing through
one instance notifies all of them.
"""

import logging

from cpifix.utils.observable import Observable
from .time_series import TimeSeries

logger = logging.getLogger(__name__)

###############################################################################


class IndexManager:
    """ Global repository for past index fixings. Use instance() to get the
    shared object. """

    _instance = None

    def __init__(self):
        self._histories = {}
        self._notifiers = {}

    @classmethod
    def instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    ###########################################################################

    def has_history(self, name: str):
        return name.upper() in self._histories

    def get_history(self, name: str):
        """ The series for the index, created empty on first access. """
        key = name.upper()
        if key not in self._histories:
            self._histories[key] = TimeSeries()
        return self._histories[key]

    def set_history(self, name: str, history: TimeSeries):
        self._histories[name.upper()] = history
        self.notifier(name).notify_observers()

    def histories(self):
        return sorted(self._histories.keys())

    def clear_history(self, name: str):
        logger.debug("Clearing fixing history of %s", name)
        self._histories.pop(name.upper(), None)
        self.notifier(name).notify_observers()

    def clear_histories(self):
        for key in list(self._histories.keys()):
            self.clear_history(key)

    ###########################################################################

    def notifier(self, name: str):
        key = name.upper()
        if key not in self._notifiers:
            self._notifiers[key] = Observable()
        return self._notifiers[key]
