"""
Process-wide settings, most importantly the evaluation date.

The evaluation date is the "today" against which indices decide whether a
fixing is already known or must be forecast. It defaults to the system date
until it is set explicitly. Indices register with the settings object and
are notified whenever the evaluation date moves.

Example:
    >>> Settings.instance().evaluation_date = Date(15, 6, 2024)
    >>> with SavedSettings():
    ...     Settings.instance().evaluation_date = Date(1, 1, 2020)
    >>> Settings.instance().evaluation_date
    15-JUN-2024
"""

import logging

from .date import Date
from .error import LibError
from .observable import Observable

logger = logging.getLogger(__name__)

###############################################################################


class Settings(Observable):
    """ Global repository for run-time library settings. Use instance() to
    get the shared object. """

    _instance = None

    def __init__(self):
        self._evaluation_dt = None

    @classmethod
    def instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    ###########################################################################

    @property
    def evaluation_date(self):
        """ The evaluation date, or the system date if none was set. """
        if self._evaluation_dt is None:
            return Date.today()
        return self._evaluation_dt

    @evaluation_date.setter
    def evaluation_date(self, dt):
        if dt is not None and not isinstance(dt, Date):
            raise LibError("Evaluation date must be a Date")

        if dt == self._evaluation_dt:
            return

        self._evaluation_dt = dt
        logger.info("Evaluation date set to %s", dt)
        self.notify_observers()

    def reset(self):
        """ Forget the explicit evaluation date and fall back to today. """
        self.evaluation_date = None

###############################################################################


class SavedSettings:
    """ Context manager that restores the evaluation date on exit. """

    def __enter__(self):
        self._evaluation_dt = Settings.instance()._evaluation_dt
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        Settings.instance().evaluation_date = self._evaluation_dt
        return False
