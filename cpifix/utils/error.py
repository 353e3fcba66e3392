"""
Exception classes for cpifix library errors.

Provides a base exception type to distinguish errors originating from the
library from other Python exceptions, plus the specialised errors raised by
the inflation fixing engines. Every error carries enough context (index
name, date) to diagnose a data or configuration gap.

Example:
    >>> from cpifix.utils.error import LibError, MissingFixingError
    >>>
    >>> try:
    ...     ukrpi.fixing(Date(15, 3, 2020))
    ... except MissingFixingError as e:
    ...     print(e.index_name, e.fixing_dt)
    ... except LibError as e:
    ...     print(f"cpifix error: {e._message}")
"""


class LibError(Exception):
    """ Class to understand if the error is coming from this library """

    def __init__(self,
                 message: str):
        """ Create error object """
        super().__init__(message)
        self._message = message

    def _print(self):
        print("LibError:", self._message)

###############################################################################


class MissingFixingError(LibError):
    """ A historical fixing the index should know is absent from its series. """

    def __init__(self, index_name: str, fixing_dt):
        self.index_name = index_name
        self.fixing_dt = fixing_dt
        super().__init__(f"Missing {index_name} fixing for {fixing_dt}")


class DuplicateFixingError(LibError):
    """ A fixing was added on a date already holding a different value. """

    def __init__(self, index_name: str, fixing_dt, existing: float,
                 value: float):
        self.index_name = index_name
        self.fixing_dt = fixing_dt
        self.existing = existing
        self.value = value
        super().__init__(
            f"At least one duplicated fixing provided for {index_name}: "
            f"{fixing_dt}, {value} while {existing} value is already present")


class InvalidBaseDateError(LibError):
    """ The base date of a zero inflation curve cannot be fixed from history. """

    def __init__(self, index_name: str, base_dt):
        self.index_name = index_name
        self.base_dt = base_dt
        super().__init__(
            f"{index_name} index fixing at base date {base_dt} "
            f"is not available")


class UnsupportedInterpolationError(LibError):

    def __init__(self, interp_type):
        self.interp_type = interp_type
        super().__init__(f"Unknown CPI interpolation type: {interp_type}")


class UnboundCurveError(LibError):

    def __init__(self, message: str = "Empty handle cannot be dereferenced"):
        super().__init__(message)
