##############################################################################

##############################################################################

import numpy as np
from typing import Union
from prettytable import PrettyTable

from .date import Date
from .error import LibError


###############################################################################


def check_dt(d: Date):
    """ Check that input d is a Date. """

    if isinstance(d, Date) is False:
        raise LibError("Should be a Date, got " + str(type(d)))


###############################################################################


def label_to_string(label: str,
                    value: (float, str),
                    separator: str = "\n",
                    list_format: bool = False):
    """ Format label/value pairs for a unified formatting. """
    # Format option for lists such that all values are aligned:
    # Label: value1
    #        value2
    #        ...
    label = str(label)

    if list_format and type(value) is list and len(value) > 0:
        s = label + ": "
        labelSpacing = " " * len(s)
        s += str(value[0])

        for v in value[1:]:
            s += "\n" + labelSpacing + str(v)
        s += separator

        return s
    else:
        return f"{label}: {value}{separator}"

###############################################################################


def format_table(header: (list, tuple),
                 rows: (list, tuple)):
    """ Format a 2D array into a table-like string using a wrapper around
    PrettyTable to get a nice formatting. """

    t = PrettyTable(header)
    num_cols = len(header)

    if len(rows) == 0:
        return ""

    for row in rows:
        if len(row) != num_cols:
            raise ValueError("Header and Row Size must match!")

        t.add_row(row)

    return t

###############################################################################


def to_usable_type(t):
    """ Convert a type such that it can be used with `isinstance` """
    if hasattr(t, '__origin__'):
        origin = t.__origin__
        # t comes from the `typing` module
        if origin is list:
            return (list, np.ndarray)
        elif origin is Union:
            types = t.__args__
            return tuple(to_usable_type(tp) for tp in types)
    else:
        # t is a normal type
        if t is float:
            return (int, float, np.floating)
        if isinstance(t, tuple):
            return tuple(to_usable_type(tp) for tp in t)

    return t


###############################################################################


def check_argument_types(func, values):
    """ Check that all values passed into a function are of the same type
    as the function annotations. If a value has not been annotated, it
    will not be checked. """
    for value_name, annotation_type in func.__annotations__.items():

        if value_name not in values:
            continue

        value = values[value_name]
        usable_type = to_usable_type(annotation_type)

        if not isinstance(value, usable_type):
            raise LibError(
                f"Argument Type Error in {func.__module__}.{func.__name__}: "
                f"argument >>{value_name}<< is {value!r} of type "
                f"{type(value)}, allowed types are {usable_type}")

###############################################################################
