"""Runtime shape checks for jason validators.

These predicates decide which Python values count as each schema type. They
only inspect values; nothing here copies or coerces the data being validated,
apart from ``as_sequence`` which gives a read-only list view of array-like
containers.
"""

import numbers
from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for ints, floats and numpy numeric scalars, but never for booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_object(value: Any) -> bool:
    """True for keyed-field containers.

    ``None``, lists, tuples and strings are not objects; anything that
    implements ``collections.abc.Mapping`` is.
    """
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    """True for lists, tuples, numpy arrays and pandas Series/DataFrames."""
    if isinstance(value, np.ndarray):
        # 0-d arrays are scalars
        return value.ndim > 0
    return isinstance(value, (list, tuple, pd.Series, pd.DataFrame))


def as_sequence(value: Any) -> list[Any] | tuple[Any, ...]:
    """Return the items of an array-like value in index order.

    DataFrames are read as a list of row records, Series and numpy arrays as
    lists of their elements. Lists and tuples are returned as they are.
    """
    if isinstance(value, pd.DataFrame):
        return value.replace({pd.NaT: None}).to_dict("records")
    if isinstance(value, pd.Series):
        return value.replace({pd.NaT: None}).tolist()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value
