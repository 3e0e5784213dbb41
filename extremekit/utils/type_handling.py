"""
This module provides utility functions for converting the inputs accepted
by the extremekit distributions (Python scalars, lists, NumPy arrays,
pandas Series and xarray DataArrays) to plain NumPy arrays.

Functions:
----------
- to_numeric_array: Converts input data to a numeric NumPy array.
- to_probability_array: Converts input data to a numeric NumPy array and
  checks every value lies strictly between 0 and 1.
- restore_shape: Returns a NumPy scalar for 0-d results and the array
  otherwise.
"""

from numbers import Real
from typing import Union
import numpy as np
import pandas as pd
import xarray as xr

from extremekit.errors import InvalidArgumentError

ArrayLike = Union[float, int, list, tuple, np.ndarray, pd.Series, xr.DataArray]


def to_numeric_array(data: ArrayLike, name: str) -> np.ndarray:
    """
    Convert input data to a float array, ensuring all elements are numeric.

    Parameters
    ----------
    data: float, int, list, tuple, np.ndarray, pd.Series, or xr.DataArray
        Data to convert.
    name: str
        Name of the argument, used in error messages.

    Returns
    -------
    np.ndarray
        Float array with the same shape as the input. Scalars become
        0-d arrays.
    """
    if isinstance(data, bool) or isinstance(data, np.bool_):
        raise InvalidArgumentError(f"{name} must be numeric. Got: {type(data)}")
    if isinstance(data, (pd.Series, xr.DataArray)):
        data = data.to_numpy()
    if isinstance(data, (Real, np.number, list, tuple, np.ndarray)):
        data = np.asarray(data)
        if data.dtype == bool or not np.issubdtype(data.dtype, np.number):
            raise InvalidArgumentError(
                f"{name} must contain numeric data. Got data type: {data.dtype}"
            )
        if np.iscomplexobj(data):
            raise InvalidArgumentError(f"{name} must contain real numbers.")
    else:
        raise InvalidArgumentError(
            f"{name} must be a number, list, tuple, np.ndarray, pd.Series,"
            + f" or xr.DataArray. Got: {type(data)}"
        )
    return data.astype(float)


def to_probability_array(data: ArrayLike, name: str) -> np.ndarray:
    """
    Convert input data to a float array of probabilities in the open
    interval (0, 1).
    """
    data = to_numeric_array(data, name)
    if not np.all((data > 0) & (data < 1)):
        raise InvalidArgumentError(
            f"{name} must lie strictly between 0 and 1. Got: {data}"
        )
    return data


def restore_shape(out: np.ndarray) -> Union[np.float64, np.ndarray]:
    """Unwrap 0-d results to a NumPy scalar."""
    out = np.asarray(out, dtype=float)
    if out.ndim == 0:
        return out[()]
    return out
