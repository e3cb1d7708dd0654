"""
errors.py - Error taxonomy for the mirror engine

Every domain violation surfaces as an InvalidParameter:
    - zero or negative focal length where it is used as a divisor
    - non-positive mirror radius or ray count
    - non-finite inputs
    - reflected rays with no axis crossing (vertical or axis-parallel)
    - any intermediate result that would otherwise be NaN or infinite

Project: Parabolic Mirror Ray Tracer
"""

import numpy as np


class InvalidParameter(ValueError):
    """Raised when an input or derived quantity is outside the model's domain."""


def require_finite(name: str, value: float) -> float:
    """
    Check that a numeric input is finite.

    Parameters
    ----------
    name : str
        Parameter name used in the error message
    value : float
        Value to check

    Returns
    -------
    float
        The value, unchanged

    Raises
    ------
    InvalidParameter
        If the value is NaN or infinite
    """
    if not np.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value


def require_positive(name: str, value: float) -> float:
    """
    Check that a numeric input is finite and strictly positive.

    Raises
    ------
    InvalidParameter
        If the value is not finite or is <= 0
    """
    require_finite(name, value)
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")
    return value


def require_count(name: str, value: int) -> int:
    """
    Check that a count is a positive integer.

    Integral numpy scalars are accepted; bools and fractional values are not.

    Parameters
    ----------
    name : str
        Parameter name used in the error message
    value : int
        Count to check

    Returns
    -------
    int
        The count as a Python int

    Raises
    ------
    InvalidParameter
        If the value is not a positive integer
    """
    require_positive(name, value)
    if isinstance(value, (bool, np.bool_)) or int(value) != value:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    return int(value)


def checked_result(name: str, value):
    """
    Reject a NaN or infinite result instead of returning it.

    Parameters
    ----------
    name : str
        Name of the computed quantity
    value : float or np.ndarray
        Computed value(s)

    Returns
    -------
    float or np.ndarray
        Scalars as Python floats, arrays unchanged

    Raises
    ------
    InvalidParameter
        If any element is not finite
    """
    if np.ndim(value) == 0:
        value = float(value)
    if not np.all(np.isfinite(value)):
        raise InvalidParameter(f"{name} is not finite")
    return value
