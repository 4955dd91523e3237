"""Exceptions and small helpers shared across sproduce."""

import math

import numpy as np


class InvalidArgumentError(ValueError):
    """Raised when a caller supplied parameter violates a precondition."""

    pass  # pylint: disable=unnecessary-pass


class NumericalError(ArithmeticError):
    """Raised when a degenerate numerical condition is detected during surface generation."""

    pass  # pylint: disable=unnecessary-pass


def is_integer(value: object) -> bool:
    """
    Check whether a value is an integer, excluding booleans.

    Parameters
    ----------
    value : object
        Value to check.

    Returns
    -------
    bool
        True if ``value`` is a Python or Numpy integer.
    """
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_power_of_two(value: int) -> bool:
    """
    Check whether a positive integer is a power of two.

    Parameters
    ----------
    value : int
        Integer to check.

    Returns
    -------
    bool
        True if ``value`` is a power of two.
    """
    value = int(value)
    return value > 0 and (value & (value - 1)) == 0


def check_finite(value: float, name: str) -> float:
    """
    Ensure a numeric parameter is a finite real number.

    Parameters
    ----------
    value : float
        Value to check.
    name : str
        Parameter name, used in the error message.

    Returns
    -------
    float
        The value converted to ``float``.

    Raises
    ------
    InvalidArgumentError
        If the value is not numeric, is NaN or is infinite.
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"'{name}' must be a real number, got {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidArgumentError(f"'{name}' must be finite, got {value}")
    return value
