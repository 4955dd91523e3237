"""Evenly spaced points over an interval."""

import logging
import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from sproduce.logs.logs import LOGGER_NAME
from sproduce.utils import InvalidArgumentError, check_finite, is_integer

LOGGER = logging.getLogger(LOGGER_NAME)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _scaled_product_overflows(span: float, intervals: int) -> bool:
    """
    Check whether the integer part of the span scaled by the interval count leaves the signed 64-bit range.

    Python integers do not overflow so the product is evaluated exactly and compared against the limits of a 64-bit
    integer.

    Parameters
    ----------
    span : float
        Width of the interval, ``end - start``.
    intervals : int
        Number of intervals, ``count - 1``.

    Returns
    -------
    bool
        True if the product overflows or the span is not finite.
    """
    if not math.isfinite(span):
        return True
    product = int(span) * (intervals - 1)
    return not INT64_MIN <= product <= INT64_MAX


def _uniform_spacing(start: float, end: float, intervals: int, index: npt.NDArray) -> npt.NDArray:
    """
    Points computed as ``start + i * ((end - start) / intervals)``.

    Parameters
    ----------
    start : float
        Lower bound.
    end : float
        Upper bound.
    intervals : int
        Number of intervals.
    index : npt.NDArray
        Point indices.

    Returns
    -------
    npt.NDArray
        Points.
    """
    return start + index * ((end - start) / intervals)


def _split_spacing(start: float, end: float, intervals: int, index: npt.NDArray) -> npt.NDArray:
    """
    Points computed as ``start + (end / intervals) * i - (start / intervals) * i``.

    Used when the bounds have opposite signs.

    Parameters
    ----------
    start : float
        Lower bound.
    end : float
        Upper bound.
    intervals : int
        Number of intervals.
    index : npt.NDArray
        Point indices.

    Returns
    -------
    npt.NDArray
        Points.
    """
    return start + (end / intervals) * index - (start / intervals) * index


@dataclass(frozen=True)
class Linspace:
    """
    A number of evenly spaced points over ``[start, end]``.

    The bounds are reordered on construction so that ``start <= end`` regardless of the order they are given in. The
    spacing between consecutive points is ``(end - start) / (count - 1)``.

    Parameters
    ----------
    start : float
        One bound of the interval.
    end : float
        The other bound of the interval.
    count : int
        Number of points to generate, must be at least 1.
    """

    start: float
    end: float
    count: int

    def __post_init__(self) -> None:
        """
        Validate the arguments and order the bounds.

        Raises
        ------
        InvalidArgumentError
            If ``count`` is not an integer or is less than one, or either bound is not finite.
        """
        if not is_integer(self.count):
            raise InvalidArgumentError(f"Linspace count must be an integer, got {self.count!r}")
        if self.count < 1:
            raise InvalidArgumentError(f"Linspace count must be at least 1, got {self.count}")
        start = check_finite(self.start, "start")
        end = check_finite(self.end, "end")
        if start > end:
            start, end = end, start
        # frozen dataclass, bypass __setattr__
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "count", int(self.count))

    @property
    def intervals(self) -> int:
        """
        Number of intervals between the points.

        Returns
        -------
        int
            ``count - 1``.
        """
        return self.count - 1

    def generate(self) -> npt.NDArray:
        """
        Generate the points.

        Returns
        -------
        npt.NDArray
            One dimensional float64 array of ``count`` non-decreasing points, the first equal to ``start`` and the last
            equal to ``end``.
        """
        if self.count == 1:
            return np.array([self.start], dtype=np.float64)
        index = np.arange(self.count, dtype=np.float64)
        if _scaled_product_overflows(self.end - self.start, self.intervals):
            LOGGER.debug(f"Linspace [{self.start}, {self.end}] overflows 64-bit spacing arithmetic, using float path.")
            if math.isfinite(self.end - self.start):
                points = _uniform_spacing(self.start, self.end, self.intervals, index)
            else:
                # each term of the split formula is bounded by max(|start|, |end|)
                points = _split_spacing(self.start, self.end, self.intervals, index)
        elif self.start * self.end < 0:
            points = _split_spacing(self.start, self.end, self.intervals, index)
        else:
            points = _uniform_spacing(self.start, self.end, self.intervals, index)
        points[0] = self.start
        points[-1] = self.end
        return points


def linspace(start: float, end: float, count: int) -> npt.NDArray:
    """
    Generate ``count`` evenly spaced points between ``start`` and ``end``.

    Parameters
    ----------
    start : float
        One bound of the interval.
    end : float
        The other bound of the interval.
    count : int
        Number of points.

    Returns
    -------
    npt.NDArray
        Evenly spaced points in non-decreasing order.
    """
    return Linspace(start, end, count).generate()
