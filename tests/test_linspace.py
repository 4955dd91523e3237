"""Tests for the linspace module."""

from contextlib import nullcontext as does_not_raise

import numpy as np
import pytest

from sproduce.linspace import (
    INT64_MAX,
    Linspace,
    _scaled_product_overflows,
    _split_spacing,
    _uniform_spacing,
    linspace,
)
from sproduce.utils import InvalidArgumentError


@pytest.mark.parametrize(
    ("start", "end", "count"),
    [
        pytest.param(0.0, 1.0, 2, id="two points"),
        pytest.param(0.0, 1.0, 11, id="unit interval"),
        pytest.param(-5.0, 5.0, 128, id="opposite signs"),
        pytest.param(-10.0, -2.0, 7, id="both negative"),
        pytest.param(3.0, -7.5, 64, id="reversed bounds"),
        pytest.param(-0.5e-9, 0.5e-9, 1024, id="nanometre scale"),
        pytest.param(-1e300, 1e300, 5, id="huge span"),
    ],
)
def test_linspace_properties(start: float, end: float, count: int) -> None:
    """Length, ordering and endpoints of generated points."""
    points = Linspace(start, end, count).generate()

    assert len(points) == count
    assert points.dtype == np.float64
    assert np.all(np.diff(points) >= 0)
    assert points[0] == min(start, end)
    assert points[-1] == max(start, end)


@pytest.mark.parametrize(
    ("start", "end", "count", "expected"),
    [
        pytest.param(0.0, 1.0, 5, [0.0, 0.25, 0.5, 0.75, 1.0], id="quarters"),
        pytest.param(-1.0, 1.0, 3, [-1.0, 0.0, 1.0], id="symmetric"),
        pytest.param(1.0, -1.0, 3, [-1.0, 0.0, 1.0], id="symmetric reversed"),
        pytest.param(5.0, 5.0, 3, [5.0, 5.0, 5.0], id="zero width"),
        pytest.param(2.0, 4.0, 1, [2.0], id="single point"),
        pytest.param(-5.0, 5.0, 6, [-5.0, -3.0, -1.0, 1.0, 3.0, 5.0], id="even count"),
    ],
)
def test_linspace_values(start: float, end: float, count: int, expected: list) -> None:
    """Values of generated points."""
    np.testing.assert_array_almost_equal(linspace(start, end, count), expected)


def test_linspace_matches_numpy() -> None:
    """Points agree with numpy.linspace."""
    np.testing.assert_allclose(linspace(-3.2, 7.9, 257), np.linspace(-3.2, 7.9, 257), rtol=1e-12, atol=1e-12)


def test_linspace_deterministic() -> None:
    """Repeated calls give bitwise identical results."""
    first = Linspace(-1.7, 9.3, 513).generate()
    second = Linspace(-1.7, 9.3, 513).generate()
    np.testing.assert_array_equal(first, second)


def test_linspace_bounds_reordered() -> None:
    """Bounds are stored in ascending order."""
    space = Linspace(10.0, -2.0, 4)
    assert space.start == -2.0
    assert space.end == 10.0
    assert space.intervals == 3


def test_linspace_immutable() -> None:
    """Linspace instances can not be modified."""
    space = Linspace(0.0, 1.0, 4)
    with pytest.raises(AttributeError):
        space.count = 10


@pytest.mark.parametrize(
    ("start", "end", "count", "expectation"),
    [
        pytest.param(0.0, 1.0, 2, does_not_raise(), id="valid"),
        pytest.param(0.0, 1.0, 1, does_not_raise(), id="one point"),
        pytest.param(0.0, 1.0, 0, pytest.raises(InvalidArgumentError), id="zero count"),
        pytest.param(0.0, 1.0, -3, pytest.raises(InvalidArgumentError), id="negative count"),
        pytest.param(0.0, 1.0, 2.5, pytest.raises(InvalidArgumentError), id="float count"),
        pytest.param(0.0, 1.0, True, pytest.raises(InvalidArgumentError), id="boolean count"),
        pytest.param(np.nan, 1.0, 3, pytest.raises(InvalidArgumentError), id="nan start"),
        pytest.param(0.0, np.inf, 3, pytest.raises(InvalidArgumentError), id="infinite end"),
    ],
)
def test_linspace_arguments(start: float, end: float, count: int, expectation) -> None:
    """Invalid arguments raise InvalidArgumentError."""
    with expectation:
        Linspace(start, end, count)


def test_linspace_numpy_integer_count() -> None:
    """Numpy integers are accepted as the count."""
    assert len(linspace(0.0, 1.0, np.int64(5))) == 5


@pytest.mark.parametrize(
    ("span", "intervals", "expected"),
    [
        pytest.param(10.0, 9, False, id="small"),
        pytest.param(0.0, 1_000_000, False, id="zero span"),
        pytest.param(float(2**62), 2, False, id="at limit"),
        pytest.param(float(2**62), 3, True, id="just over limit"),
        pytest.param(1e300, 1, False, id="huge span single interval"),
        pytest.param(1e300, 3, True, id="huge span"),
        pytest.param(np.inf, 3, True, id="infinite span"),
    ],
)
def test_scaled_product_overflows(span: float, intervals: int, expected: bool) -> None:
    """Overflow detection of the scaled span."""
    assert _scaled_product_overflows(span, intervals) is expected


def test_int64_max() -> None:
    """Limit matches numpy's 64-bit integer."""
    assert np.iinfo(np.int64).max == INT64_MAX


@pytest.mark.parametrize(
    ("start", "end", "intervals"),
    [
        pytest.param(-5.0, 5.0, 127, id="symmetric"),
        pytest.param(-0.3, 11.7, 99, id="asymmetric"),
        pytest.param(-1e6, 3e5, 1023, id="large"),
        pytest.param(-2.5e-9, 7.5e-9, 15, id="small"),
    ],
)
def test_spacing_paths_agree(start: float, end: float, intervals: int) -> None:
    """Split and uniform spacing agree where no overflow occurs."""
    index = np.arange(intervals + 1, dtype=np.float64)
    assert not _scaled_product_overflows(end - start, intervals)
    np.testing.assert_allclose(
        _split_spacing(start, end, intervals, index),
        _uniform_spacing(start, end, intervals, index),
        rtol=1e-9,
        atol=1e-9 * (end - start),
    )


def test_linspace_overflow_path() -> None:
    """Spans too wide for the scaled integer product still give finite, evenly spaced points."""
    points = linspace(-1e308, 1e308, 5)
    assert np.all(np.isfinite(points))
    np.testing.assert_allclose(points, [-1e308, -5e307, 0.0, 5e307, 1e308], atol=1e293)


@pytest.mark.parametrize(
    ("start", "end", "count"),
    [
        pytest.param(-1e308, 1e308, 5, id="5 points"),
        pytest.param(-1e308, 1e308, 100, id="100 points"),
        pytest.param(-1e308, 1e308, 1025, id="1025 points"),
        pytest.param(-1.7e308, 1.7e308, 100, id="near float max"),
        pytest.param(-1e308, 1.5e308, 257, id="asymmetric"),
    ],
)
def test_linspace_unrepresentable_span(start: float, end: float, count: int) -> None:
    """Points stay finite, ordered and evenly spaced when end - start is not representable."""
    points = linspace(start, end, count)

    assert points.shape == (count,)
    assert np.all(np.isfinite(points))
    assert np.all(np.diff(points) >= 0)
    assert points[0] == start
    assert points[-1] == end
    step = end / (count - 1) - start / (count - 1)
    np.testing.assert_allclose(np.diff(points), step, rtol=1e-9)
