"""Sources of standard-normal noise for surface generation."""

import logging
from typing import Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt

from sproduce.logs.logs import LOGGER_NAME

LOGGER = logging.getLogger(LOGGER_NAME)


@runtime_checkable
class RandomProvider(Protocol):
    """Anything that can be asked repeatedly for independent standard-normal samples."""

    def next_gaussian(self) -> float:
        """Return the next standard-normal sample."""


class NumpyRandomProvider:
    """
    Standard-normal samples from a Numpy ``Generator``.

    Parameters
    ----------
    seed : int | None
        Seed for ``numpy.random.default_rng()``. Ignored if ``rng`` is given.
    rng : np.random.Generator | None
        An existing generator to draw from.
    """

    def __init__(self, seed: int | None = None, rng: np.random.Generator | None = None) -> None:
        """
        Initialise the class.

        Parameters
        ----------
        seed : int | None
            Seed for ``numpy.random.default_rng()``. Ignored if ``rng`` is given.
        rng : np.random.Generator | None
            An existing generator to draw from.
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed) if rng is None else rng

    def next_gaussian(self) -> float:
        """
        Draw one sample.

        Returns
        -------
        float
            Sample from the standard normal distribution.
        """
        return float(self.rng.standard_normal())

    def __repr__(self) -> str:
        """
        Representation of the provider.

        Returns
        -------
        str
            Class name and seed.
        """
        return f"{self.__class__.__name__}(seed={self.seed})"


def gaussian_field(noise_source: RandomProvider, shape: tuple[int, ...]) -> npt.NDArray:
    """
    Fill an array with samples drawn one at a time from a noise source.

    Samples are placed in row-major order so a given sequence of draws always produces the same array.

    Parameters
    ----------
    noise_source : RandomProvider
        Source of standard-normal samples.
    shape : tuple[int, ...]
        Shape of the array to fill.

    Returns
    -------
    npt.NDArray
        Float64 array of the requested shape.
    """
    size = int(np.prod(shape))
    LOGGER.debug(f"Drawing {size} samples from {noise_source!r}")
    samples = np.fromiter((noise_source.next_gaussian() for _ in range(size)), dtype=np.float64, count=size)
    return samples.reshape(shape)
