"""
Generate Gaussian random rough surfaces.

Surfaces are produced by the linear filtering method, white Gaussian noise is convolved (in the frequency domain) with
a Gaussian kernel whose width sets the correlation length and the result is rescaled to the requested rms height. The
autocorrelation of the resulting surface is ``exp(-(x^2 / clx^2 + y^2 / cly^2))``.

References
----------
Bergström, D., 2012. Rough surface generation & analysis.
Garcia, N. and Stoll, E., 1984. Monte Carlo calculation for electromagnetic-wave scattering from random rough
surfaces. Physical Review Letters, 52(20), p.1798.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from sproduce.linspace import Linspace
from sproduce.logs.logs import LOGGER_NAME
from sproduce.random_provider import RandomProvider, gaussian_field
from sproduce.utils import InvalidArgumentError, NumericalError, check_finite, is_integer, is_power_of_two

LOGGER = logging.getLogger(LOGGER_NAME)

# pylint: disable=too-many-arguments
# pylint: disable=too-many-positional-arguments


@dataclass(frozen=True)
class SurfaceParams:
    """
    Parameters of a square rough surface.

    Parameters
    ----------
    points_per_side : int
        Number of points along each side of the square, ideally a power of two.
    side_length : float
        Physical length of each side.
    rms_height : float
        Target root-mean-square (standard deviation) of the heights.
    correlation_length_x : float
        Correlation length along the x axis.
    correlation_length_y : float | None
        Correlation length along the y axis. When ``None`` the surface is isotropic and ``correlation_length_x`` is
        used in both directions, any value (even one equal to ``correlation_length_x``) makes the surface anisotropic.
    """

    points_per_side: int
    side_length: float
    rms_height: float
    correlation_length_x: float
    correlation_length_y: float | None = None

    def __post_init__(self) -> None:
        """
        Validate the parameters.

        Raises
        ------
        InvalidArgumentError
            If any parameter is out of range.
        """
        if not is_integer(self.points_per_side):
            raise InvalidArgumentError(f"points_per_side must be an integer, got {self.points_per_side!r}")
        if self.points_per_side < 2:
            raise InvalidArgumentError(f"points_per_side must be at least 2, got {self.points_per_side}")
        if check_finite(self.side_length, "side_length") <= 0:
            raise InvalidArgumentError(f"side_length must be positive, got {self.side_length}")
        if check_finite(self.rms_height, "rms_height") < 0:
            raise InvalidArgumentError(f"rms_height must not be negative, got {self.rms_height}")
        if check_finite(self.correlation_length_x, "correlation_length_x") <= 0:
            raise InvalidArgumentError(f"correlation_length_x must be positive, got {self.correlation_length_x}")
        if (
            self.correlation_length_y is not None
            and check_finite(self.correlation_length_y, "correlation_length_y") <= 0
        ):
            raise InvalidArgumentError(f"correlation_length_y must be positive, got {self.correlation_length_y}")

    @property
    def isotropic(self) -> bool:
        """
        Whether the surface is isotropic.

        Returns
        -------
        bool
            True when no y axis correlation length has been given.
        """
        return self.correlation_length_y is None


def _isotropic_filter(x: npt.NDArray, side_length: float, correlation_length: float) -> npt.NDArray:
    """
    Gaussian filter with the same correlation length along both axes.

    Parameters
    ----------
    x : npt.NDArray
        Coordinates along each axis.
    side_length : float
        Physical length of each side.
    correlation_length : float
        Correlation length.

    Returns
    -------
    npt.NDArray
        Spatial filter kernel of shape ``(len(x), len(x))``.
    """
    LOGGER.debug(f"Building isotropic filter : cl = {correlation_length}")
    xx, yy = np.meshgrid(x, x)
    kernel = np.exp(-(xx**2 + yy**2) / (correlation_length**2 / 2))
    return 2 / math.sqrt(math.pi) * side_length / len(x) / correlation_length * kernel


def _anisotropic_filter(
    x: npt.NDArray,
    y: npt.NDArray,
    side_length: float,
    correlation_length_x: float,
    correlation_length_y: float,
) -> npt.NDArray:
    """
    Gaussian filter with independent correlation lengths along each axis.

    Parameters
    ----------
    x : npt.NDArray
        Coordinates along the x axis (columns).
    y : npt.NDArray
        Coordinates along the y axis (rows).
    side_length : float
        Physical length of each side.
    correlation_length_x : float
        Correlation length along x.
    correlation_length_y : float
        Correlation length along y.

    Returns
    -------
    npt.NDArray
        Spatial filter kernel of shape ``(len(y), len(x))``.
    """
    LOGGER.debug(f"Building anisotropic filter : clx = {correlation_length_x}, cly = {correlation_length_y}")
    xx, yy = np.meshgrid(x, y)
    kernel = np.exp(-(xx**2 / (correlation_length_x**2 / 2) + yy**2 / (correlation_length_y**2 / 2)))
    scale = 2 / math.sqrt(math.pi) * side_length / len(x) / math.sqrt(correlation_length_x * correlation_length_y)
    return scale * kernel


class SurfaceGenerator:
    """
    Generate random rough surfaces with Gaussian height distribution and Gaussian autocorrelation.

    The generator holds no state between calls, each call to ``generate()`` depends only on its parameters and the
    samples drawn from the noise source it is given.
    """

    @staticmethod
    def _coordinate_axis(params: SurfaceParams) -> npt.NDArray:
        """
        Sample positions along one side of the surface, centred on zero.

        Parameters
        ----------
        params : SurfaceParams
            Surface parameters.

        Returns
        -------
        npt.NDArray
            ``points_per_side`` coordinates over ``[-side_length / 2, side_length / 2]``.
        """
        half = params.side_length / 2
        return Linspace(-half, half, params.points_per_side).generate()

    def _filter(self, params: SurfaceParams) -> npt.NDArray:
        """
        Build the spatial filter kernel for the requested surface.

        The branch taken depends only on whether ``correlation_length_y`` was given.

        Parameters
        ----------
        params : SurfaceParams
            Surface parameters.

        Returns
        -------
        npt.NDArray
            Spatial filter kernel.
        """
        if params.isotropic:
            x = self._coordinate_axis(params)
            return _isotropic_filter(x, params.side_length, params.correlation_length_x)
        x = self._coordinate_axis(params)
        y = self._coordinate_axis(params)
        return _anisotropic_filter(
            x, y, params.side_length, params.correlation_length_x, params.correlation_length_y
        )

    def generate(self, params: SurfaceParams, noise_source: RandomProvider) -> npt.NDArray:
        """
        Generate a surface.

        Parameters
        ----------
        params : SurfaceParams
            Surface parameters.
        noise_source : RandomProvider
            Source of standard-normal samples, callers seed it for reproducible surfaces.

        Returns
        -------
        npt.NDArray
            Square array of ``points_per_side x points_per_side`` heights with zero mean and standard deviation equal
            to ``rms_height``.

        Raises
        ------
        InvalidArgumentError
            If ``params`` is not a ``SurfaceParams`` or ``noise_source`` has no ``next_gaussian()`` method.
        NumericalError
            If a Fourier transform fails, the filtered surface is not finite or it has no variance to rescale.
        """
        if not isinstance(params, SurfaceParams):
            raise InvalidArgumentError(f"Expected SurfaceParams, got {type(params).__name__}")
        if not isinstance(noise_source, RandomProvider):
            raise InvalidArgumentError(
                f"Expected a RandomProvider with a next_gaussian() method, got {type(noise_source).__name__}"
            )
        n = params.points_per_side
        if not is_power_of_two(n):
            LOGGER.warning(f"points_per_side ({n}) is not a power of two, Fourier transforms will be slower.")
        LOGGER.debug(f"Generating {'isotropic' if params.isotropic else 'anisotropic'} surface : {params}")

        kernel = self._filter(params)
        noise = gaussian_field(noise_source, (n, n))
        try:
            spectrum = np.fft.fft2(noise) * np.fft.fft2(kernel)
        except (ValueError, TypeError) as exc:
            raise NumericalError(f"Forward transform failed for a {n}x{n} surface : {exc}") from exc
        try:
            heights = np.real(np.fft.ifft2(spectrum))
        except (ValueError, TypeError) as exc:
            raise NumericalError(f"Inverse transform failed for a {n}x{n} surface : {exc}") from exc
        if not np.all(np.isfinite(heights)):
            raise NumericalError("Inverse transform produced non-finite heights.")

        heights = heights - heights.mean()
        std = heights.std()
        if std == 0:
            raise NumericalError("Cannot rescale surface, filtered heights have zero variance.")
        surface = np.ascontiguousarray(heights / std * params.rms_height, dtype=np.float64)
        LOGGER.info(
            f"Generated {n}x{n} surface : mean = {surface.mean():.3e}, rms = {surface.std():.6g} "
            f"(target {params.rms_height})"
        )
        return surface


def generate_surface(params: SurfaceParams, noise_source: RandomProvider) -> npt.NDArray:
    """
    Generate a surface with a new ``SurfaceGenerator``.

    Parameters
    ----------
    params : SurfaceParams
        Surface parameters.
    noise_source : RandomProvider
        Source of standard-normal samples.

    Returns
    -------
    npt.NDArray
        Surface heights.
    """
    return SurfaceGenerator().generate(params, noise_source)
