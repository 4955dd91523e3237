"""Statistics describing a rough surface, for example rms height, higher moments and correlation lengths."""

import logging

import numpy as np
import numpy.typing as npt
import pandas as pd
from scipy import stats

from sproduce.logs.logs import LOGGER_NAME
from sproduce.utils import InvalidArgumentError

LOGGER = logging.getLogger(LOGGER_NAME)

AXES = {"x": 1, "y": 0}


def roughness_rms(surface: npt.NDArray) -> float:
    """
    Calculate the root-mean-square roughness of a height map.

    Parameters
    ----------
    surface : npt.NDArray
        2-D numpy array of heights.

    Returns
    -------
    float
        The RMS roughness of the input array.
    """
    return np.sqrt(np.mean(np.square(surface)))


def autocorrelation(surface: npt.NDArray) -> npt.NDArray:
    """
    Normalised circular autocorrelation of a surface.

    Computed with the Wiener-Khinchin theorem, the inverse transform of the power spectrum of the mean-subtracted
    heights. Zero lag is at index ``[0, 0]`` where the value is one.

    Parameters
    ----------
    surface : npt.NDArray
        2-D numpy array of heights.

    Returns
    -------
    npt.NDArray
        Autocorrelation, same shape as ``surface``. All zeros for a flat surface.
    """
    heights = surface - np.mean(surface)
    power = np.abs(np.fft.fft2(heights)) ** 2
    acf = np.real(np.fft.ifft2(power))
    if acf[0, 0] == 0:
        return np.zeros_like(acf)
    return acf / acf[0, 0]


def correlation_length(surface: npt.NDArray, side_length: float, axis: str = "x") -> float:
    """
    Estimate the correlation length along one axis.

    The correlation length is the lag at which the autocorrelation first drops below ``1/e``, interpolated linearly
    between grid points. Only lags up to half the side are considered since the autocorrelation is periodic.

    Parameters
    ----------
    surface : npt.NDArray
        2-D numpy array of heights.
    side_length : float
        Physical length of each side.
    axis : str
        'x' (along columns) or 'y' (along rows).

    Returns
    -------
    float
        Estimated correlation length in the units of ``side_length``, NaN if it could not be determined.
    """
    if axis not in AXES:
        raise InvalidArgumentError(f"Invalid axis '{axis}', valid values are 'x' or 'y'.")
    acf = autocorrelation(surface)
    profile = acf[0, :] if AXES[axis] == 1 else acf[:, 0]
    profile = profile[: len(profile) // 2 + 1]
    spacing = side_length / (surface.shape[AXES[axis]] - 1)
    threshold = np.exp(-1)
    below = np.nonzero(profile < threshold)[0]
    if profile[0] == 0 or len(below) == 0:
        LOGGER.warning(f"Autocorrelation along {axis} does not fall below 1/e, correlation length undetermined.")
        return np.nan
    lag = below[0]
    # linear interpolation between the last point above the threshold and the first below
    fraction = (profile[lag - 1] - threshold) / (profile[lag - 1] - profile[lag])
    return float((lag - 1 + fraction) * spacing)


def surface_statistics(surface: npt.NDArray, side_length: float, name: str = "surface") -> pd.DataFrame:
    """
    Calculate statistics for a whole surface.

    Parameters
    ----------
    surface : npt.NDArray
        2-D numpy array of heights.
    side_length : float
        Physical length of each side.
    name : str
        Name used as the index of the returned row.

    Returns
    -------
    pd.DataFrame
        Single row DataFrame indexed by ``surface``.
    """
    surface_stats = {
        "surface": name,
        "points_per_side": surface.shape[0],
        "side_length": side_length,
        "area": side_length**2,
        "mean_height": float(np.mean(surface)),
        "rms_height": float(np.std(surface)),
        "rms_roughness": float(roughness_rms(surface)),
        "skewness": None,
        "kurtosis": None,
        "correlation_length_x": correlation_length(surface, side_length, axis="x"),
        "correlation_length_y": correlation_length(surface, side_length, axis="y"),
    }
    # Higher moments are undefined for a flat surface
    if surface_stats["rms_height"] > 0:
        surface_stats["skewness"] = float(stats.skew(surface, axis=None))
        surface_stats["kurtosis"] = float(stats.kurtosis(surface, axis=None, fisher=False))
    else:
        surface_stats["skewness"] = np.nan
        surface_stats["kurtosis"] = np.nan

    surface_stats_df = pd.DataFrame([surface_stats])
    surface_stats_df.set_index("surface", inplace=True)
    return surface_stats_df
