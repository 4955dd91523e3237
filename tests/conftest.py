"""Fixtures for testing."""

from pathlib import Path

import numpy as np
import pytest

from sproduce.config import load_default_config
from sproduce.random_provider import NumpyRandomProvider
from sproduce.surface import SurfaceGenerator, SurfaceParams

# pylint: disable=redefined-outer-name
BASE_DIR = Path.cwd()
RESOURCES = BASE_DIR / "tests" / "resources"

SEED = 1000

# ruff: noqa: D401


class ConstantRandomProvider:
    """Noise source that always returns the same value."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.calls = 0

    def next_gaussian(self) -> float:
        """Return the constant."""
        self.calls += 1
        return self.value


class SequenceRandomProvider:
    """Noise source replaying a recorded sequence of samples."""

    def __init__(self, samples: list[float]) -> None:
        self.samples = iter(samples)

    def next_gaussian(self) -> float:
        """Return the next recorded sample."""
        return next(self.samples)


@pytest.fixture()
def default_config() -> dict:
    """Default configuration."""
    return load_default_config()


@pytest.fixture()
def noise_source() -> NumpyRandomProvider:
    """Seeded noise source."""
    return NumpyRandomProvider(seed=SEED)


@pytest.fixture()
def zero_noise_source() -> ConstantRandomProvider:
    """Noise source that only ever returns zero."""
    return ConstantRandomProvider(0.0)


@pytest.fixture()
def surface_generator() -> SurfaceGenerator:
    """A surface generator."""
    return SurfaceGenerator()


@pytest.fixture()
def isotropic_params() -> SurfaceParams:
    """Parameters for a small isotropic surface."""
    return SurfaceParams(points_per_side=4, side_length=10.0, rms_height=2.0, correlation_length_x=3.0)


@pytest.fixture()
def anisotropic_params() -> SurfaceParams:
    """Parameters for an anisotropic surface elongated along x."""
    return SurfaceParams(
        points_per_side=128, side_length=128.0, rms_height=1.5, correlation_length_x=16.0, correlation_length_y=4.0
    )


@pytest.fixture()
def isotropic_surface(surface_generator: SurfaceGenerator, noise_source: NumpyRandomProvider):
    """A 128x128 isotropic surface with correlation length 8."""
    params = SurfaceParams(points_per_side=128, side_length=128.0, rms_height=0.5, correlation_length_x=8.0)
    return surface_generator.generate(params, noise_source)


@pytest.fixture()
def infinite_noise_source() -> ConstantRandomProvider:
    """Noise source that only ever returns infinity."""
    return ConstantRandomProvider(float("inf"))


@pytest.fixture()
def unit_noise_source() -> ConstantRandomProvider:
    """Noise source that only ever returns one."""
    return ConstantRandomProvider(1.0)


@pytest.fixture()
def recorded_noise_source():
    """Factory for noise sources replaying the first ``size`` samples of the seeded generator."""

    def _recorded(size: int) -> SequenceRandomProvider:
        return SequenceRandomProvider(list(np.random.default_rng(SEED).standard_normal(size)))

    return _recorded
