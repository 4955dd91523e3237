"""sproduce, synthetic Gaussian rough surfaces."""

from importlib.metadata import PackageNotFoundError, version

from .logs.logs import setup_logger

LOGGER = setup_logger()

try:
    __version__ = version("sproduce")
except PackageNotFoundError:
    __version__ = "unknown"

# pylint: disable=wrong-import-position
from .linspace import Linspace, linspace  # noqa: E402
from .random_provider import NumpyRandomProvider, RandomProvider  # noqa: E402
from .surface import SurfaceGenerator, SurfaceParams, generate_surface  # noqa: E402
from .utils import InvalidArgumentError, NumericalError  # noqa: E402

__all__ = [
    "InvalidArgumentError",
    "Linspace",
    "NumericalError",
    "NumpyRandomProvider",
    "RandomProvider",
    "SurfaceGenerator",
    "SurfaceParams",
    "generate_surface",
    "linspace",
]


def log_sproduce_version() -> None:
    """Log the sproduce version to the system logger."""
    LOGGER.info(f"sproduce version : {__version__}")
