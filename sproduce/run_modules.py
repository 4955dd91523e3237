"""
Run sproduce from a configuration.

Wraps configuration handling, surface generation and statistics into a single call for use from scripts and
notebooks.
"""

import logging
from argparse import Namespace
from pathlib import Path
from pprint import pformat

import numpy.typing as npt
import pandas as pd

from sproduce import log_sproduce_version
from sproduce.config import params_from_config, reconcile_config
from sproduce.logs.logs import LOGGER_NAME, set_log_level
from sproduce.random_provider import NumpyRandomProvider, RandomProvider
from sproduce.statistics import surface_statistics
from sproduce.surface import SurfaceGenerator
from sproduce.validation import DEFAULT_CONFIG_SCHEMA, validate_config

LOGGER = logging.getLogger(LOGGER_NAME)


def _log_setup(config: dict) -> None:
    """
    Log the current configuration.

    Parameters
    ----------
    config : dict
        Dictionary of configuration options.
    """
    surface = config["surface"]
    LOGGER.info(f"Points per side                     : {surface['points_per_side']}")
    LOGGER.info(f"Side length                         : {surface['side_length']}")
    LOGGER.info(f"RMS height                          : {surface['rms_height']}")
    LOGGER.info(f"Correlation length (x)              : {surface['correlation_length_x']}")
    if surface["correlation_length_y"] is None:
        LOGGER.info("Correlation length (y)              : not given, surface is isotropic")
    else:
        LOGGER.info(f"Correlation length (y)              : {surface['correlation_length_y']}")
    LOGGER.debug(f"Configuration after update         : \n{pformat(config, indent=4)}")  # noqa: T203


def _parse_configuration(config_file: str | Path | None = None, overrides: dict | Namespace | None = None) -> dict:
    """
    Load and validate the configuration and set the logging level.

    Parameters
    ----------
    config_file : str | Path | None
        Path to a YAML configuration file.
    overrides : dict | Namespace | None
        Values taking precedence over the configuration file.

    Returns
    -------
    dict
        Validated configuration.
    """
    config = reconcile_config(config_file=config_file, overrides=overrides)
    validate_config(config, schema=DEFAULT_CONFIG_SCHEMA, config_type="YAML configuration file")
    set_log_level(config["log_level"])
    _log_setup(config)
    return config


def produce_surface(
    config_file: str | Path | None = None,
    overrides: dict | Namespace | None = None,
    noise_source: RandomProvider | None = None,
) -> tuple[npt.NDArray, pd.DataFrame]:
    """
    Generate a surface described by a configuration and calculate its statistics.

    Parameters
    ----------
    config_file : str | Path | None
        Path to a YAML configuration file, the packaged defaults are used for anything it does not set.
    overrides : dict | Namespace | None
        Values taking precedence over the configuration file, e.g. ``{"surface": {"rms_height": 2.0}}``.
    noise_source : RandomProvider | None
        Source of standard-normal samples. If ``None`` a ``NumpyRandomProvider`` seeded with the configured 'seed' is
        used.

    Returns
    -------
    tuple[npt.NDArray, pd.DataFrame]
        The surface heights and a single row of statistics describing them.
    """
    log_sproduce_version()
    config = _parse_configuration(config_file=config_file, overrides=overrides)
    params = params_from_config(config)
    if noise_source is None:
        noise_source = NumpyRandomProvider(seed=config["seed"])
    LOGGER.info(f"Noise source                        : {noise_source!r}")
    surface = SurfaceGenerator().generate(params, noise_source)
    statistics = surface_statistics(surface, side_length=params.side_length)
    LOGGER.debug(f"Surface statistics :\n{statistics.to_string()}")
    return surface, statistics
