"""Functions and tools for working with configuration files."""

import logging
from argparse import Namespace
from collections.abc import MutableMapping
from pathlib import Path
from pkgutil import get_data
from typing import TypeVar

import yaml

from sproduce.io import read_yaml
from sproduce.logs.logs import LOGGER_NAME
from sproduce.surface import SurfaceParams

MutableMappingType = TypeVar("MutableMappingType", bound="MutableMapping")

LOGGER = logging.getLogger(LOGGER_NAME)


def load_default_config() -> dict:
    """
    Load the default configuration distributed with the package.

    Returns
    -------
    dict
        The default configuration dictionary.
    """
    return yaml.full_load(get_data(package="sproduce", resource="default_config.yaml"))


def reconcile_config(config_file: str | Path | None = None, overrides: dict | Namespace | None = None) -> dict:
    """
    Reconcile a configuration file and overrides with the default configuration.

    If a (partial) configuration file is given the defaults are over-ridden by its values (internally the default
    dictionary is updated with these values). Overrides then take precedence over both the defaults and those in the
    configuration file. The result is not validated here.

    Parameters
    ----------
    config_file : str | Path | None
        Path to a YAML configuration file.
    overrides : dict | Namespace | None
        Values that take precedence over everything else, ``None`` values are ignored.

    Returns
    -------
    dict
        The configuration dictionary.
    """
    config = load_default_config()
    if config_file is not None:
        # Prioritise the loaded config, any missing values remain as defaults
        config = merge_mappings(map1=config, map2=read_yaml(config_file))
        LOGGER.info(f"Configuration file loaded from : {config_file}")
    if overrides is not None:
        config = update_config(config, overrides)
    return config


def merge_mappings(map1: MutableMappingType, map2: MutableMappingType) -> MutableMappingType:
    """
    Merge two mappings (dictionaries), with priority given to the second mapping.

    Parameters
    ----------
    map1 : MutableMapping
        First mapping to merge, with secondary priority.
    map2 : MutableMapping
        Second mapping to merge, with primary priority.

    Returns
    -------
    dict
        Merged dictionary.
    """
    for key, value in map2.items():
        # If the value is another mapping, then recurse
        if isinstance(value, MutableMapping):
            map1[key] = merge_mappings(map1.get(key, {}), value)
        else:
            map1[key] = value
    return map1


def update_config(config: dict, overrides: dict | Namespace) -> dict:
    """
    Update the configuration with any overrides.

    Only keys already present in the configuration are updated and ``None`` values are skipped. Nested dictionaries
    update the section of the same name.

    Parameters
    ----------
    config : dict
        Dictionary of configuration.
    overrides : dict | Namespace
        New values.

    Returns
    -------
    dict
        Dictionary updated with the overrides.
    """
    overrides = vars(overrides) if isinstance(overrides, Namespace) else overrides

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            update_config(config[key], value)
        elif key in config and value is not None:
            original_value = config[key]
            config[key] = value
            LOGGER.debug(f"Updated config config[{key}] : {original_value} > {value} ")
    return config


def params_from_config(config: dict) -> SurfaceParams:
    """
    Build surface parameters from the 'surface' section of a configuration.

    Parameters
    ----------
    config : dict
        Validated configuration dictionary.

    Returns
    -------
    SurfaceParams
        Parameters for ``SurfaceGenerator.generate()``.
    """
    surface = config["surface"]
    return SurfaceParams(
        points_per_side=surface["points_per_side"],
        side_length=surface["side_length"],
        rms_height=surface["rms_height"],
        correlation_length_x=surface["correlation_length_x"],
        correlation_length_y=surface["correlation_length_y"],
    )
