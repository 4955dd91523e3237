"""Functions for reading configuration files."""

import logging
from pathlib import Path

from ruamel.yaml import YAML, YAMLError

from sproduce.logs.logs import LOGGER_NAME

LOGGER = logging.getLogger(LOGGER_NAME)


def read_yaml(filename: str | Path) -> dict:
    """
    Read a YAML file.

    Parameters
    ----------
    filename : Union[str, Path]
        YAML file to read.

    Returns
    -------
    Dict
        Dictionary of the file, empty if the file could not be parsed.
    """
    with Path(filename).open(encoding="utf-8") as f:
        try:
            yaml_file = YAML(typ="safe")
            content = yaml_file.load(f)
        except YAMLError as exception:
            LOGGER.error(exception)
            return {}
    return {} if content is None else content
