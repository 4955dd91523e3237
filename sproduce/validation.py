"""Validation of configuration."""

import logging

from schema import And, Or, Schema, SchemaError

from sproduce.logs.logs import LOGGER_NAME

LOGGER = logging.getLogger(LOGGER_NAME)

# pylint: disable=line-too-long


def validate_config(config: dict, schema: Schema, config_type: str) -> None:
    """
    Validate configuration.

    Parameters
    ----------
    config : dict
        Config dictionary, typically from ``reconcile_config()``.
    schema : Schema
        A schema against which the configuration is to be compared.
    config_type : str
        Description of of configuration being validated.
    """
    try:
        schema.validate(config)
        LOGGER.info(f"The {config_type} is valid.")
    except SchemaError as schema_error:
        raise SchemaError(
            f"There is an error in your {config_type} configuration. "
            "Please refer to the first error message above for details"
        ) from schema_error


DEFAULT_CONFIG_SCHEMA = Schema(
    {
        "log_level": Or(
            "debug",
            "info",
            "warning",
            "error",
            error="Invalid value in config for 'log_level', valid values are 'info' (default), 'debug', 'error' or 'warning",
        ),
        "seed": Or(
            None,
            And(int, lambda n: n >= 0),
            error="Invalid value in config for 'seed', should be null or a non-negative integer",
        ),
        "surface": {
            "points_per_side": And(
                int,
                lambda n: n >= 2,
                error="Invalid value in config for 'surface.points_per_side', should be an integer of at least 2",
            ),
            "side_length": And(
                Or(int, float),
                lambda n: n > 0,
                error="Invalid value in config for 'surface.side_length', should be a positive number",
            ),
            "rms_height": And(
                Or(int, float),
                lambda n: n >= 0,
                error="Invalid value in config for 'surface.rms_height', should be a non-negative number",
            ),
            "correlation_length_x": And(
                Or(int, float),
                lambda n: n > 0,
                error="Invalid value in config for 'surface.correlation_length_x', should be a positive number",
            ),
            "correlation_length_y": Or(
                None,
                And(Or(int, float), lambda n: n > 0),
                error="Invalid value in config for 'surface.correlation_length_y', should be null (isotropic) or a positive number",
            ),
        },
    }
)
