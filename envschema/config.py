"""
ABOUTME: Entry point for loading a typed config from environment variables
ABOUTME: Runs schema validation, value resolution, and value validation in order
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .resolver import resolve_config
from .schema import Schema, validate_schema
from .validator import validate_config


def get_config(
    schema: Schema, environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Load, cast, and validate every variable described by ``schema``.

    Parameters:
        schema: Mapping of variable name to a FieldRule or a dict of rule attributes.
        environ: Environment to read from. Defaults to a snapshot of ``os.environ``.

    Returns:
        dict: A fresh mapping of variable name to resolved value, ``None`` for unset optional variables.

    Raises:
        SchemaValidationError: The schema is malformed. Raised before the environment is read.
        CastError: A cast function failed. Raised on the first failure.
        ConfigValidationError: Resolved values break required, enum, validator, or match rules.
    """
    validate_schema(schema)
    config = resolve_config(schema, environ)
    validate_config(config, schema)
    logging.debug(f"Loaded {len(config)} environment variables")
    return config
