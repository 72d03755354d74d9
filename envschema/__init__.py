"""
ABOUTME: Declarative environment variable configuration loader
ABOUTME: Casts and validates environment variables against a flat schema of field rules
"""

from .casting import to_bool
from .config import get_config
from .exceptions import (
    CastError,
    ConfigValidationError,
    EnvSchemaError,
    SchemaValidationError,
)
from .report import configure_logging, print_config, print_config_error
from .resolver import resolve_config
from .schema import CoercionKind, FieldRule, validate_schema
from .validator import validate_config

__version__ = "0.1.0"
__all__ = [
    "get_config",
    "FieldRule",
    "CoercionKind",
    "to_bool",
    "validate_schema",
    "resolve_config",
    "validate_config",
    "EnvSchemaError",
    "SchemaValidationError",
    "ConfigValidationError",
    "CastError",
    "configure_logging",
    "print_config",
    "print_config_error",
]
