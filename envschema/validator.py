"""
ABOUTME: Value-level validation of a resolved config against its schema
ABOUTME: Collects required, enum, custom validator, and regex violations across all fields
"""

from typing import Any, List, Mapping

from .casting import as_text, is_one_of
from .exceptions import ConfigValidationError
from .schema import FieldRule, Schema, normalize_schema


def _check_value(name: str, rule: FieldRule, value: Any) -> List[str]:
    errors = []
    if rule.enum is not None and not is_one_of(value, rule.enum):
        allowed = ", ".join(str(v) for v in rule.enum)
        errors.append(f"{name} invalid value '{value}', doesn't match enum [{allowed}]")
    if rule.validator is not None and not rule.validator(value):
        errors.append(f"{name} invalid value '{value}', custom validator fails")
    if rule.match is not None and not rule.match.search(as_text(value)):
        errors.append(
            f"{name} invalid value '{value}', doesn't match regex [{rule.match.pattern}]"
        )
    return errors


def check_config(config: Mapping[str, Any], schema: Schema) -> List[str]:
    """Collect every value violation without raising."""
    errors = []
    for name, rule in normalize_schema(schema).items():
        value = config.get(name)
        if value is None:
            if rule.required:
                errors.append(
                    f"{name} is required but env var [{rule.source_key(name)}] is not set"
                )
            continue
        errors.extend(_check_value(name, rule, value))
    return errors


def validate_config(config: Mapping[str, Any], schema: Schema) -> None:
    """Raise ConfigValidationError listing every rule the resolved values break."""
    errors = check_config(config, schema)
    if errors:
        raise ConfigValidationError(errors)
