"""
ABOUTME: Field rule definitions and schema consistency checks
ABOUTME: Normalizes caller schemas into FieldRule objects and reports malformed rules
"""

import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .exceptions import SchemaValidationError


class CoercionKind(Enum):
    """How a field's raw value is turned into its typed value."""

    IDENTITY = "identity"
    BOOLEAN = "boolean"
    CUSTOM = "custom"


def _coercion_for(cast: Any) -> CoercionKind:
    if cast is None:
        return CoercionKind.IDENTITY
    if cast is bool:
        return CoercionKind.BOOLEAN
    return CoercionKind.CUSTOM


@dataclass(frozen=True)
class FieldRule:
    """
    Declarative rule for a single environment variable.

    ``type`` is the cast applied to the raw string. Passing ``bool`` selects the
    dedicated boolean coercion instead of calling ``bool()``, which would treat
    every non-empty string as true.

    ``None`` marks an unset value, so a cast that returns ``None`` for a
    required variable fails with a CastError. ``match`` is tested against the
    cast value's text, with booleans written as ``true``/``false``.
    """

    env: Optional[str] = None
    default: Any = None
    required: bool = False
    type: Optional[Callable[[Any], Any]] = None
    enum: Optional[Sequence[Any]] = None
    match: Optional["re.Pattern[str]"] = None
    validator: Optional[Callable[[Any], bool]] = None
    coercion: CoercionKind = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "coercion", _coercion_for(self.type))

    def source_key(self, name: str) -> str:
        """Return the environment key this rule reads from."""
        return self.env or name


RULE_ATTRIBUTES = tuple(f.name for f in fields(FieldRule) if f.init)

Schema = Mapping[str, Any]


def as_field_rule(spec: Any) -> FieldRule:
    """Build a FieldRule from a rule object or a plain mapping of rule attributes."""
    if isinstance(spec, FieldRule):
        return spec
    return FieldRule(**{k: v for k, v in spec.items() if k in RULE_ATTRIBUTES})


def normalize_schema(schema: Schema) -> Dict[str, FieldRule]:
    """Return a new name -> FieldRule dict; the caller's schema is left untouched."""
    return {name: as_field_rule(spec) for name, spec in schema.items()}


def _check_rule(name: str, spec: Any) -> List[str]:
    if not isinstance(spec, (FieldRule, Mapping)):
        return [f"{name} rule must be a FieldRule or a mapping"]

    errors = []
    if isinstance(spec, Mapping):
        for key in spec:
            if key not in RULE_ATTRIBUTES:
                errors.append(f"{name} has unknown rule attribute '{key}'")

    rule = as_field_rule(spec)
    if rule.required and rule.default is not None:
        errors.append(f"{name} cannot be required and have a default")
    if rule.type is not None and not callable(rule.type):
        errors.append(f"{name} type must be a function")
    if rule.enum is not None and not isinstance(rule.enum, (list, tuple)):
        errors.append(f"{name} enum must be a list")
    if rule.match is not None and not isinstance(rule.match, re.Pattern):
        errors.append(f"{name} match must be a regular expression")
    elif rule.match is not None and not isinstance(rule.match.pattern, str):
        errors.append(f"{name} match must be a string pattern, not bytes")
    if rule.validator is not None and not callable(rule.validator):
        errors.append(f"{name} validator must be a function")
    return errors


def check_schema(schema: Any) -> List[str]:
    """Collect every schema violation without raising."""
    if not isinstance(schema, Mapping):
        return ["schema must be a mapping of variable names to field rules"]

    errors = []
    for name, spec in schema.items():
        errors.extend(_check_rule(name, spec))
    return errors


def validate_schema(schema: Any) -> None:
    """Raise SchemaValidationError listing every malformed rule in the schema."""
    errors = check_schema(schema)
    if errors:
        raise SchemaValidationError(errors)
