"""
ABOUTME: Resolves raw values for each schema field from the environment or defaults
ABOUTME: Applies field casts and stops at the first cast failure with a CastError
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from .casting import cast_value
from .exceptions import CastError
from .schema import FieldRule, Schema, normalize_schema


def resolve_raw(name: str, rule: FieldRule, environ: Mapping[str, str]) -> Any:
    """
    Pick the raw value for one field.

    A key present in the environment always wins, even when it is empty. A
    missing key falls back to the default unless the field is required, in
    which case the absence is left for value validation to report.
    """
    key = rule.source_key(name)
    if key in environ:
        return environ[key]
    if rule.required:
        return None
    return rule.default


def resolve_config(
    schema: Schema, environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Resolve and cast every field; raise CastError on the first failing cast."""
    if environ is None:
        environ = dict(os.environ)

    config = {}
    for name, rule in normalize_schema(schema).items():
        raw = resolve_raw(name, rule, environ)
        if raw is None:
            logging.debug(f"{name}: [{rule.source_key(name)}] not set, leaving unset")
            config[name] = None
            continue

        try:
            config[name] = cast_value(rule, raw)
        except Exception as e:
            raise CastError(name, e) from e
        if config[name] is None and rule.required:
            error = ValueError(f"cast of [{rule.source_key(name)}] returned no value")
            raise CastError(name, error)
        logging.debug(f"{name}: resolved from [{rule.source_key(name)}] as {rule.coercion.value}")
    return config
