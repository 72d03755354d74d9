"""
ABOUTME: Type coercion helpers applied to raw environment values
ABOUTME: Implements the boolean coercion and per-rule cast dispatch
"""

from typing import Any, Sequence

from .schema import CoercionKind, FieldRule

TRUE_VALUES = (True, "true", 1, "1", "yes")
FALSE_VALUES = (False, "false", 0, "0", "no")


def is_one_of(value: Any, candidates: Sequence[Any]) -> bool:
    """Membership test that keeps True/1 and False/0 apart."""
    # bool is an int subclass, so a bool only equals another bool
    return any(
        isinstance(value, bool) == isinstance(c, bool) and value == c
        for c in candidates
    )


def to_bool(value: Any) -> bool:
    """Coerce an environment string (or native bool/int) to a bool."""
    if is_one_of(value, TRUE_VALUES):
        return True
    if is_one_of(value, FALSE_VALUES):
        return False
    raise ValueError(f"Invalid boolean value '{value}'")


def as_text(value: Any) -> str:
    """String form used for regex checks; booleans render as true/false."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def cast_value(rule: FieldRule, raw: Any) -> Any:
    """Apply the rule's coercion to a raw value that is not absent."""
    if rule.coercion is CoercionKind.BOOLEAN:
        return to_bool(raw)
    if rule.coercion is CoercionKind.CUSTOM:
        return rule.type(raw)
    return raw
