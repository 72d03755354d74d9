"""
ABOUTME: Custom exception classes for environment schema loading
ABOUTME: Provides distinct error types for schema, casting, and value validation failures
"""

from typing import List


def _bullet_list(errors: List[str]) -> str:
    return "\n".join(f"- {error}" for error in errors)


class EnvSchemaError(Exception):
    """Base class for every error raised while loading a config."""

    pass


class SchemaValidationError(EnvSchemaError):
    """The schema itself is malformed."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(_bullet_list(self.errors))


class ConfigValidationError(EnvSchemaError):
    """One or more resolved values violate their field rules."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(_bullet_list(self.errors))


class CastError(EnvSchemaError):
    """A field's cast function failed on its raw value."""

    def __init__(self, field_name: str, cause: Exception):
        self.field_name = field_name
        self.cause = cause
        super().__init__(f"{field_name}: {cause}")
