"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides environment stubs and Rich consoles for all tests
"""

import os
import re
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from envschema import FieldRule


@pytest.fixture
def empty_env():
    """Replace the process environment with an empty one."""
    with patch.dict(os.environ, {}, clear=True):
        yield os.environ


@pytest.fixture
def mock_env_vars():
    """Replace the process environment with a typical service setup."""
    env = {
        "APP_PORT": "8080",
        "APP_DEBUG": "yes",
        "APP_ENV": "staging",
        "DATABASE_URL": "postgres://db:5432/app",
        "FEATURE_IDS": "1,2,3",
    }
    with patch.dict(os.environ, env, clear=True):
        yield env


@pytest.fixture
def service_schema():
    """Provide a schema mixing dict and FieldRule rules."""
    return {
        "PORT": {"env": "APP_PORT", "type": int, "validator": lambda p: 0 < p < 65536},
        "DEBUG": FieldRule(env="APP_DEBUG", type=bool, default=False),
        "ENV": {"env": "APP_ENV", "enum": ["dev", "staging", "prod"]},
        "DATABASE_URL": FieldRule(required=True, match=re.compile(r"^postgres://")),
        "FEATURE_IDS": {"type": lambda s: [int(x) for x in s.split(",")]},
        "LOG_LEVEL": {"default": "INFO"},
        "SENTRY_DSN": {},
    }


@pytest.fixture
def console_output():
    """Provide a recording Rich console and the buffer it writes to."""
    buffer = StringIO()
    console = Console(file=buffer, width=120, force_terminal=False, color_system=None)
    return console, buffer
