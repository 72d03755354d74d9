"""
ABOUTME: Rich console rendering for loaded configs and loading errors
ABOUTME: Also sets up Rich logging for applications that load their config at startup
"""

import logging
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .exceptions import CastError, EnvSchemaError
from .schema import Schema, normalize_schema


def configure_logging(level: str = "INFO", console: Optional[Console] = None) -> None:
    """Route log output through a RichHandler at the given level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(), rich_tracebacks=True)],
    )


def print_config(
    config: Mapping[str, Any], schema: Schema, console: Optional[Console] = None
) -> None:
    """Print a table of each variable, the env var it came from, and its value."""
    console = console or Console()
    table = Table(title="Environment configuration")
    table.add_column("Variable", style="cyan")
    table.add_column("Env var", style="magenta")
    table.add_column("Value")

    for name, rule in normalize_schema(schema).items():
        value = config.get(name)
        shown = Text("unset", style="dim") if value is None else Text(repr(value))
        table.add_row(Text(name), Text(rule.source_key(name)), shown)

    console.print(table)


def print_config_error(error: EnvSchemaError, console: Optional[Console] = None) -> None:
    """Print a loading error as a panel with one line per violation."""
    console = console or Console()
    if isinstance(error, CastError):
        lines = [f"{error.field_name}: {error.cause}"]
    else:
        lines = getattr(error, "errors", None) or [str(error)]

    body = "\n".join(f"❌ {line}" for line in lines)
    console.print(Panel(Text(body), title=type(error).__name__, border_style="red"))
