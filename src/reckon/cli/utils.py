"""
reckon CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from reckon._version import get_version
from reckon.core.environment import resolve_log_level
from reckon.core.errors import ConfigError
from reckon.core.manifest import ReckonManifest, find_manifest, load_manifest

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

console = Console()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"reckon {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Configure root logging once for the process (stderr)."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def load_config(config: Path | None, cli_log_level: str | None = None) -> ReckonManifest:
    """Load reckon.toml and set up logging from it.

    ``config`` wins over ``./reckon.toml``; with neither, defaults apply.
    An unusable file prints ``Error: <message>`` and exits 1.
    """
    path = config or find_manifest()
    if config is not None and not config.is_file():
        raise typer.BadParameter(f"Config file not found: {config}", param_hint="--config")

    try:
        manifest = load_manifest(path) if path else ReckonManifest()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)
    configure_logging(resolve_log_level(cli_log_level, manifest.logging.level))
    if path:
        logger.debug("Loaded configuration from %s", path)
    return manifest


def parse_var_options(values: list[str] | None) -> dict[str, float]:
    """Parse repeated ``--var NAME=VALUE`` options."""
    bindings: dict[str, float] = {}
    for raw in values or []:
        name, sep, value = raw.partition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(f"Expected NAME=VALUE, got {raw!r}", param_hint="--var")
        if not name.isalpha():
            raise typer.BadParameter(
                f"Variable name must contain letters only: {name!r}", param_hint="--var"
            )
        try:
            bindings[name] = float(value)
        except ValueError:
            raise typer.BadParameter(
                f"Value for {name} is not a number: {value!r}", param_hint="--var"
            ) from None
    return bindings
