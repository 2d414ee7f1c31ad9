"""
Expression CLI commands.

- eval: evaluate an expression given on the command line
- prompt: read one expression from the console and evaluate it
- tokens: show how an expression is tokenized
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from reckon.core.errors import ReckonError
from reckon.core.expression_lang import (
    MappingResolver,
    PromptingResolver,
    VariableResolver,
    calculate,
    tokenize,
)
from reckon.core.manifest import ReckonManifest

from .utils import console, load_config, parse_var_options

logger = logging.getLogger(__name__)


def _cli_log_level(ctx: typer.Context) -> str | None:
    return (ctx.obj or {}).get("log_level")


def _build_resolver(
    manifest: ReckonManifest, bindings: dict[str, float], prompt: bool
) -> VariableResolver:
    preset = {**manifest.variables, **bindings}
    if prompt and manifest.prompt.enabled:
        return PromptingResolver(console=console, preset=preset)
    return MappingResolver(preset)


def _report(source: str, resolver: VariableResolver) -> None:
    """Evaluate and print ``Result:`` or ``Error:``; exit 1 on error."""
    try:
        result = calculate(source, resolver)
    except ReckonError as e:
        logger.debug("Evaluation of %r failed: %s", source, e.message)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Result: {result}")


def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '2 + 3 * 4'"),
    var: list[str] | None = typer.Option(
        None, "--var", "-V", help="Bind a variable (NAME=VALUE); repeatable"
    ),
    prompt: bool = typer.Option(
        True, "--prompt/--no-prompt", help="Ask for undefined variables on the console"
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to reckon.toml"),
) -> None:
    """Evaluate an arithmetic expression."""
    manifest = load_config(config, _cli_log_level(ctx))
    resolver = _build_resolver(manifest, parse_var_options(var), prompt)
    _report(expression, resolver)


def prompt_command(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to reckon.toml"),
) -> None:
    """Read one expression from the console and evaluate it."""
    manifest = load_config(config, _cli_log_level(ctx))
    try:
        source = console.input("Enter expression: ")
    except EOFError:
        console.print("[red]Error:[/red] no expression entered")
        raise typer.Exit(1)
    resolver = _build_resolver(manifest, {}, prompt=True)
    _report(source, resolver)


def tokens_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens an expression is split into."""
    load_config(None, _cli_log_level(ctx))
    try:
        tokens = tokenize(expression)
    except ReckonError as e:
        e.attach_source(expression)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("Kind", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("Pos", justify="right")
    for tok in tokens:
        table.add_row(str(tok.kind), escape(tok.text), str(tok.pos))
    console.print(table)
