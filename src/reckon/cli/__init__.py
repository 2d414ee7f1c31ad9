"""
reckon CLI Package.

- expression.py: eval, prompt, and tokens commands
- utils.py: version, logging, and configuration helpers
"""

from __future__ import annotations

import typer

from reckon.cli.expression import eval_command, prompt_command, tokens_command
from reckon.cli.utils import version_callback

app = typer.Typer(
    help="""reckon – arithmetic expression calculator

Supports + - * /, parentheses, variables, and sin/cos/tan (degrees).
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """reckon CLI main callback for global options."""
    ctx.obj = {"log_level": log_level}


app.command(name="eval")(eval_command)
app.command(name="prompt")(prompt_command)
app.command(name="tokens")(tokens_command)


def main() -> None:
    """Entry point for the ``reckon`` console script."""
    app()


__all__ = ["app", "main"]
