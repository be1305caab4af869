# topmark:header:start
#
#   project      : ECCheck
#   file         : main.py
#   file_relpath : src/eccheck/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import Any

import click

from eccheck.cli.commands.check import check_command
from eccheck.cli.commands.version import version_command
from eccheck.cli.console import ClickConsole
from eccheck.cli.exit_codes import ExitCode
from eccheck.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from eccheck.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


class EccheckGroup(click.Group):
    """Click group that reports option/argument parsing errors as USAGE_ERROR.

    Click exits with status 2 on usage errors, which ECCheck reserves for
    "violations found".
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Parse group arguments, remapping usage errors."""
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.USAGE_ERROR
            raise

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the subcommand, remapping its usage errors."""
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.USAGE_ERROR
            raise


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Raises on -v together with -q.
    verbose_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose - quiet

    # Internal logging: env wins; -vv and above also enable it.
    log_level: int | None = resolve_env_log_level()
    if log_level is None and verbose >= 2:
        log_level = verbose_level
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=EccheckGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ECCheck: check files against indentation, whitespace and newline rules.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ECCheck CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'eccheck check [PATHS...]' to check files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
