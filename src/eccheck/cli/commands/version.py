# topmark:header:start
#
#   project      : ECCheck
#   file         : version.py
#   file_relpath : src/eccheck/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck `version` command.

Prints the ECCheck version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from eccheck.cli.cli_types import EnumChoiceParam
from eccheck.cli.console import get_console
from eccheck.cli.options import OutputFormat
from eccheck.constants import ECCHECK_VERSION


@click.command(
    name="version",
    help="Show the current version of ECCheck.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ECCheck.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": ECCHECK_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("ECCheck version:", bold=True, underline=True))
        console.print(f"    {console.styled(ECCHECK_VERSION, bold=True)}")
    else:
        console.print(console.styled(ECCHECK_VERSION, bold=True))
