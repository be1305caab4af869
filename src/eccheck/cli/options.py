# topmark:header:start
#
#   project      : ECCheck
#   file         : options.py
#   file_relpath : src/eccheck/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the ECCheck Click commands.

This module centralizes reusable options (verbosity, color, policy, file
selection) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from eccheck.cli.cli_types import EnumChoiceParam
from eccheck.cli.errors import EccheckUsageError
from eccheck.config.logging import TRACE_LEVEL
from eccheck.core.enum_mixins import KeyedStrEnum
from eccheck.core.eol import EndOfLine
from eccheck.core.indent import IndentStyle

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class OutputFormat(KeyedStrEnum):
    """Report output formats."""

    DEFAULT = ("default", "Human-readable report", ("text",))
    JSON = ("json", "Single JSON document")
    NDJSON = ("ndjson", "One JSON object per line", ("jsonl",))

    @property
    def is_machine(self) -> bool:
        """Return True for machine-readable formats."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


class ColorMode(KeyedStrEnum):
    """User intent for colorized terminal output."""

    AUTO = ("auto", "Color when writing to a terminal")
    ALWAYS = ("always", "Always color")
    NEVER = ("never", "Never color")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a logging-compatible integer.

    Raises:
        EccheckUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE, two DEBUG, one INFO.
        One or more -q flags set ERROR. Default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise EccheckUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Machine formats never use color. Otherwise ``--color`` wins, then the
    ``FORCE_COLOR`` and ``NO_COLOR`` environment variables, then TTY detection.

    Args:
        cli_mode: Explicit color mode from CLI options.
        output_format: Output format of the current command, if known.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled.
    """
    if output_format is not None and output_format.is_machine:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output other than violations and errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def policy_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options that override individual policy values.

    Each option defaults to ``None`` so only flags given on the command line
    override the configuration file.
    """
    f = click.option(
        "--indent-style",
        "indent_style",
        type=EnumChoiceParam(IndentStyle),
        default=None,
        help="Policy: indent with 'space' or 'tab'.",
    )(f)
    f = click.option(
        "--indent-size",
        "indent_size",
        type=click.IntRange(min=1),
        default=None,
        help="Policy: spaces per indent level (with --indent-style=space).",
    )(f)
    f = click.option(
        "--trim-trailing-whitespace/--no-trim-trailing-whitespace",
        "trim_trailing_whitespace",
        default=None,
        help="Policy: forbid trailing spaces and tabs.",
    )(f)
    f = click.option(
        "--insert-final-newline/--no-insert-final-newline",
        "insert_final_newline",
        default=None,
        help="Policy: require a terminator at the end of each file.",
    )(f)
    f = click.option(
        "--end-of-line",
        "end_of_line",
        type=EnumChoiceParam(EndOfLine),
        default=None,
        help="Policy: line terminator (lf, cr, crlf).",
    )(f)
    return f


def file_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add config file and include/exclude filter options."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read configuration from this file instead of searching for one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore configuration files; use command line options only.",
    )(f)
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these glob patterns (intersection).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these glob patterns (subtraction).",
    )(f)
    return f
