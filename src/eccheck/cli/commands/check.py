# topmark:header:start
#
#   project      : ECCheck
#   file         : check.py
#   file_relpath : src/eccheck/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck `check` command.

Checks files against the configured policy and reports every violation.
The policy comes from ``eccheck.toml`` / ``[tool.eccheck]`` (searched from the
current directory upwards, or given with ``--config``); policy options on the
command line override individual values.

Examples:
  Check the tree with the project configuration:

    $ eccheck check

  Check Python sources for 4-space indentation and LF endings, no config:

    $ eccheck check --no-config --indent-style space --indent-size 4 --end-of-line lf src

  Emit one JSON object per file:

    $ eccheck check --format ndjson .
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from eccheck.checker import FileStatus, check_file
from eccheck.cli.cli_types import EnumChoiceParam
from eccheck.cli.console import get_console
from eccheck.cli.emitters import emit_diagnostics, emit_human, emit_json, emit_ndjson
from eccheck.cli.errors import (
    EccheckConfigError,
    EccheckFileNotFoundError,
    EccheckUnexpectedError,
    EccheckUsageError,
)
from eccheck.cli.exit_codes import ExitCode
from eccheck.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    file_selection_options,
    policy_options,
)
from eccheck.config.io import Config, find_config_file, load_config
from eccheck.config.logging import get_logger
from eccheck.config.policy import StylePolicy
from eccheck.core.indent import IndentStyle
from eccheck.core.errors import ConfigError
from eccheck.file_resolver import filter_file_list, input_exists, resolve_file_list

if TYPE_CHECKING:
    from eccheck.checker import FileReport
    from eccheck.cli.console import ConsoleLike
    from eccheck.core.eol import EndOfLine

logger = get_logger(__name__)


def load_effective_config(*, config_path: str | None, no_config: bool) -> Config:
    """Load the configuration selected by ``--config`` / ``--no-config``.

    Raises:
        EccheckUsageError: If both options are given.
        EccheckConfigError: If the configuration file cannot be read or parsed.
    """
    if no_config and config_path:
        raise EccheckUsageError("Options --config and --no-config are mutually exclusive.")
    if no_config:
        return Config()

    path: Path | None = Path(config_path) if config_path else find_config_file(Path.cwd())
    if path is None:
        return Config()
    try:
        return load_config(path)
    except ConfigError as exc:
        raise EccheckConfigError(str(exc)) from exc


def exit_code_for(reports: list[FileReport]) -> ExitCode:
    """Return the exit code for a run: errors first, then violations."""
    for r in reports:
        if r.status is FileStatus.ENCODING_ERROR:
            return ExitCode.ENCODING_ERROR
        if r.status is FileStatus.IO_ERROR:
            return ExitCode.IO_ERROR
    if any(r.has_violations for r in reports):
        return ExitCode.VIOLATIONS_FOUND
    return ExitCode.SUCCESS


@click.command(
    name="check",
    help="Check files against the formatting policy.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@file_selection_options
@policy_options
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show counts only instead of per-violation lines.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def check_command(
    *,
    paths: tuple[str, ...],
    config_path: str | None,
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    indent_style: IndentStyle | None,
    indent_size: int | None,
    trim_trailing_whitespace: bool | None,
    insert_final_newline: bool | None,
    end_of_line: EndOfLine | None,
    summary_mode: bool,
    output_format: OutputFormat | None,
) -> None:
    """Check files and exit with a status reflecting the result.

    Args:
        paths (tuple[str, ...]): Files, directories, or globs (default: ``.``).
        config_path (str | None): Explicit configuration file.
        no_config (bool): Skip configuration files entirely.
        include_patterns (tuple[str, ...]): Include filters (relative to the CWD).
        exclude_patterns (tuple[str, ...]): Exclude filters (relative to the CWD).
        indent_style (IndentStyle | None): Override for ``indent_style``.
        indent_size (int | None): Override for ``indent_size``.
        trim_trailing_whitespace (bool | None): Override for ``trim_trailing_whitespace``.
        insert_final_newline (bool | None): Override for ``insert_final_newline``.
        end_of_line (EndOfLine | None): Override for ``end_of_line``.
        summary_mode (bool): Print counts only.
        output_format (OutputFormat | None): ``default``, ``json`` or ``ndjson``.

    Raises:
        EccheckFileNotFoundError: If none of the given paths exist.
        EccheckUnexpectedError: If checking fails with an unhandled exception.

    Exit Status:
        SUCCESS (0): All checked files conform.
        VIOLATIONS_FOUND (2): At least one file breaks the policy.
        USAGE_ERROR (64): Invalid invocation.
        ENCODING_ERROR (65): A file is not valid UTF-8.
        FILE_NOT_FOUND (66): None of the given paths exist.
        IO_ERROR (74): A file could not be read.
        CONFIG_ERROR (78): The configuration file is unreadable or invalid TOML.
        UNEXPECTED_ERROR (255): An unhandled error occurred while checking.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine and hasattr(console, "enable_color"):
        console.enable_color = False

    config: Config = load_effective_config(config_path=config_path, no_config=no_config)
    emit_diagnostics(console, config.diagnostics)

    overrides = StylePolicy(
        indent_style=indent_style.key if indent_style is not None else None,
        indent_size=indent_size,
        trim_trailing_whitespace=trim_trailing_whitespace,
        insert_final_newline=insert_final_newline,
        end_of_line=end_of_line.key if end_of_line is not None else None,
    )
    policy: StylePolicy = config.policy.merged_with(overrides)
    logger.debug("Effective policy: %s (config: %s)", policy, config.source)

    if policy.is_empty and verbosity >= 0 and not fmt.is_machine:
        console.warn("No rules configured; pass policy options or add an eccheck.toml.")

    try:
        exit_code: ExitCode = run_check(
            console,
            config=config,
            policy=policy,
            inputs=list(paths) or ["."],
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            fmt=fmt,
            summary_mode=summary_mode,
            verbosity=verbosity,
        )
    except click.ClickException:
        raise
    except Exception as exc:
        logger.debug("Unhandled error while checking", exc_info=True)
        raise EccheckUnexpectedError(f"Unexpected error: {exc}") from exc

    ctx.exit(exit_code)


def run_check(
    console: ConsoleLike,
    *,
    config: Config,
    policy: StylePolicy,
    inputs: list[str],
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    fmt: OutputFormat,
    summary_mode: bool,
    verbosity: int,
) -> ExitCode:
    """Resolve the input files, check them and emit the report.

    Returns:
        ExitCode: The exit status for the run.

    Raises:
        EccheckFileNotFoundError: If no file was selected and none of ``inputs`` exist.
    """
    files: list[Path] = resolve_file_list(
        inputs,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )
    if config.source is not None:
        files = filter_file_list(
            files,
            include_patterns=config.include_patterns,
            exclude_patterns=config.exclude_patterns,
            root=config.source.parent,
        )

    if not files:
        if not any(input_exists(p) for p in inputs):
            raise EccheckFileNotFoundError(f"No such file or directory: {', '.join(inputs)}")
        if not fmt.is_machine:
            console.print(console.styled("No files to check.", fg="blue"))
            return ExitCode.SUCCESS

    reports: list[FileReport] = [check_file(path, policy) for path in files]

    if fmt is OutputFormat.JSON:
        emit_json(
            console,
            reports,
            policy=policy,
            diagnostics=config.diagnostics,
            summary_only=summary_mode,
        )
    elif fmt is OutputFormat.NDJSON:
        emit_ndjson(console, reports, diagnostics=config.diagnostics, summary_only=summary_mode)
    else:
        emit_human(console, reports, summary_only=summary_mode, verbosity=verbosity)

    return exit_code_for(reports)
