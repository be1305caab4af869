# topmark:header:start
#
#   project      : ECCheck
#   file         : errors.py
#   file_relpath : src/eccheck/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ECCheck CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
When a project console is stored on the Click context, errors are written
through it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from eccheck.cli.exit_codes import ExitCode


class EccheckError(click.ClickException):
    """Base class for all ECCheck CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class EccheckUsageError(EccheckError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class EccheckConfigError(EccheckError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class EccheckFileNotFoundError(EccheckError):
    """Error when no input path exists."""

    exit_code = ExitCode.FILE_NOT_FOUND


class EccheckUnexpectedError(EccheckError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
