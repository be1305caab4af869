# topmark:header:start
#
#   project      : ECCheck
#   file         : checker.py
#   file_relpath : src/eccheck/checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply the validators to whole files.

This is the layer that owns locations: validators report *what* is wrong,
`check_text` attaches 1-based line numbers, and `check_file` attaches the
path and turns filesystem/decoding problems into a per-file error status.

Per line, indentation is checked before trailing whitespace. File-level rules
(final newline, line endings) follow all line-level results.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from eccheck.config.logging import get_logger
from eccheck.constants import BINARY_SNIFF_SIZE, UTF8_BOM
from eccheck.validators import (
    check_final_newline,
    check_indentation,
    check_line_ending,
    check_trailing_whitespace,
)

if TYPE_CHECKING:
    from pathlib import Path

    from eccheck.config.logging import EccheckLogger
    from eccheck.config.policy import StylePolicy
    from eccheck.validators import CheckResult, Violation

logger: EccheckLogger = get_logger(__name__)

_LINE_SPLIT_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


class FileStatus(str, Enum):
    """Outcome of checking a single file."""

    OK = "ok"
    VIOLATIONS = "violations"
    SKIPPED_BINARY = "skipped_binary"
    SKIPPED_EMPTY_POLICY = "skipped_empty_policy"
    IO_ERROR = "io_error"
    ENCODING_ERROR = "encoding_error"

    @property
    def is_error(self) -> bool:
        """Return True if the file could not be checked."""
        return self in (FileStatus.IO_ERROR, FileStatus.ENCODING_ERROR)


@dataclass(frozen=True, slots=True)
class ReportedViolation:
    """A violation with its location inside the file.

    Attributes:
        violation (Violation): The rule failure.
        line (int | None): 1-based line number, or None for file-level rules.
    """

    violation: Violation
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {"line": self.line, **self.violation.to_dict()}


@dataclass
class FileReport:
    """Result of checking one file."""

    path: Path
    status: FileStatus
    violations: list[ReportedViolation] = field(default_factory=lambda: [])
    error: str | None = None

    @property
    def has_violations(self) -> bool:
        """Return True if at least one rule failed."""
        return bool(self.violations)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping."""
        return {
            "path": str(self.path),
            "status": self.status.value,
            "violations": [v.to_dict() for v in self.violations],
            "error": self.error,
        }


def split_lines(content: str) -> list[str]:
    r"""Split content into lines on ``\r\n``, ``\r`` or ``\n``.

    Terminators are removed. A terminator at the very end does not start an
    extra empty line, so ``"a\nb\n"`` yields ``["a", "b"]`` and ``""`` yields
    ``[]``.

    Args:
        content (str): Complete file content.

    Returns:
        list[str]: The lines, without terminators.
    """
    if not content:
        return []
    lines: list[str] = _LINE_SPLIT_RE.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines


def check_text(content: str, policy: StylePolicy) -> list[ReportedViolation]:
    """Run every rule of ``policy`` over ``content``.

    Args:
        content (str): Complete file content, terminators included.
        policy (StylePolicy): Resolved policy values.

    Returns:
        list[ReportedViolation]: Line violations in line order, then file-level ones.
    """
    found: list[ReportedViolation] = []

    for line_no, line in enumerate(split_lines(content), start=1):
        line_results: tuple[CheckResult, ...] = (
            check_indentation(line, policy.indent_style, policy.indent_size),
            check_trailing_whitespace(line, policy.trim_trailing_whitespace is True),
        )
        found.extend(ReportedViolation(v, line_no) for v in line_results if v is not None)

    file_results: tuple[CheckResult, ...] = (
        check_final_newline(content, policy.insert_final_newline is True, policy.end_of_line),
        check_line_ending(content, policy.end_of_line),
    )
    found.extend(ReportedViolation(v) for v in file_results if v is not None)
    return found


def is_binary(data: bytes) -> bool:
    """Return True if the leading bytes contain a NUL byte."""
    return b"\0" in data[:BINARY_SNIFF_SIZE]


def decode_text(data: bytes) -> str:
    """Decode UTF-8 bytes strictly, dropping a leading BOM and keeping terminators.

    Raises:
        UnicodeDecodeError: If ``data`` is not valid UTF-8.
    """
    text: str = data.decode("utf-8")
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM) :]
    return text


def check_file(path: Path, policy: StylePolicy) -> FileReport:
    """Check one file against ``policy``.

    OS and decoding errors are reported on the returned `FileReport` (status
    ``IO_ERROR`` or ``ENCODING_ERROR``) rather than raised, so one bad file
    never stops a run.

    Args:
        path (Path): File to check.
        policy (StylePolicy): Resolved policy values.

    Returns:
        FileReport: The outcome for this file.
    """
    if policy.is_empty:
        logger.debug("No active rules for %s", path)
        return FileReport(path=path, status=FileStatus.SKIPPED_EMPTY_POLICY)

    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FileReport(path=path, status=FileStatus.IO_ERROR, error=str(exc))

    if is_binary(data):
        logger.info("Skipping binary file: %s", path)
        return FileReport(path=path, status=FileStatus.SKIPPED_BINARY)

    try:
        content: str = decode_text(data)
    except UnicodeDecodeError as exc:
        logger.error("Encoding error while reading %s: %s", path, exc)
        return FileReport(
            path=path, status=FileStatus.ENCODING_ERROR, error=f"not valid UTF-8: {exc}"
        )

    violations: list[ReportedViolation] = check_text(content, policy)
    logger.trace("%s: %d violation(s)", path, len(violations))
    return FileReport(
        path=path,
        status=FileStatus.VIOLATIONS if violations else FileStatus.OK,
        violations=violations,
    )
