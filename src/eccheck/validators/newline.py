# topmark:header:start
#
#   project      : ECCheck
#   file         : newline.py
#   file_relpath : src/eccheck/validators/newline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""File-level newline rules.

Both rules take the complete file content, terminators included.

``check_line_ending`` detects mixed terminators by comparing how many
segments the content splits into for each separator, instead of scanning
terminator by terminator. A content with no occurrence of a separator splits
into exactly one segment, so for ``lf`` the rule reads "no ``\r`` at all, no
``\r\n`` at all". For ``crlf`` every ``\r\n`` adds one segment to each of the
three splits; any bare ``\r`` or ``\n`` breaks the equality. A ``\r`` inside
content (not a terminator) is counted like any other.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from eccheck.core.eol import EndOfLine, get_eol_char
from eccheck.core.matching import DEFAULT_MATCHER
from eccheck.validators.types import Violation, ViolationKind

if TYPE_CHECKING:
    from eccheck.core.matching import PatternMatcher
    from eccheck.validators.types import CheckResult


def final_newline_pattern(eol_char: str) -> str:
    """Return the pattern matching content that ends with ``eol_char``."""
    return rf"(?s:.*){re.escape(eol_char)}\Z"


def _segments(content: str, sep: str) -> int:
    """Return ``len(content.split(sep))`` without building the list."""
    return content.count(sep) + 1


def check_final_newline(
    content: str,
    insert_final_newline: bool,
    end_of_line: object,
    *,
    matcher: PatternMatcher = DEFAULT_MATCHER,
) -> CheckResult:
    """Validate that the content ends with the configured terminator.

    An unset or unknown ``end_of_line`` resolves to an empty terminator, which
    every content satisfies.

    Args:
        content (str): Complete file content.
        insert_final_newline (bool): Whether the rule is active.
        end_of_line (object): ``"lf"``, ``"cr"``, ``"crlf"``, or unset.
        matcher (PatternMatcher): Matching engine.

    Returns:
        CheckResult: ``None`` if the content conforms or the rule is off, else the violation.
    """
    if insert_final_newline is not True:
        return None
    if matcher.matches(final_newline_pattern(get_eol_char(end_of_line)), content):
        return None
    return Violation(ViolationKind.FINAL_NEWLINE, "wrong line endings or missing final newline")


def check_line_ending(content: str, end_of_line: object) -> CheckResult:
    """Validate that every terminator in the content is of the configured kind.

    Args:
        content (str): Complete file content.
        end_of_line (object): ``"lf"``, ``"cr"``, ``"crlf"``; anything else imposes
            no constraint.

    Returns:
        CheckResult: ``None`` if the content conforms, else the violation.
    """
    eol: EndOfLine | None = EndOfLine.parse(end_of_line)
    if eol is None:
        return None

    expected: int = _segments(content, eol.char)
    lf: int = _segments(content, "\n")
    cr: int = _segments(content, "\r")
    crlf: int = _segments(content, "\r\n")

    if eol is EndOfLine.LF:
        ok = expected == lf and cr == 1 and crlf == 1
    elif eol is EndOfLine.CR:
        ok = expected == cr and lf == 1 and crlf == 1
    else:
        ok = expected == crlf and lf == expected and cr == expected

    if ok:
        return None
    return Violation(
        ViolationKind.LINE_ENDING, "not all lines have the correct end of line character"
    )
