# topmark:header:start
#
#   project      : ECCheck
#   file         : whitespace.py
#   file_relpath : src/eccheck/validators/whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Trailing whitespace rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eccheck.core.matching import DEFAULT_MATCHER
from eccheck.validators.types import Violation, ViolationKind

if TYPE_CHECKING:
    from eccheck.core.matching import PatternMatcher
    from eccheck.validators.types import CheckResult

# ``\Z`` (end of text): a line never carries its own terminator.
TRAILING_WHITESPACE_PATTERN: str = r".*[ \t]+\Z"


def check_trailing_whitespace(
    line: str,
    trim_trailing_whitespace: bool,
    *,
    matcher: PatternMatcher = DEFAULT_MATCHER,
) -> CheckResult:
    """Validate that a line does not end with spaces or tabs.

    Args:
        line (str): The line, without its terminator.
        trim_trailing_whitespace (bool): Whether the rule is active.
        matcher (PatternMatcher): Matching engine.

    Returns:
        CheckResult: ``None`` if the line conforms or the rule is off, else the violation.
    """
    if trim_trailing_whitespace is not True:
        return None
    if matcher.matches(TRAILING_WHITESPACE_PATTERN, line):
        return Violation(ViolationKind.TRAILING_WHITESPACE, "trailing whitespace")
    return None
