# topmark:header:start
#
#   project      : ECCheck
#   file         : indentation.py
#   file_relpath : src/eccheck/validators/indentation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation rules.

``check_indentation`` routes to the space or tab rule according to the
configured indent style. Any other style (unset, unknown, or not a string)
imposes no constraint.

Space rule pattern: ``^( {N})*( \\* ?|[^ \\t])``. The ``( \\* ?)`` branch
accepts the continuation lines of block comments::

    /**
     * aligned one column past the indent
     */
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eccheck.core.indent import IndentStyle
from eccheck.core.matching import DEFAULT_MATCHER
from eccheck.validators.types import Violation, ViolationKind

if TYPE_CHECKING:
    from eccheck.core.matching import PatternMatcher
    from eccheck.validators.types import CheckResult

TAB_INDENT_PATTERN: str = r"\t*[^ \t]"


def space_indent_pattern(indent_size: int) -> str:
    """Return the space rule pattern for ``indent_size``."""
    return rf"( {{{indent_size}}})*( \* ?|[^ \t])"


def check_indentation(
    line: str,
    indent_style: object,
    indent_size: object,
    *,
    matcher: PatternMatcher = DEFAULT_MATCHER,
) -> CheckResult:
    """Validate a line's indentation against the configured style.

    Args:
        line (str): The line, without its terminator.
        indent_style (object): ``"space"``, ``"tab"``, or anything else (no constraint).
        indent_size (object): Width of one indent level; only used for spaces.
        matcher (PatternMatcher): Matching engine.

    Returns:
        CheckResult: ``None`` if the line conforms, else the violation.
    """
    style: IndentStyle | None = IndentStyle.parse(indent_style)
    if style is IndentStyle.SPACE:
        size: int = (
            indent_size
            if isinstance(indent_size, int) and not isinstance(indent_size, bool)
            else 0
        )
        return check_space_indent(line, size, matcher=matcher)
    if style is IndentStyle.TAB:
        return check_tab_indent(line, matcher=matcher)
    return None


def check_space_indent(
    line: str,
    indent_size: int,
    *,
    matcher: PatternMatcher = DEFAULT_MATCHER,
) -> CheckResult:
    """Validate that a line is indented with a multiple of ``indent_size`` spaces.

    Empty lines conform, and a non-positive ``indent_size`` disables the rule.

    Args:
        line (str): The line, without its terminator.
        indent_size (int): Width of one indent level.
        matcher (PatternMatcher): Matching engine.

    Returns:
        CheckResult: ``None`` if the line conforms, else the violation.
    """
    if not line or indent_size <= 0:
        return None
    if matcher.matches(space_indent_pattern(indent_size), line):
        return None
    return Violation(
        ViolationKind.INDENT_SPACING,
        f"wrong amount of left-padding spaces, want a multiple of {indent_size}",
    )


def check_tab_indent(
    line: str,
    *,
    matcher: PatternMatcher = DEFAULT_MATCHER,
) -> CheckResult:
    """Validate that a line is indented with tabs only.

    Args:
        line (str): The line, without its terminator.
        matcher (PatternMatcher): Matching engine.

    Returns:
        CheckResult: ``None`` if the line conforms, else the violation.
    """
    if not line:
        return None
    if matcher.matches(TAB_INDENT_PATTERN, line):
        return None
    return Violation(ViolationKind.INDENT_TYPE, "wrong indentation type, spaces instead of tabs")
