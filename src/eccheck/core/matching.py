# topmark:header:start
#
#   project      : ECCheck
#   file         : matching.py
#   file_relpath : src/eccheck/core/matching.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pattern-matching capability used by the validators.

Validators express their rules as regular expressions and evaluate them
through a [`PatternMatcher`][eccheck.core.matching.PatternMatcher]. The default
engine is [`RegexMatcher`][eccheck.core.matching.RegexMatcher] (stdlib ``re``);
tests may substitute any object with a compatible ``matches`` method.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Protocol

from eccheck.core.errors import PatternDefectError


class PatternMatcher(Protocol):
    """Structural interface for a regular-language matching engine."""

    def matches(self, pattern: str, text: str) -> bool:
        """Return True if ``pattern`` matches at the start of ``text``."""
        ...


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile and cache a rule pattern.

    Args:
        pattern (str): Regular expression source.

    Returns:
        re.Pattern[str]: The compiled pattern.

    Raises:
        PatternDefectError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternDefectError(f"Invalid rule pattern {pattern!r}: {exc}") from exc


class RegexMatcher:
    """Default matcher backed by the stdlib ``re`` module."""

    def matches(self, pattern: str, text: str) -> bool:
        """Return True if ``pattern`` matches at the start of ``text``.

        Args:
            pattern (str): Regular expression source.
            text (str): Subject text.

        Returns:
            bool: Whether the pattern matches.
        """
        return compile_pattern(pattern).match(text) is not None

    def __repr__(self) -> str:
        """Return a string representation."""
        return "RegexMatcher()"


DEFAULT_MATCHER: PatternMatcher = RegexMatcher()
