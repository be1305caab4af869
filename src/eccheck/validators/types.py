# topmark:header:start
#
#   project      : ECCheck
#   file         : types.py
#   file_relpath : src/eccheck/validators/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result types returned by the validators.

A check either conforms (``None``) or returns exactly one
[`Violation`][eccheck.validators.types.Violation]. Violations carry no
location; the caller attaches line numbers and paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from eccheck.core.enum_mixins import KeyedStrEnum


class ViolationKind(KeyedStrEnum):
    """Closed set of rule failures, one per rule."""

    INDENT_SPACING = ("indent_spacing", "Wrong indentation width")
    INDENT_TYPE = ("indent_type", "Wrong indentation character")
    TRAILING_WHITESPACE = ("trailing_whitespace", "Trailing whitespace present")
    FINAL_NEWLINE = ("final_newline", "Missing or wrong final newline")
    LINE_ENDING = ("line_ending", "Inconsistent line endings")


@dataclass(frozen=True, slots=True)
class Violation:
    """A single rule failure with a human-readable reason."""

    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        """Return the human-readable reason."""
        return self.message

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping."""
        return {"kind": self.kind.key, "message": self.message}


CheckResult: TypeAlias = Violation | None
