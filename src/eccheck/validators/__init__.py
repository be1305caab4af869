# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/validators/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule predicates for ECCheck.

Every function here is pure: it takes a line (or a complete file content) plus
resolved policy values and returns ``None`` when the input conforms, or one
[`Violation`][eccheck.validators.types.Violation]. Policy values that cannot be
interpreted are treated as "not configured".

| Function                    | Input        | Rule                                      |
|-----------------------------|--------------|-------------------------------------------|
| `check_indentation`         | line         | dispatch on indent style                  |
| `check_space_indent`        | line         | leading spaces are a multiple of the size |
| `check_tab_indent`          | line         | leading run is tabs only                  |
| `check_trailing_whitespace` | line         | no trailing spaces/tabs                   |
| `check_final_newline`       | file content | ends with the configured terminator       |
| `check_line_ending`         | file content | one terminator kind throughout            |
"""

from __future__ import annotations

from eccheck.validators.indentation import (
    check_indentation,
    check_space_indent,
    check_tab_indent,
)
from eccheck.validators.newline import check_final_newline, check_line_ending
from eccheck.validators.types import CheckResult, Violation, ViolationKind
from eccheck.validators.whitespace import check_trailing_whitespace

__all__ = [
    "CheckResult",
    "Violation",
    "ViolationKind",
    "check_final_newline",
    "check_indentation",
    "check_line_ending",
    "check_space_indent",
    "check_tab_indent",
    "check_trailing_whitespace",
]
