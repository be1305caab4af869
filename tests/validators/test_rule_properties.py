# topmark:header:start
#
#   project      : ECCheck
#   file         : test_rule_properties.py
#   file_relpath : tests/validators/test_rule_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the rule predicates.

Generated lines and file bodies are compared against straightforward
reference formulations of each rule (string operations instead of regexes).
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from eccheck.checker import split_lines
from eccheck.core.matching import RegexMatcher, compile_pattern
from eccheck.validators import (
    CheckResult,
    check_final_newline,
    check_indentation,
    check_line_ending,
    check_space_indent,
    check_tab_indent,
    check_trailing_whitespace,
)

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

EOLS: dict[str, str] = {"lf": "\n", "cr": "\r", "crlf": "\r\n"}

s_body = st.text(alphabet=st.sampled_from(["a", "b", "*", " ", "\t"]), max_size=12)
s_line = st.tuples(st.text(alphabet=" \t", max_size=10), s_body).map("".join)
s_plain_line = st.text(alphabet=st.sampled_from(["x", "y", " ", "\t", "#"]), max_size=10)


@settings(max_examples=200, deadline=None)
@given(line=s_line)
def test_trailing_whitespace_matches_rstrip(line: str) -> None:
    """A line is reported exactly when stripping spaces/tabs on the right changes it."""
    reported = check_trailing_whitespace(line, True) is not None
    assert reported == (line != line.rstrip(" \t"))


@settings(max_examples=200, deadline=None)
@given(line=s_line)
def test_tab_indent_matches_reference(line: str) -> None:
    """The tab rule passes iff the leading whitespace run is tabs only and is followed by text."""
    stripped = line.lstrip(" \t")
    lead = line[: len(line) - len(stripped)]
    expected_ok = line == "" or (" " not in lead and stripped != "")
    assert (check_tab_indent(line) is None) == expected_ok


@settings(max_examples=200, deadline=None)
@given(
    size=st.integers(min_value=1, max_value=8),
    levels=st.integers(min_value=0, max_value=4),
    text=st.text(alphabet="abc(){}", min_size=1, max_size=8),
)
def test_space_indent_accepts_exact_levels(size: int, levels: int, text: str) -> None:
    """Exact multiples of the indent width followed by text always pass."""
    assert check_space_indent(" " * (size * levels) + text, size) is None


@settings(max_examples=200, deadline=None)
@given(
    size=st.integers(min_value=2, max_value=8),
    levels=st.integers(min_value=0, max_value=4),
    extra=st.integers(min_value=1, max_value=7),
)
def test_space_indent_rejects_partial_levels(size: int, levels: int, extra: int) -> None:
    """Padding that is not a multiple of the width fails (outside block comments)."""
    pad = size * levels + extra % size
    if pad % size == 0:
        return
    assert check_space_indent(" " * pad + "abc", size) is not None


@settings(max_examples=200, deadline=None)
@given(
    lines=st.lists(s_plain_line, max_size=6),
    kind=st.sampled_from(sorted(EOLS)),
    final=st.booleans(),
)
def test_uniform_endings_always_pass_line_ending(lines: list[str], kind: str, final: bool) -> None:
    """Content joined with a single terminator kind is always consistent."""
    eol = EOLS[kind]
    content = eol.join(lines) + (eol if final and lines else "")
    assert check_line_ending(content, kind) is None
    if lines and final:
        assert check_final_newline(content, True, kind) is None


@settings(max_examples=200, deadline=None)
@given(
    lines=st.lists(s_plain_line, min_size=2, max_size=6),
    kind=st.sampled_from(sorted(EOLS)),
    other=st.sampled_from(sorted(EOLS)),
)
def test_foreign_terminator_breaks_line_ending(lines: list[str], kind: str, other: str) -> None:
    """Replacing one terminator with a different kind is always reported."""
    if kind == other:
        return
    eol, foreign = EOLS[kind], EOLS[other]
    content = lines[0] + foreign + eol.join(lines[1:]) + eol
    assert check_line_ending(content, kind) is not None


@settings(max_examples=200, deadline=None)
@given(lines=st.lists(s_plain_line, max_size=6), kind=st.sampled_from(sorted(EOLS)))
def test_split_lines_inverts_join(lines: list[str], kind: str) -> None:
    """Joining lines with a terminator and splitting again is lossless."""
    content = "".join(line + EOLS[kind] for line in lines)
    assert split_lines(content) == lines


s_text = st.text(alphabet=st.sampled_from(["a", "*", " ", "\t", "\r", "\n"]), max_size=16)


def _run_all(
    text: str,
    style: object,
    size: object,
    trim: bool,
    final: bool,
    eol: object,
    matcher: RegexMatcher | None = None,
) -> list[CheckResult]:
    if matcher is None:
        return [
            check_indentation(text, style, size),
            check_trailing_whitespace(text, trim),
            check_final_newline(text, final, eol),
            check_line_ending(text, eol),
        ]
    return [
        check_indentation(text, style, size, matcher=matcher),
        check_trailing_whitespace(text, trim, matcher=matcher),
        check_final_newline(text, final, eol, matcher=matcher),
        check_line_ending(text, eol),
    ]


@settings(max_examples=300, deadline=None)
@given(
    text=s_text,
    style=st.sampled_from(["space", "tab", "SPACES", "bogus", None]),
    size=st.sampled_from([1, 2, 4, "4", None]),
    trim=st.booleans(),
    final=st.booleans(),
    eol=st.sampled_from(["lf", "cr", "crlf", "native", None]),
)
def test_rules_are_deterministic(
    text: str, style: object, size: object, trim: bool, final: bool, eol: object
) -> None:
    """Repeated calls agree, with a cold or warm pattern cache and any matcher instance."""
    compile_pattern.cache_clear()
    cold = _run_all(text, style, size, trim, final, eol)
    warm = _run_all(text, style, size, trim, final, eol)
    explicit = _run_all(text, style, size, trim, final, eol, matcher=RegexMatcher())

    assert cold == warm == explicit
    if any(r is not None for r in cold[:3]):
        assert compile_pattern.cache_info().hits > 0
