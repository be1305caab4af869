# topmark:header:start
#
#   project      : ECCheck
#   file         : test_policy.py
#   file_relpath : tests/config/test_policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `StylePolicy` and building it from a ``[policy]`` table.

Bad values never abort: they are dropped to "unset" and a warning
diagnostic is recorded.
"""

from __future__ import annotations

from typing import Any

from eccheck.config.policy import StylePolicy, policy_from_table
from eccheck.diagnostic import DiagnosticLevel, DiagnosticLog
from tests.conftest import make_policy, parametrize


def _build(table: dict[str, Any]) -> tuple[StylePolicy, DiagnosticLog]:
    diagnostics = DiagnosticLog()
    return policy_from_table(table, diagnostics=diagnostics), diagnostics


def test_full_table() -> None:
    """A well-formed table is taken over with canonical keys."""
    policy, diags = _build(
        {
            "indent_style": "Spaces",
            "indent_size": 2,
            "trim_trailing_whitespace": True,
            "insert_final_newline": False,
            "end_of_line": "CRLF",
        }
    )

    assert policy == StylePolicy(
        indent_style="space",
        indent_size=2,
        trim_trailing_whitespace=True,
        insert_final_newline=False,
        end_of_line="crlf",
    )
    assert len(diags) == 0


def test_empty_table_is_empty_policy() -> None:
    """An empty table configures nothing."""
    policy, diags = _build({})

    assert policy == StylePolicy()
    assert policy.is_empty
    assert len(diags) == 0


@parametrize(
    "table, field",
    [
        ({"indent_style": "mixed"}, "indent_style"),
        ({"indent_style": 4}, "indent_style"),
        ({"indent_size": 0}, "indent_size"),
        ({"indent_size": "wide"}, "indent_size"),
        ({"indent_size": True}, "indent_size"),
        ({"trim_trailing_whitespace": "yes"}, "trim_trailing_whitespace"),
        ({"insert_final_newline": 1}, "insert_final_newline"),
        ({"end_of_line": "native"}, "end_of_line"),
    ],
)
def test_bad_values_become_unset_with_warning(table: dict[str, Any], field: str) -> None:
    """Invalid values are dropped and reported as warnings."""
    policy, diags = _build(table)

    assert getattr(policy, field) is None
    assert len(diags) == 1
    assert next(iter(diags)).level is DiagnosticLevel.WARNING


def test_numeric_string_size_is_accepted() -> None:
    """EditorConfig-style string sizes are converted."""
    policy, diags = _build({"indent_size": "4"})

    assert policy.indent_size == 4
    assert len(diags) == 0


@parametrize("raw", ["tab", "unset", "TAB"])
def test_indent_size_tab_or_unset_is_silent(raw: str) -> None:
    """``indent_size = "tab"`` (or ``"unset"``) means no width, without a warning."""
    policy, diags = _build({"indent_style": "tab", "indent_size": raw})

    assert policy.indent_size is None
    assert policy.indent_style == "tab"
    assert len(diags) == 0


def test_unknown_keys_are_reported() -> None:
    """Keys outside the policy vocabulary produce one warning each."""
    _policy, diags = _build({"indent_style": "tab", "charset": "utf-8", "max_line_length": 80})

    messages = [d.message for d in diags]
    assert messages == ["Unknown key in policy: charset", "Unknown key in policy: max_line_length"]


def test_is_empty_depends_on_active_rules() -> None:
    """Only rules that can fire make a policy non-empty."""
    assert StylePolicy(indent_size=4).is_empty
    assert StylePolicy(trim_trailing_whitespace=False, insert_final_newline=False).is_empty
    assert StylePolicy(indent_style="bogus").is_empty
    assert not StylePolicy(indent_style="tab").is_empty
    assert not StylePolicy(trim_trailing_whitespace=True).is_empty
    assert not StylePolicy(insert_final_newline=True).is_empty
    assert not StylePolicy(end_of_line="lf").is_empty


def test_merged_with_prefers_set_override_fields() -> None:
    """Override fields win only where they are not None."""
    base = make_policy()
    merged = base.merged_with(StylePolicy(indent_style="tab", insert_final_newline=False))

    assert merged.indent_style == "tab"
    assert merged.insert_final_newline is False
    assert merged.indent_size == 4
    assert merged.end_of_line == "lf"
    assert base.indent_style == "space"


def test_to_dict_lists_every_field() -> None:
    """The JSON mapping includes unset fields as None."""
    assert StylePolicy(end_of_line="cr").to_dict() == {
        "indent_style": None,
        "indent_size": None,
        "trim_trailing_whitespace": None,
        "insert_final_newline": None,
        "end_of_line": "cr",
    }
