# topmark:header:start
#
#   project      : ECCheck
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `eccheck check`: human output, filters and policy overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_VIOLATIONS_FOUND, run_cli_in
from tests.conftest import mark_cli, write_bytes

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

ALL_RULES: list[str] = [
    "check",
    "--no-config",
    "--indent-style",
    "space",
    "--indent-size",
    "4",
    "--trim-trailing-whitespace",
    "--insert-final-newline",
    "--end-of-line",
    "lf",
]


@mark_cli
def test_clean_tree_succeeds(tmp_path: Path) -> None:
    """Conforming files exit 0 and print a green summary."""
    write_bytes(tmp_path / "a.py", b"def f():\n    return 1\n")

    result: Result = run_cli_in(tmp_path, [*ALL_RULES, "."])

    assert_SUCCESS(result)
    assert "1 file(s) checked, no violations" in result.output


@mark_cli
def test_violations_are_listed_with_locations(tmp_path: Path) -> None:
    """Each violation is printed as ``path:line: message``; file rules have no line."""
    write_bytes(tmp_path / "bad.py", b"x = 1 \n  y = 2")

    result: Result = run_cli_in(tmp_path, [*ALL_RULES, "bad.py"])

    assert_VIOLATIONS_FOUND(result)
    assert "bad.py:1: trailing whitespace" in result.output
    assert "bad.py:2: wrong amount of left-padding spaces, want a multiple of 4" in result.output
    assert "bad.py: wrong line endings or missing final newline" in result.output
    assert "3 violation(s) in 1 of 1 file(s)" in result.output


@mark_cli
def test_summary_mode_hides_details(tmp_path: Path) -> None:
    """``--summary`` prints only the counts."""
    write_bytes(tmp_path / "bad.py", b"x = 1 \n")

    result: Result = run_cli_in(tmp_path, [*ALL_RULES, "--summary", "."])

    assert_VIOLATIONS_FOUND(result)
    assert "trailing whitespace" not in result.output
    assert "1 violation(s) in 1 of 1 file(s)" in result.output


@mark_cli
def test_cli_option_overrides_config(tmp_path: Path) -> None:
    """Policy options override single values from ``eccheck.toml``."""
    (tmp_path / "eccheck.toml").write_text(
        '[policy]\nindent_style = "tab"\nend_of_line = "lf"\n', encoding="utf-8"
    )
    write_bytes(tmp_path / "a.py", b"if x:\n    y\n")

    from_config: Result = run_cli_in(tmp_path, ["check", "a.py"])
    overridden: Result = run_cli_in(
        tmp_path, ["check", "--indent-style", "space", "--indent-size", "4", "a.py"]
    )

    assert_VIOLATIONS_FOUND(from_config)
    assert "spaces instead of tabs" in from_config.output
    assert_SUCCESS(overridden)


@mark_cli
def test_no_flag_switches_rule_off(tmp_path: Path) -> None:
    """``--no-trim-trailing-whitespace`` disables a rule set in the config."""
    (tmp_path / "eccheck.toml").write_text(
        "[policy]\ntrim_trailing_whitespace = true\n", encoding="utf-8"
    )
    write_bytes(tmp_path / "a.txt", b"a \n")

    assert_VIOLATIONS_FOUND(run_cli_in(tmp_path, ["check", "a.txt"]))
    result: Result = run_cli_in(tmp_path, ["check", "--no-trim-trailing-whitespace", "a.txt"])
    assert_SUCCESS(result)


@mark_cli
def test_config_file_patterns_are_applied(tmp_path: Path) -> None:
    """``[files]`` excludes from the config drop matching files."""
    (tmp_path / "eccheck.toml").write_text(
        '[policy]\ninsert_final_newline = true\nend_of_line = "lf"\n'
        '[files]\nexclude = ["generated/"]\n',
        encoding="utf-8",
    )
    write_bytes(tmp_path / "generated" / "out.txt", b"no newline")
    write_bytes(tmp_path / "src" / "ok.txt", b"fine\n")

    result: Result = run_cli_in(tmp_path, ["check", "."])

    assert_SUCCESS(result)
    # eccheck.toml itself is checked as well.
    assert "2 file(s) checked" in result.output
    assert "out.txt" not in result.output


@mark_cli
def test_cli_include_and_exclude(tmp_path: Path) -> None:
    """``--include`` and ``--exclude`` filter the candidate files."""
    write_bytes(tmp_path / "a.py", b"ok\n")
    write_bytes(tmp_path / "b.txt", b"bad ")
    write_bytes(tmp_path / "c.py", b"bad ")

    result: Result = run_cli_in(
        tmp_path, [*ALL_RULES, "--include", "*.py", "--exclude", "c.py", "."]
    )

    assert_SUCCESS(result)
    assert "1 file(s) checked" in result.output


@mark_cli
def test_crlf_policy(tmp_path: Path) -> None:
    """A CRLF policy accepts CRLF files and rejects LF files."""
    write_bytes(tmp_path / "win.txt", b"a\r\nb\r\n")
    write_bytes(tmp_path / "unix.txt", b"a\nb\n")
    args = ["check", "--no-config", "--end-of-line", "crlf", "--insert-final-newline"]

    assert_SUCCESS(run_cli_in(tmp_path, [*args, "win.txt"]))
    result: Result = run_cli_in(tmp_path, [*args, "unix.txt"])
    assert_VIOLATIONS_FOUND(result)
    assert "not all lines have the correct end of line character" in result.output


@mark_cli
def test_empty_policy_warns_and_skips(tmp_path: Path) -> None:
    """Without any rule configured, files are skipped and the run succeeds."""
    write_bytes(tmp_path / "a.txt", b"anything  ")

    result: Result = run_cli_in(tmp_path, ["check", "--no-config", "."])

    assert_SUCCESS(result)
    assert "No rules configured" in result.output
    assert "1 skipped" in result.output


@mark_cli
def test_verbose_lists_conforming_files(tmp_path: Path) -> None:
    """With ``-v`` conforming files are listed too."""
    write_bytes(tmp_path / "a.txt", b"a\n")

    result: Result = run_cli_in(tmp_path, ["-v", *ALL_RULES, "a.txt"])

    assert_SUCCESS(result)
    assert "a.txt: ok" in result.output


@mark_cli
def test_quiet_hides_success_summary(tmp_path: Path) -> None:
    """With ``-q`` a clean run prints nothing on stdout."""
    write_bytes(tmp_path / "a.txt", b"a\n")

    result: Result = run_cli_in(tmp_path, ["-q", *ALL_RULES, "a.txt"])

    assert_SUCCESS(result)
    assert result.output.strip() == ""


@mark_cli
def test_indent_style_option_accepts_aliases(tmp_path: Path) -> None:
    """``--indent-style`` takes the same aliases as ``indent_style`` in the config."""
    write_bytes(tmp_path / "a.py", b"if x:\n    y\n")

    spaces: Result = run_cli_in(
        tmp_path, ["check", "--no-config", "--indent-style", "spaces", "--indent-size", "4", "a.py"]
    )
    tabs: Result = run_cli_in(tmp_path, ["check", "--no-config", "--indent-style", "TABS", "a.py"])

    assert_SUCCESS(spaces)
    assert_VIOLATIONS_FOUND(tabs)
    assert "spaces instead of tabs" in tabs.output
