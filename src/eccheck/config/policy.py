# topmark:header:start
#
#   project      : ECCheck
#   file         : policy.py
#   file_relpath : src/eccheck/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style policy handed to the validators.

A [`StylePolicy`][eccheck.config.policy.StylePolicy] holds already-resolved
values. ECCheck does not implement EditorConfig section matching or
inheritance: a policy comes from one flat TOML table, optionally overridden
field by field by CLI flags.

Unrecognized values are dropped to "unset" with a warning diagnostic rather
than rejected, so a bad value disables the corresponding rule instead of
aborting the run.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from eccheck.config.getters import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    warn_unknown_keys,
)
from eccheck.config.keys import Toml
from eccheck.config.logging import get_logger
from eccheck.core.eol import EndOfLine
from eccheck.core.indent import IndentStyle

if TYPE_CHECKING:
    from eccheck.config.getters import TomlTable
    from eccheck.config.logging import EccheckLogger
    from eccheck.diagnostic.model import DiagnosticLog

__all__ = [
    "IndentStyle",
    "StylePolicy",
    "normalize_end_of_line",
    "normalize_indent_size",
    "normalize_indent_style",
    "policy_from_table",
]

logger: EccheckLogger = get_logger(__name__)


@dataclass(frozen=True)
class StylePolicy:
    """Resolved formatting policy for one file.

    ``None`` means "not configured"; the corresponding rule never fires.

    Attributes:
        indent_style (str | None): ``"space"``, ``"tab"`` or unset.
        indent_size (int | None): Width of one indent level (spaces only).
        trim_trailing_whitespace (bool | None): Whether trailing whitespace is forbidden.
        insert_final_newline (bool | None): Whether the file must end with a terminator.
        end_of_line (str | None): ``"lf"``, ``"cr"``, ``"crlf"`` or unset.
    """

    indent_style: str | None = None
    indent_size: int | None = None
    trim_trailing_whitespace: bool | None = None
    insert_final_newline: bool | None = None
    end_of_line: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True if no rule is active under this policy."""
        return (
            IndentStyle.parse(self.indent_style) is None
            and self.trim_trailing_whitespace is not True
            and self.insert_final_newline is not True
            and EndOfLine.parse(self.end_of_line) is None
        )

    def merged_with(self, overrides: StylePolicy) -> StylePolicy:
        """Return a copy where every non-``None`` field of ``overrides`` wins.

        Args:
            overrides (StylePolicy): Values to apply on top of this policy.

        Returns:
            StylePolicy: The merged policy.
        """
        changes: dict[str, Any] = {
            f.name: getattr(overrides, f.name)
            for f in fields(overrides)
            if getattr(overrides, f.name) is not None
        }
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of the policy values."""
        return asdict(self)


def normalize_indent_style(raw: str | None, *, diagnostics: DiagnosticLog) -> str | None:
    """Return the canonical indent style key, or None (with a warning) if unknown."""
    if raw is None:
        return None
    style: IndentStyle | None = IndentStyle.parse(raw)
    if style is None:
        diagnostics.add_warning(
            f"Unknown indent_style {raw!r}; expected one of: "
            f"{', '.join(s.key for s in IndentStyle)} (rule disabled)"
        )
        return None
    return style.key


def normalize_indent_size(raw: int | None, *, diagnostics: DiagnosticLog) -> int | None:
    """Return ``raw`` if it is a positive size, else None (with a warning)."""
    if raw is None:
        return None
    if raw <= 0:
        diagnostics.add_warning(f"indent_size must be positive, got {raw} (rule disabled)")
        return None
    return raw


def normalize_end_of_line(raw: str | None, *, diagnostics: DiagnosticLog) -> str | None:
    """Return the canonical end-of-line key, or None (with a warning) if unknown."""
    if raw is None:
        return None
    eol: EndOfLine | None = EndOfLine.parse(raw)
    if eol is None:
        diagnostics.add_warning(
            f"Unknown end_of_line {raw!r}; expected one of: "
            f"{', '.join(e.key for e in EndOfLine)} (rule disabled)"
        )
        return None
    return eol.key


def policy_from_table(
    table: TomlTable,
    *,
    diagnostics: DiagnosticLog,
    where: str = Toml.SECTION_POLICY,
) -> StylePolicy:
    """Build a `StylePolicy` from a parsed ``[policy]`` table.

    Args:
        table (TomlTable): The parsed table (plain Python values).
        diagnostics (DiagnosticLog): Sink for shape and value warnings.
        where (str): Table location used in messages.

    Returns:
        StylePolicy: The coerced policy.
    """
    warn_unknown_keys(
        table, Toml.policy_keys(), where=where, diagnostics=diagnostics, logger=logger
    )

    # EditorConfig allows ``indent_size = tab``; with tabs there is no width to check.
    raw_size: Any = table.get(Toml.KEY_INDENT_SIZE)
    if isinstance(raw_size, str) and raw_size.strip().lower() in ("tab", "unset"):
        table = {k: v for k, v in table.items() if k != Toml.KEY_INDENT_SIZE}

    indent_style: str | None = get_string_value_or_none_checked(
        table, Toml.KEY_INDENT_STYLE, where=where, diagnostics=diagnostics, logger=logger
    )
    indent_size: int | None = get_int_value_or_none_checked(
        table, Toml.KEY_INDENT_SIZE, where=where, diagnostics=diagnostics, logger=logger
    )
    end_of_line: str | None = get_string_value_or_none_checked(
        table, Toml.KEY_END_OF_LINE, where=where, diagnostics=diagnostics, logger=logger
    )

    policy = StylePolicy(
        indent_style=normalize_indent_style(indent_style, diagnostics=diagnostics),
        indent_size=normalize_indent_size(indent_size, diagnostics=diagnostics),
        trim_trailing_whitespace=get_bool_value_or_none_checked(
            table,
            Toml.KEY_TRIM_TRAILING_WHITESPACE,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
        ),
        insert_final_newline=get_bool_value_or_none_checked(
            table,
            Toml.KEY_INSERT_FINAL_NEWLINE,
            where=where,
            diagnostics=diagnostics,
            logger=logger,
        ),
        end_of_line=normalize_end_of_line(end_of_line, diagnostics=diagnostics),
    )
    logger.debug("Policy from [%s]: %s", where, policy)
    return policy
