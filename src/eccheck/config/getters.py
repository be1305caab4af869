# topmark:header:start
#
#   project      : ECCheck
#   file         : getters.py
#   file_relpath : src/eccheck/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for parsed TOML tables.

Each getter validates the expected shape and, on mismatch, logs a warning and
records it in a `DiagnosticLog`, then falls back to ``None`` (or an empty
list). User mistakes are surfaced without aborting the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeAlias

if TYPE_CHECKING:
    from eccheck.config.logging import EccheckLogger
    from eccheck.diagnostic.model import DiagnosticLog

TomlTable: TypeAlias = dict[str, Any]


def _warn(
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
    loc: str,
    expected: str,
    value: object,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value}")


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _warn(diagnostics, logger, f"{where}.{key}", "string", value)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Unlike the unchecked getters elsewhere, ints are not coerced: ``1`` in a
    policy file is more likely a typo than an intended ``true``.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _warn(diagnostics, logger, f"{where}.{key}", "boolean", value)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
) -> int | None:
    """Return an optional integer value, warning when present but not `int`.

    Numeric strings (``"4"``) are accepted, since EditorConfig values are
    strings by nature.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    _warn(diagnostics, logger, f"{where}.{key}", "integer", value)
    return None


def get_string_list_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
) -> list[str]:
    """Return a list of strings, dropping (and warning about) non-string items."""
    value: Any | None = table.get(key)
    if value is None:
        return []
    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        _warn(diagnostics, logger, loc, "list of strings", value)
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            _warn(diagnostics, logger, f"{loc}[]", "string", item)
    return out


def warn_unknown_keys(
    table: TomlTable,
    allowed: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: EccheckLogger,
) -> None:
    """Record a warning for every key of ``table`` not in ``allowed``."""
    for key in sorted(set(table) - allowed):
        logger.warning("Unknown key in %s: %s", where, key)
        diagnostics.add_warning(f"Unknown key in {where}: {key}")
