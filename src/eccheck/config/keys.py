# topmark:header:start
#
#   project      : ECCheck
#   file         : keys.py
#   file_relpath : src/eccheck/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ECCheck configuration.

Keys defined here are the external configuration API (``eccheck.toml`` and
``[tool.eccheck]`` in ``pyproject.toml``). Renaming or removing a key is a
breaking change. Policy keys use the EditorConfig property names.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ECCheck configuration."""

    # [policy]
    SECTION_POLICY: Final[str] = "policy"

    KEY_INDENT_STYLE: Final[str] = "indent_style"
    KEY_INDENT_SIZE: Final[str] = "indent_size"
    KEY_TRIM_TRAILING_WHITESPACE: Final[str] = "trim_trailing_whitespace"
    KEY_INSERT_FINAL_NEWLINE: Final[str] = "insert_final_newline"
    KEY_END_OF_LINE: Final[str] = "end_of_line"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"

    @classmethod
    def policy_keys(cls) -> frozenset[str]:
        """Return the set of keys accepted in the ``[policy]`` table."""
        return frozenset(
            {
                cls.KEY_INDENT_STYLE,
                cls.KEY_INDENT_SIZE,
                cls.KEY_TRIM_TRAILING_WHITESPACE,
                cls.KEY_INSERT_FINAL_NEWLINE,
                cls.KEY_END_OF_LINE,
            }
        )

    @classmethod
    def files_keys(cls) -> frozenset[str]:
        """Return the set of keys accepted in the ``[files]`` table."""
        return frozenset({cls.KEY_INCLUDE, cls.KEY_EXCLUDE})
