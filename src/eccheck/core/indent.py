# topmark:header:start
#
#   project      : ECCheck
#   file         : indent.py
#   file_relpath : src/eccheck/core/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation styles."""

from __future__ import annotations

from eccheck.core.enum_mixins import KeyedStrEnum


class IndentStyle(KeyedStrEnum):
    """Indentation character."""

    SPACE = ("space", "Indent with spaces", ("spaces",))
    TAB = ("tab", "Indent with tabs", ("tabs",))
