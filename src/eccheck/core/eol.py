# topmark:header:start
#
#   project      : ECCheck
#   file         : eol.py
#   file_relpath : src/eccheck/core/eol.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""End-of-line kinds and their terminator sequences.

The lookup is total: any value that is not one of ``lf``, ``cr`` or ``crlf``
resolves to the empty string, which the validators read as "no end-of-line
constraint configured".
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from eccheck.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping


class EndOfLine(KeyedStrEnum):
    """Line terminator conventions."""

    LF = ("lf", "Line feed (\\n)")
    CR = ("cr", "Carriage return (\\r)")
    CRLF = ("crlf", "Carriage return + line feed (\\r\\n)")

    @property
    def char(self) -> str:
        """Return the literal terminator sequence for this kind."""
        return EOL_CHARS[self]


EOL_CHARS: Final[Mapping[EndOfLine, str]] = MappingProxyType(
    {
        EndOfLine.LF: "\n",
        EndOfLine.CR: "\r",
        EndOfLine.CRLF: "\r\n",
    }
)


def get_eol_char(kind: object) -> str:
    r"""Return the terminator sequence for an end-of-line kind.

    Args:
        kind (object): ``"lf"``, ``"cr"``, ``"crlf"`` (case-insensitive), an
            [`EndOfLine`][eccheck.core.eol.EndOfLine] member, or anything else.

    Returns:
        str: ``"\n"``, ``"\r"``, ``"\r\n"``, or ``""`` for unset/unknown kinds.
    """
    eol: EndOfLine | None = EndOfLine.parse(kind)
    if eol is None:
        return ""
    return EOL_CHARS[eol]
