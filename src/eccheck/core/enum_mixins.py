# topmark:header:start
#
#   project      : ECCheck
#   file         : enum_mixins.py
#   file_relpath : src/eccheck/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums with tolerant parsing.

Policy values arrive as loosely typed strings (from TOML, CLI flags, or a
caller's own configuration layer). ``KeyedStrEnum.parse`` maps such a token
to a member, or ``None`` when the token is not recognized, so callers can
treat unknown values as "not configured".

Example:
    ```python
    class OutputTarget(KeyedStrEnum):
        FILE = ("file", "Write to file")
        STDOUT = ("stdout", "Write to STDOUT", ("-",))

    assert OutputTarget.parse(" File ") is OutputTarget.FILE
    assert OutputTarget.parse("-") is OutputTarget.STDOUT
    assert OutputTarget.parse("nope") is None
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        """Return the machine key."""
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: object) -> _KS | None:
        """Parse a token into an enum member.

        Matches the stable key, the member name, and any configured aliases,
        case-insensitively. Non-string input never matches.

        Args:
            raw (object): Candidate token, typically a ``str`` or ``None``.

        Returns:
            _KS | None: The matching member, or ``None``.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        token: str = _norm_token(raw)
        if not token:
            return None

        for m in cls:
            if token in (_norm_token(m.value), _norm_token(m.name)):
                return m
            if any(token == _norm_token(a) for a in m.aliases):
                return m
        return None
