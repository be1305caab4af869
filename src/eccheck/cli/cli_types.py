# topmark:header:start
#
#   project      : ECCheck
#   file         : cli_types.py
#   file_relpath : src/eccheck/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for ECCheck.

Option values that name an enum member are parsed the same way as the
corresponding TOML values: through
[`KeyedStrEnum.parse`][eccheck.core.enum_mixins.KeyedStrEnum.parse], so keys,
member names and aliases are accepted case-insensitively on both surfaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from eccheck.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

        def fail(
            self,
            message: str,
            param: click.Parameter | None = None,
            ctx: click.Context | None = None,
        ) -> NoReturn: ...

else:
    ParamTypeBase = click.ParamType

KS = TypeVar("KS", bound=KeyedStrEnum)


class EnumChoiceParam(ParamTypeBase, Generic[KS]):
    """Click parameter type converting a token to a `KeyedStrEnum` member.

    Attributes:
        enum_cls (type[KS]): The enum to parse into.
        name (str): Parameter type name shown by Click.
        choices (list[str]): Canonical keys, shown in help and error messages.
        aliases (list[str]): Extra accepted tokens, offered for completion.
    """

    enum_cls: type[KS]
    name: str
    choices: list[str]
    aliases: list[str]

    def __init__(self, enum_cls: type[KS]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices = [m.key for m in enum_cls]
        self.aliases = [a for m in enum_cls for a in m.aliases]

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KS | None:
        """Return the member named by ``value``, or fail with a usage error."""
        if value is None:
            return None
        member: KS | None = self.enum_cls.parse(value)
        if member is None:
            accepted: str = ", ".join(self.choices)
            if self.aliases:
                accepted += f" (aliases: {', '.join(self.aliases)})"
            self.fail(f"Invalid value {value!r}. Must be one of: {accepted}", param, ctx)
        return member

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the canonical keys as ``[a|b|c]`` in help output."""
        return f"[{'|'.join(self.choices)}]"

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete keys and aliases.

        Bash: `eval "$(_ECCHECK_COMPLETE=bash_source eccheck)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(token)
            for token in (*self.choices, *self.aliases)
            if token.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
