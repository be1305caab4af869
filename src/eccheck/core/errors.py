# topmark:header:start
#
#   project      : ECCheck
#   file         : errors.py
#   file_relpath : src/eccheck/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised outside the CLI layer.

The CLI translates these into Click exceptions with exit codes (see
[`eccheck.cli.errors`][]). Rule violations are *not* exceptions; validators
return them as values.
"""

from __future__ import annotations


class EccheckDomainError(Exception):
    """Base class for ECCheck domain errors."""


class ConfigError(EccheckDomainError):
    """A configuration file could not be read or parsed."""


class PatternDefectError(EccheckDomainError, RuntimeError):
    """A built-in matching pattern failed to compile.

    Patterns are fixed at development time, so this signals a programming
    defect and is never turned into a rule violation.
    """
