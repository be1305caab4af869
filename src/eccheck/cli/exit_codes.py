# topmark:header:start
#
#   project      : ECCheck
#   file         : exit_codes.py
#   file_relpath : src/eccheck/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ECCheck CLI.

ECCheck aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`VIOLATIONS_FOUND=2`, which signals that checked files broke the policy. Click
parses options itself and would exit with 2 on usage errors; the CLI group
remaps those to `USAGE_ERROR` so the two never collide.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ECCheck CLI.

    Attributes:
        SUCCESS: All checked files conform.
        FAILURE: Generic failure (non-specific error).
        VIOLATIONS_FOUND: At least one file breaks the policy.
        USAGE_ERROR: Invalid flags/args. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: A file is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: A file could not be read. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    VIOLATIONS_FOUND = 2  # not a sysexits value

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
