# topmark:header:start
#
#   project      : ECCheck
#   file         : constants.py
#   file_relpath : src/eccheck/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ECCHECK_VERSION: str = get_version("eccheck")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "ECCHECK_LOG_LEVEL"

# Config file names, in lookup order.
CONFIG_FILE_NAME: str = "eccheck.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "eccheck"

# Directories that are never checked.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (".git/", ".hg/", ".svn/")

# Characters that make a path argument a glob pattern.
GLOB_CHARS: str = "*?["

# Number of leading bytes inspected for NUL when sniffing binary files.
BINARY_SNIFF_SIZE: int = 8192

UTF8_BOM: str = "\ufeff"

