# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck CLI subcommands."""
