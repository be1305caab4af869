# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ECCheck."""
