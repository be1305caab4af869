# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers shared by the validators and the file-level layers."""
