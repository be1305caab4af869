# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ECCheck package.

ECCheck verifies that text files conform to a declarative formatting policy
(indentation, trailing whitespace, final newline, line endings). The rule
predicates live in [`eccheck.validators`][]; file discovery, reporting and the
CLI are thin layers on top of them.
"""

from __future__ import annotations
