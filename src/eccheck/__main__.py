# topmark:header:start
#
#   project      : ECCheck
#   file         : __main__.py
#   file_relpath : src/eccheck/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ECCheck via ``python -m eccheck``.

Delegates to :func:`eccheck.cli.main.cli`, the same entry point as the
``eccheck`` console script.

Examples:
    Check the current tree with LF line endings::

        python -m eccheck check --end-of-line lf .
"""

from __future__ import annotations

from eccheck.cli.main import cli

if __name__ == "__main__":
    cli()
