# topmark:header:start
#
#   project      : ECCheck
#   file         : __init__.py
#   file_relpath : src/eccheck/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for ECCheck.

Sections:
    * [`eccheck.config.policy`][]: the resolved style policy handed to the validators.
    * [`eccheck.config.io`][]: discovery and TOML loading of a single flat config file.
    * [`eccheck.config.logging`][]: logging setup with a TRACE level.
"""

from __future__ import annotations
