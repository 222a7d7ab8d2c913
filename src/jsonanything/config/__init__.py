# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for JSON Anything.

Public modules:
    - jsonanything.config.logging: TRACE-aware, chalk-colored logging
    - jsonanything.config.model: the immutable `Config` snapshot
    - jsonanything.config.io: TOML discovery, loading and layering
    - jsonanything.config.keys: TOML section/key names
"""

from __future__ import annotations
