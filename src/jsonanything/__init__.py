# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything package.

JSON Anything converts JSON-like records (a mapping, or a sequence of mappings)
into text in a range of target notations: tables (CSV, HTML, Markdown), SQL
inserts, struct/class declarations, and naive structure dumps. It exposes a
small typed API (``jsonanything.api``) and a CLI (``jsonanything``).
"""

from __future__ import annotations
