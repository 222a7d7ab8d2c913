# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across JSON Anything.

The ``jsonanything.core`` package provides the small reusable mechanism every
renderer consumes. It is safe to import from anywhere (API, CLI, renderers,
tests) without pulling in Click or console concerns.

Included modules:

- ``values``
  JavaScript-compatible scalar text (``String(v)``) and JSON normalization.

- ``records``
  The shape sampler: record-set normalization, representative record and
  key union.

- ``types``
  The closed ``TypeTag`` union and the single-sample type inferrer.

- ``fields``
  Field descriptors built once per call from the representative record.

- ``escaping``
  Target-specific escaping (CSV, SQL, shell, URL, HTML).

- ``formats`` / ``enum_mixins``
  The ``TargetFormat`` vocabulary and its parsing helpers.

Design goals:

- Every function here is total: malformed input degrades, it never raises.
- No I/O and no shared mutable state.
"""

from __future__ import annotations
