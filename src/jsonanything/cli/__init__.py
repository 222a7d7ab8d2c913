# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for JSON Anything.

Commands:
    - ``convert``: convert a JSON document into a target format
    - ``formats``: list the available target formats
    - ``version``: show the installed version
"""

from __future__ import annotations
