# topmark:header:start
#
#   project      : JSON Anything
#   file         : __main__.py
#   file_relpath : src/jsonanything/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JSON Anything via ``python -m jsonanything``.

This module delegates directly to :func:`jsonanything.cli.main.cli`, so the
module interface and the ``jsonanything`` console script behave identically.

Examples:
    Convert a JSON file to CSV using the module interface::

        python -m jsonanything convert data.json --to csv
"""

from __future__ import annotations

from jsonanything.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
