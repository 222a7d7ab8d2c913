# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything CLI subcommands."""
