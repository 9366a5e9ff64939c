# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the Vuenify CLI."""
