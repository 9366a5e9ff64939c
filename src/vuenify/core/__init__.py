# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, UI-agnostic building blocks (enum helpers, exception hierarchy)."""
