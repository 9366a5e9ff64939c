# topmark:header:start
#
#   project      : Vuenify
#   file         : __init__.py
#   file_relpath : src/vuenify/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template handling: SFC block location, markup scanning and document edits."""

from __future__ import annotations

from vuenify.template.scanner import classify_prop, scan_elements
from vuenify.template.sfc import TemplateBlock, find_template_block, whole_document_block
from vuenify.template.transformer import apply_replacements, format_replacements, format_text

__all__ = [
    "TemplateBlock",
    "apply_replacements",
    "classify_prop",
    "find_template_block",
    "format_replacements",
    "format_text",
    "scan_elements",
    "whole_document_block",
]
