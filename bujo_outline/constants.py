"""Constants used across the bujo-outline package."""

from __future__ import annotations

import re

# Outline markup
HEADER_SEPARATOR = "──"
INDENT_SIZE = 2
TAB_REPLACEMENT = " " * INDENT_SIZE
MAX_PRIORITY_MARKERS = 3
# A marker run ends at whitespace or at the end of the line.
PRIORITY_PATTERN = re.compile(rf"^(!{{1,{MAX_PRIORITY_MARKERS}}})(?:\s+|$)")

# Locator grammar: indent, symbol, optional modifier, content.
ENTRY_LINE_PATTERN = re.compile(r"^\s*[.\-ox~?>][!*^]?\s*(?P<content>.*)$")

# Line-scoped error messages
UNKNOWN_ENTRY_TYPE = "Unknown entry type"
CONTENT_REQUIRED = "Entry content required"

# Files
JOURNAL_EXTENSIONS = (".bujo", ".txt", ".md")
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 10_000
DEFAULT_OUTPUT_FORMAT = "text"
