"""Constants for cmdparts."""

# JSON formatting
JSON_INDENT = 2  # Indentation level for JSON output

# File Encoding
DEFAULT_ENCODING = "utf-8"  # Default file encoding for all read/write operations
