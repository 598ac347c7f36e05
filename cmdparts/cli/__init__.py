"""Command-line interface for cmdparts."""
