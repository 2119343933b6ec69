"""Command-line interface for StrKit."""
