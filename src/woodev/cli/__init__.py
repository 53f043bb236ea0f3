"""Command-line interface for woodev."""
