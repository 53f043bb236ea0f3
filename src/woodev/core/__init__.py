"""Core modules for woodev."""
