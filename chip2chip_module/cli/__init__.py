"""Command-line interface for the Chip2Chip module wrapper."""
