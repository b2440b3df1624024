"""Command-line interface for ydict."""
