"""Command-line interface for dirdiff."""
