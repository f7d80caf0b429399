"""Command-line interface for new-component."""
