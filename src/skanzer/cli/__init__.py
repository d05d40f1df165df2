"""Command-line interface for Skanzer."""
