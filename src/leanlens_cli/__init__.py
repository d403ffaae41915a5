"""Command-line interface for leanlens."""
