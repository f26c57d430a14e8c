"""Command-line interface for nbsanity."""
