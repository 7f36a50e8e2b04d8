"""Command-line interface for a11ylint."""
