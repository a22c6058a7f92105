"""Command-line interface for Language Alchemist."""
