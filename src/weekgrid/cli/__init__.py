"""Command-line interface for weekgrid."""
