"""Command line interface for Genesis Alpha."""
