"""Command line interface for yes-or-no."""
