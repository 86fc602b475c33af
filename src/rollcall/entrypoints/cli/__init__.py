"""ROLLCALL command-line interface."""
