"""Entry points for ROLLCALL (the command-line view)."""
