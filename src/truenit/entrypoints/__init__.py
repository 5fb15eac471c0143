"""Entry points for truenit (command-line interface)."""
