"""CLI subcommands for poaclock."""
