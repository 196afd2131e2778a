"""CLI subcommands (bloomsieve)."""
