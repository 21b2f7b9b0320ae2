"""CLI command modules registered by pdx_explorer.cli."""
