"""Presentation helpers shared by CLI commands."""
