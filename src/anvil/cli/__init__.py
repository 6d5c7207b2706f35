"""Anvil CLI commands and terminal output."""
