"""Anvil Connect CLI - bootstrap and manage Anvil Connect deployments."""

__version__ = "0.1.0"
