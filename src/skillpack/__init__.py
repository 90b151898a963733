"""Validate and install documentation bundles."""

__version__ = "0.3.1"
