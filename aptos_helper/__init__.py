"""Aptos Community Helper Bot."""

__version__ = "1.0.0"
