"""Modular-exponentiation sequences rendered as animated ASCII."""

__version__ = "0.1.0"
