"""Tranclator: dictionary-based word substitution translator."""

__version__ = "0.1.0"
