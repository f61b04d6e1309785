"""Spellchecking language server with dictionary definitions on hover."""

__version__ = "0.1.0"
