"""Command line interface for spellsp."""
