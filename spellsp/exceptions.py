"""Exceptions raised by spellsp services."""


class SpellspError(Exception):
    """Base class for spellsp errors."""


class DictionaryProvisionError(SpellspError):
    """A dictionary asset could not be fetched or persisted."""


class DictionaryLoadError(SpellspError):
    """The dictionary assets exist but the spellcheck engine rejected them."""


class DefinitionLookupError(SpellspError):
    """A definition lookup failed (network error, bad status, malformed payload)."""


class DefinitionNotFoundError(DefinitionLookupError):
    """The definitions endpoint has no entry for the word."""
