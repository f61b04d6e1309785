"""Languages with Hunspell dictionaries in the wooorm/dictionaries collection."""

from enum import Enum


class Language(str, Enum):
    """Dictionary language, valued by its wooorm/dictionaries directory name."""

    EN = "en"
    EN_AU = "en-AU"
    EN_CA = "en-CA"
    EN_GB = "en-GB"
    EN_ZA = "en-ZA"
    DE = "de"
    DE_AT = "de-AT"
    DE_CH = "de-CH"
    ES = "es"
    FR = "fr"
    IT = "it"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    PT_PT = "pt-PT"
    RU = "ru"
    SV = "sv"

    @property
    def dictionary_dir(self) -> str:
        """Directory name of this language in the dictionary collection and on disk."""
        return self.value
