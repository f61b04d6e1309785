"""Markdown rendering of definitions for hover content."""

from collections.abc import Iterable

from spellsp.services.definitions.base import Definition, Meaning, WordSense

UNKNOWN_WORD = "Unknown..."
UNKNOWN_PHONETIC = "no pronunciation found..."


def render_sense(sense: WordSense) -> str:
    out = ""
    if sense.definition is not None:
        out += f"- `Definition`: {sense.definition}\n"
    if sense.example is not None:
        out += f"- `Example`: {sense.example}\n"
    return out


def render_meaning(meaning: Meaning) -> str:
    out = ""
    if meaning.part_of_speech is not None:
        out += f"(_{meaning.part_of_speech}_): \n\n"
    for sense in meaning.definitions:
        out += render_sense(sense) + "\n"
    return out


def render_definition(definition: Definition) -> str:
    word = definition.word if definition.word is not None else UNKNOWN_WORD
    phonetic = definition.phonetic if definition.phonetic is not None else UNKNOWN_PHONETIC
    out = f"# {word} ({phonetic})\n"
    if definition.origin is not None:
        out += f"origin: {definition.origin}\n"
    out += "## Meanings: \n"
    for meaning in definition.meanings:
        out += render_meaning(meaning) + "\n"
    return out


def render_definitions(definitions: Iterable[Definition]) -> str:
    """Render definitions in order into one hover document."""
    return "".join(render_definition(d) + "\n" for d in definitions)
