"""chordie.theory — Musical-domain knowledge: spelling, intervals, chord templates."""

from chordie.theory.intervals import (
    EXTENSION_SYMBOLS,
    INTERVAL_NAMES,
    ROOT_WEIGHTS,
    extension_symbol,
    interval_name,
    semitones_above,
)
from chordie.theory.spelling import (
    FLAT_KEYS,
    FLAT_NAMES,
    KEY_SIGNATURES,
    SHARP_KEYS,
    SHARP_NAMES,
    midi_to_note_name,
    note_name_to_midi,
    prefers_flats,
    spell,
)
from chordie.theory.templates import (
    CHORD_TEMPLATES,
    ChordTemplate,
    get_template,
    template_vector,
)

__all__: list[str] = [
    "EXTENSION_SYMBOLS",
    "INTERVAL_NAMES",
    "ROOT_WEIGHTS",
    "extension_symbol",
    "interval_name",
    "semitones_above",
    "FLAT_KEYS",
    "FLAT_NAMES",
    "KEY_SIGNATURES",
    "SHARP_KEYS",
    "SHARP_NAMES",
    "midi_to_note_name",
    "note_name_to_midi",
    "prefers_flats",
    "spell",
    "CHORD_TEMPLATES",
    "ChordTemplate",
    "get_template",
    "template_vector",
]
