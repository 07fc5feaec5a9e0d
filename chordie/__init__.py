"""
chordie
~~~~~~~

Pitch-set to chord-name resolution for live MIDI input.

Quick-start::

    import chordie

    chordie.detect_chord([60, 64, 67])                # 'C'
    chordie.detect_chord([58, 63, 67], key="Eb")      # 'Eb/Bb'
    chordie.detect_chord([59, 62, 65, 68])            # 'Bdim7'

    # Decision trail (accepted match, or which fallback answered)
    result = chordie.resolve([60, 61, 62])
    result.label, result.stage                        # ('D(b7 7 R)', 'intervals')

    # Spelling helpers
    chordie.spell(3, "Eb")                            # 'Eb'
    chordie.note_name_to_midi("C#4")                  # 61

Subpackages
-----------
theory    Spelling tables, interval tables, chord template database.
analysis  Candidate ranking, name building, fallback strategies.
data      Input normalisation and batch labelling of note tables.
"""

from __future__ import annotations

__version__: str = "0.1.0"

# ── Core pipeline ────────────────────────────────────────────────────
from chordie.core import Resolution, detect_chord, resolve

# ── Analysis ─────────────────────────────────────────────────────────
from chordie.analysis.analyzer import ChordMatch, analyze
from chordie.analysis.naming import build_chord_name

# ── Data ─────────────────────────────────────────────────────────────
from chordie.data.batch import label_note_table, load_note_table
from chordie.data.notes import NoteSet

# ── Theory ───────────────────────────────────────────────────────────
from chordie.theory.spelling import (
    KEY_SIGNATURES,
    midi_to_note_name,
    note_name_to_midi,
    spell,
)
from chordie.theory.templates import CHORD_TEMPLATES, ChordTemplate, get_template

# ── Config (re-export constants for convenience) ─────────────────────
from chordie.config import ACCEPT_COVERAGE, ACCEPT_SCORE, MIN_PARTIAL_COVERAGE

__all__: list[str] = [
    # pipeline
    "Resolution",
    "detect_chord",
    "resolve",
    # analysis
    "ChordMatch",
    "analyze",
    "build_chord_name",
    # data
    "NoteSet",
    "label_note_table",
    "load_note_table",
    # theory
    "CHORD_TEMPLATES",
    "ChordTemplate",
    "KEY_SIGNATURES",
    "get_template",
    "midi_to_note_name",
    "note_name_to_midi",
    "spell",
    # config
    "ACCEPT_COVERAGE",
    "ACCEPT_SCORE",
    "MIN_PARTIAL_COVERAGE",
]
