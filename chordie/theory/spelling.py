"""
chordie.theory.spelling
~~~~~~~~~~~~~~~~~~~~~~~

Pitch class ↔ note name mappings.

Every place a pitch class becomes display text (chord roots, slash
basses, single held notes) goes through :func:`spell`, which picks
between an all-sharps and an all-flats table based on the selected
key signature.  The matching logic never looks at spelling.
"""

from __future__ import annotations

import re
from typing import Final, Optional

from chordie.config import N_PITCH_CLASSES

# ── Spelling tables ──────────────────────────────────────────────────
SHARP_NAMES: Final[tuple[str, ...]] = (
    "C", "C#", "D", "D#", "E", "F",
    "F#", "G", "G#", "A", "A#", "B",
)
"""Pitch classes 0–11 spelled with sharps."""

FLAT_NAMES: Final[tuple[str, ...]] = (
    "C", "Db", "D", "Eb", "E", "F",
    "Gb", "G", "Ab", "A", "Bb", "B",
)
"""Pitch classes 0–11 spelled with flats."""

# C is included: it has no accidentals, but black keys read as flats there.
FLAT_KEYS: Final[frozenset[str]] = frozenset(
    {"C", "F", "Bb", "Eb", "Ab", "Db", "Gb"}
)
"""Key signatures that select :data:`FLAT_NAMES`."""

SHARP_KEYS: Final[frozenset[str]] = frozenset(
    {"G", "D", "A", "E", "B", "F#"}
)
"""Key signatures that select :data:`SHARP_NAMES`."""

KEY_SIGNATURES: Final[frozenset[str]] = FLAT_KEYS | SHARP_KEYS
"""All 13 recognised key-signature tokens."""

# Enharmonic equivalence: Db and C# both map to 1, etc.
NOTE_TO_PC: Final[dict[str, int]] = {
    'C': 0, 'C#': 1, 'Db': 1, 'D': 2, 'D#': 3, 'Eb': 3,
    'E': 4, 'F': 5, 'F#': 6, 'Gb': 6, 'G': 7, 'G#': 8,
    'Ab': 8, 'A': 9, 'A#': 10, 'Bb': 10, 'B': 11,
}

_NOTE_NAME_RE: Final = re.compile(r'^([A-G][#b]?)(-?\d+)$')


def prefers_flats(key: Optional[str]) -> bool:
    """Return *True* if *key* selects the flats table.

    Unknown tokens and *None* fall back to sharps.
    """
    return key in FLAT_KEYS


def spell(pitch_class: int, key: Optional[str] = None) -> str:
    """Spell a pitch class as a letter name with accidental.

    Examples
    --------
    >>> spell(3, "E")
    'D#'
    >>> spell(3, "Eb")
    'Eb'
    >>> spell(1)
    'C#'

    Parameters
    ----------
    pitch_class : int
        Any integer; reduced modulo 12.
    key : str, optional
        Key-signature token, e.g. ``'Bb'`` or ``'F#'``.

    Returns
    -------
    str
    """
    table = FLAT_NAMES if prefers_flats(key) else SHARP_NAMES
    return table[int(pitch_class) % N_PITCH_CLASSES]


def note_name_to_midi(name: str) -> int:
    """Convert scientific pitch notation to a MIDI note number.

    Middle C is ``'C4'`` (60).  Sharps and flats are both accepted, so
    ``'C#4'`` and ``'Db4'`` both give 61.

    Raises
    ------
    ValueError
        If *name* is not a letter, optional accidental and octave.
    """
    match = _NOTE_NAME_RE.match(name.strip())
    if not match:
        raise ValueError(f"Invalid note name: {name!r}")
    note, octave = match.groups()
    return (int(octave) + 1) * N_PITCH_CLASSES + NOTE_TO_PC[note]


def midi_to_note_name(note: int, key: Optional[str] = None) -> str:
    """Spell a MIDI note number with its octave, e.g. ``61 → 'C#4'``."""
    octave = note // N_PITCH_CLASSES - 1
    return f"{spell(note, key)}{octave}"
