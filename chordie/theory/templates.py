"""
chordie.theory.templates
~~~~~~~~~~~~~~~~~~~~~~~~

The chord template database.

Each template is a semitone pattern above a root, the suffix printed
after the root name, a priority weight and a coverage policy:

* ``requires_all=True``: triads, sevenths, sixths, adds and altered
  dominants are only named when every tone is sounding.
* ``requires_all=False``: 9th/11th/13th templates may be named from a
  majority of their tones, because real voicings routinely drop some.

The database is an ordered tuple built once at import time.  Order
matters: it is the last tie-break when two matches rank equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np

from chordie.config import N_PITCH_CLASSES


@dataclass(frozen=True)
class ChordTemplate:
    """One entry of the template database.

    Parameters
    ----------
    intervals : tuple[int, ...]
        Distinct semitone offsets above the root, ascending, starting at 0.
    symbol : str
        Display suffix, e.g. ``'m7'``.  Empty for a major triad.
    name : str
        Long descriptive name, e.g. ``'Minor 7th'``.
    priority : int
        Weight multiplied into every match score.
    requires_all : bool
        If *True*, every interval must be present for a match.
    """

    intervals: tuple[int, ...]
    symbol: str
    name: str
    priority: int
    requires_all: bool = True

    def __post_init__(self) -> None:
        if not self.intervals or self.intervals[0] != 0:
            raise ValueError(f"{self.symbol!r}: intervals must start at 0")
        if len(set(self.intervals)) != len(self.intervals):
            raise ValueError(f"{self.symbol!r}: intervals must be distinct")

    @property
    def size(self) -> int:
        return len(self.intervals)


def _t(intervals, symbol, name, priority, requires_all=True) -> ChordTemplate:
    return ChordTemplate(tuple(sorted(intervals)), symbol, name, priority, requires_all)


# ── Database ─────────────────────────────────────────────────────────
CHORD_TEMPLATES: Final[tuple[ChordTemplate, ...]] = (
    # Triads
    _t([0, 4, 7], "", "Major", 1000),
    _t([0, 3, 7], "m", "Minor", 1000),
    _t([0, 4, 8], "aug", "Augmented", 1000),
    _t([0, 3, 6], "dim", "Diminished", 1000),
    _t([0, 5, 7], "sus4", "Suspended 4th", 950),
    _t([0, 2, 7], "sus2", "Suspended 2nd", 950),
    # Sevenths
    _t([0, 4, 7, 11], "maj7", "Major 7th", 900),
    _t([0, 4, 7, 10], "7", "Dominant 7th", 900),
    _t([0, 3, 7, 10], "m7", "Minor 7th", 900),
    _t([0, 3, 7, 11], "m(maj7)", "Minor Major 7th", 850),
    _t([0, 3, 6, 10], "m7b5", "Half Diminished", 850),
    _t([0, 3, 6, 9], "dim7", "Diminished 7th", 850),
    _t([0, 4, 8, 10], "7#5", "Augmented 7th", 800),
    _t([0, 4, 8, 11], "maj7#5", "Major 7th Sharp 5", 800),
    _t([0, 5, 7, 10], "7sus4", "7th Suspended 4th", 750),
    _t([0, 2, 7, 10], "7sus2", "7th Suspended 2nd", 750),
    # Sixths
    _t([0, 4, 7, 9], "6", "Major 6th", 850),
    _t([0, 3, 7, 9], "m6", "Minor 6th", 850),
    _t([0, 4, 7, 9, 2], "6/9", "6th Add 9", 800),
    _t([0, 3, 7, 9, 2], "m6/9", "Minor 6th Add 9", 800),
    # Ninths
    _t([0, 4, 7, 10, 2], "9", "Dominant 9th", 700, False),
    _t([0, 4, 7, 11, 2], "maj9", "Major 9th", 700, False),
    _t([0, 3, 7, 10, 2], "m9", "Minor 9th", 700, False),
    _t([0, 3, 7, 11, 2], "m(maj9)", "Minor Major 9th", 650, False),
    _t([0, 4, 7, 10, 1], "7b9", "7th Flat 9", 650, False),
    _t([0, 4, 7, 10, 3], "7#9", "7th Sharp 9", 650, False),
    # Elevenths
    _t([0, 4, 7, 10, 2, 5], "11", "11th", 600, False),
    _t([0, 3, 7, 10, 2, 5], "m11", "Minor 11th", 600, False),
    _t([0, 4, 7, 10, 6], "7#11", "7th Sharp 11", 580, False),
    _t([0, 4, 7, 11, 6], "maj7#11", "Major 7th Sharp 11", 580, False),
    # Thirteenths
    _t([0, 4, 7, 10, 2, 9], "13", "13th", 550, False),
    _t([0, 3, 7, 10, 2, 9], "m13", "Minor 13th", 550, False),
    _t([0, 4, 7, 10, 8], "7b13", "7th Flat 13", 530, False),
    # Added tones
    _t([0, 4, 7, 2], "add9", "Add 9", 500),
    _t([0, 3, 7, 2], "m(add9)", "Minor Add 9", 500),
    _t([0, 4, 7, 5], "add11", "Add 11", 450),
    _t([0, 4, 7, 6], "add#11", "Add Sharp 11", 450),
    # Altered
    _t([0, 4, 6, 10], "7b5", "7th Flat 5", 600),
    # Power chord
    _t([0, 7], "5", "Power Chord", 100),
)
"""Every chord shape the resolver can name, in tie-break order."""

_SYMBOL_TO_TEMPLATE: Final[dict[str, ChordTemplate]] = {
    template.symbol: template for template in CHORD_TEMPLATES
}


def get_template(symbol: str) -> ChordTemplate:
    """Look up a template by its display suffix.

    Raises
    ------
    KeyError
        If no template uses *symbol*.
    """
    return _SYMBOL_TO_TEMPLATE[symbol]


def template_vector(template: ChordTemplate, root: int = 0) -> np.ndarray:
    """Binary 12-element profile of *template* transposed to *root*.

    Returns
    -------
    np.ndarray, shape ``(12,)``, dtype ``bool``
    """
    vec = np.zeros(N_PITCH_CLASSES, dtype=bool)
    vec[(root + np.asarray(template.intervals)) % N_PITCH_CLASSES] = True
    return vec
