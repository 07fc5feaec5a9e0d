"""
chordie.core
~~~~~~~~~~~~

High-level resolver: the "glue" that connects normalisation,
candidate analysis, naming and the fallback tiers into one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from chordie.analysis.analyzer import ChordMatch, analyze
from chordie.analysis.fallback import resolve_fallback
from chordie.analysis.naming import build_chord_name
from chordie.config import ACCEPT_COVERAGE, ACCEPT_SCORE
from chordie.data.notes import NoteSet
from chordie.theory.spelling import spell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of one resolver call.

    Attributes
    ----------
    label : str
        Display string (``''`` for no notes).
    stage : str
        Which step produced *label*: ``'empty'``, ``'single'``,
        ``'template'``, ``'triads'`` or ``'intervals'``.
    match : ChordMatch, optional
        The accepted match when *stage* is ``'template'``.
    """

    label: str
    stage: str
    match: Optional[ChordMatch] = None


def is_accepted(match: ChordMatch) -> bool:
    """Acceptance gate for the top-ranked match."""
    return match.score > ACCEPT_SCORE or match.coverage >= ACCEPT_COVERAGE


def resolve(
    notes: Iterable[int],
    enforce_root_note: bool = False,
    key: Optional[str] = None,
) -> Resolution:
    """Resolve held notes to a chord label, keeping the decision trail.

    Parameters
    ----------
    notes : Iterable[int]
        MIDI note numbers currently held, in any order, duplicates allowed.
    enforce_root_note : bool
        If *True*, the lowest note's pitch class is the only root tried.
    key : str, optional
        Key-signature token choosing sharp or flat spelling.

    Returns
    -------
    Resolution
    """
    note_set = NoteSet.from_notes(notes)
    if not note_set:
        return Resolution("", "empty")

    pitch_classes = note_set.pitch_classes
    if len(pitch_classes) == 1:
        return Resolution(spell(pitch_classes[0], key), "single")

    bass = note_set.bass_pitch_class
    matches = analyze(pitch_classes, enforce_root_note, bass)
    logger.debug(f"{len(matches)} candidate matches for {pitch_classes}")

    if matches and is_accepted(matches[0]):
        best = matches[0]
        logger.debug(
            f"Accepted {best.template.name} at root {best.root} "
            f"(score={best.score:.1f}, coverage={best.coverage:.2f})"
        )
        label = build_chord_name(best, pitch_classes, bass, key)
        return Resolution(label, "template", best)

    label, stage = resolve_fallback(pitch_classes, bass, enforce_root_note, key)
    return Resolution(label, stage)


def detect_chord(
    notes: Iterable[int],
    enforce_root_note: bool = False,
    key: Optional[str] = None,
) -> str:
    """Name the chord formed by the held MIDI notes.

    Examples
    --------
    >>> detect_chord([60, 64, 67])
    'C'
    >>> detect_chord([58, 63, 67], key="Eb")
    'Eb/Bb'
    >>> detect_chord([])
    ''

    Parameters
    ----------
    notes : Iterable[int]
        MIDI note numbers (nominally 0–127).
    enforce_root_note : bool
        Force the chord root to the lowest held note's pitch class.
    key : str, optional
        One of the 13 key-signature tokens; anything else spells with
        sharps.

    Returns
    -------
    str
        The chord label.  Never raises for integer input.
    """
    return resolve(notes, enforce_root_note, key).label
