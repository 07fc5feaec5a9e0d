"""
chordie.analysis.naming
~~~~~~~~~~~~~~~~~~~~~~~

Turn an accepted :class:`~chordie.analysis.analyzer.ChordMatch` into
its display label: ``root + suffix``, parenthesised extensions for
sounding tones the template does not cover, and ``/bass`` when the
lowest note is not the root.
"""

from __future__ import annotations

from typing import Final, Iterable, List, Optional

from chordie.analysis.analyzer import ChordMatch
from chordie.config import N_PITCH_CLASSES
from chordie.theory.intervals import extension_symbol, semitones_above
from chordie.theory.spelling import spell

# Seventh suffixes that become ninths when a major 2nd is also sounding.
NINTH_UPGRADES: Final[dict[str, str]] = {
    "7": "9",
    "maj7": "maj9",
    "m7": "m9",
    "m(maj7)": "m(maj9)",
}

EXTENSION_SEPARATOR: Final[str] = ","


def collect_extensions(match: ChordMatch, pitch_classes: Iterable[int]) -> List[str]:
    """Extension symbols for sounding pitch classes outside *match*.

    Ordered by distance above the root; distances with no symbol
    (unison, major 3rd, perfect 5th) are dropped.
    """
    covered = match.matched_pitch_classes
    distances = sorted(
        {semitones_above(pc, match.root) for pc in pitch_classes if pc not in covered}
    )
    return [sym for sym in map(extension_symbol, distances) if sym is not None]


def absorb_ninth(suffix: str, extensions: List[str]) -> tuple[str, List[str]]:
    """Fold a ``9`` extension into a seventh suffix.

    Any suffix containing ``7`` swallows the ``9``; the ones listed in
    :data:`NINTH_UPGRADES` are renamed to their ninth form.
    """
    if "9" not in extensions or "7" not in suffix:
        return suffix, extensions
    remaining = [ext for ext in extensions if ext != "9"]
    return NINTH_UPGRADES.get(suffix, suffix), remaining


def build_chord_name(
    match: ChordMatch,
    pitch_classes: Iterable[int],
    bass_pitch_class: int,
    key: Optional[str] = None,
) -> str:
    """Build the display label for an accepted match.

    Examples
    --------
    >>> from chordie.analysis.analyzer import analyze
    >>> best = analyze([0, 2, 4, 7, 11], False, 0)[0]
    >>> build_chord_name(best, [0, 2, 4, 7, 11], 0)
    'Cmaj9'

    Parameters
    ----------
    match : ChordMatch
        The winning candidate.
    pitch_classes : Iterable[int]
        Every sounding pitch class.
    bass_pitch_class : int
        Pitch class of the lowest held note.
    key : str, optional
        Key-signature token used for spelling.

    Returns
    -------
    str
    """
    suffix, extensions = absorb_ninth(
        match.template.symbol, collect_extensions(match, pitch_classes)
    )
    name = spell(match.root, key) + suffix
    if extensions:
        name += f"({EXTENSION_SEPARATOR.join(extensions)})"
    if bass_pitch_class % N_PITCH_CLASSES != match.root:
        name += f"/{spell(bass_pitch_class, key)}"
    return name
