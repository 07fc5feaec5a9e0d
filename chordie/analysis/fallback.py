"""
chordie.analysis.fallback
~~~~~~~~~~~~~~~~~~~~~~~~~

Graceful degradation when no template clears the acceptance gate.

Tier 1 looks for complete triads hiding in the cluster (polychords
such as ``C + Em``).  Tier 2 always answers: it guesses the most
plausible root and lists every sounding interval against it.
"""

from __future__ import annotations

import logging
from typing import Final, List, Optional, Sequence, Tuple

import numpy as np

from chordie.config import BASS_ROOT_BONUS, N_PITCH_CLASSES
from chordie.data.notes import pitch_class_vector
from chordie.theory.intervals import ROOT_WEIGHTS, interval_name
from chordie.theory.spelling import spell
from chordie.theory.templates import ChordTemplate, get_template, template_vector

logger = logging.getLogger(__name__)

# Checked in this order at every root.
TRIAD_TEMPLATES: Final[Tuple[ChordTemplate, ...]] = tuple(
    get_template(symbol) for symbol in ("", "m", "aug", "dim")
)


def find_overlapping_triads(
    pitch_classes: Sequence[int],
    key: Optional[str] = None,
) -> List[str]:
    """Every complete major/minor/augmented/diminished triad present.

    Results are ordered by root ascending, then major, minor,
    augmented, diminished.

    Examples
    --------
    >>> find_overlapping_triads([0, 4, 7, 11])
    ['C', 'Em']
    """
    chroma = pitch_class_vector(pitch_classes)
    triads: List[str] = []
    for root in range(N_PITCH_CLASSES):
        for template in TRIAD_TEMPLATES:
            if not (template_vector(template, root) & ~chroma).any():
                triads.append(spell(root, key) + template.symbol)
    return triads


def find_best_root(
    pitch_classes: Sequence[int],
    bass_pitch_class: int,
    enforce_root: bool = False,
) -> int:
    """Guess the root of an unnamed cluster.

    Each sounding pitch class is scored as a root by summing
    :data:`~chordie.theory.intervals.ROOT_WEIGHTS` over the distances
    to every sounding pitch class, plus ``BASS_ROOT_BONUS`` for the
    bass.  The first maximum in ascending order wins.  With
    *enforce_root* the bass is returned unchanged.
    """
    bass_pitch_class %= N_PITCH_CLASSES
    if enforce_root:
        return bass_pitch_class

    pcs = np.flatnonzero(pitch_class_vector(pitch_classes))
    scores = np.array(
        [ROOT_WEIGHTS[(pcs - root) % N_PITCH_CLASSES].sum() for root in pcs]
    )
    scores[pcs == bass_pitch_class] += BASS_ROOT_BONUS
    # argmax returns the first occurrence, i.e. the lowest pitch class.
    return int(pcs[int(np.argmax(scores))])


def build_interval_analysis(
    pitch_classes: Sequence[int],
    root: int,
    key: Optional[str] = None,
) -> str:
    """``'<root>(<interval> …)'`` over every pitch class, ascending.

    >>> build_interval_analysis([0, 1, 2], 2)
    'D(b7 7 R)'
    """
    pcs = np.flatnonzero(pitch_class_vector(pitch_classes))
    names = [interval_name(int(pc) - root) for pc in pcs]
    return f"{spell(root, key)}({' '.join(names)})"


def resolve_fallback(
    pitch_classes: Sequence[int],
    bass_pitch_class: int,
    enforce_root: bool = False,
    key: Optional[str] = None,
) -> Tuple[str, str]:
    """Run Tier 1 then Tier 2.

    Returns
    -------
    tuple[str, str]
        Non-empty label and the tier that produced it, ``'triads'`` or
        ``'intervals'``.
    """
    triads = find_overlapping_triads(pitch_classes, key)
    if len(triads) >= 2:
        logger.debug(f"Fallback tier 1: overlapping triads {triads}")
        return f"{triads[0]} + {triads[1]}", "triads"
    if len(triads) == 1:
        logger.debug(f"Fallback tier 1: single triad {triads[0]}")
        return triads[0], "triads"

    root = find_best_root(pitch_classes, bass_pitch_class, enforce_root)
    logger.debug(f"Fallback tier 2: interval analysis from root {root}")
    return build_interval_analysis(pitch_classes, root, key), "intervals"
