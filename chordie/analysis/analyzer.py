"""
chordie.analysis.analyzer
~~~~~~~~~~~~~~~~~~~~~~~~~

Candidate analysis: score every (root, template) pair against the
sounding pitch classes and rank the survivors.

Ranking lives in one comparator, :func:`compare_matches`, applied with
a stable sort.  Keys, in order:

1. score, where scores closer than ``SCORE_TIE_TOLERANCE`` are tied;
2. coverage, where coverages closer than ``COVERAGE_TIE_TOLERANCE`` are tied;
3. template priority;
4. a root equal to the bass pitch class;
5. generation order (root ascending, then database order).
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from chordie.config import (
    COVERAGE_TIE_TOLERANCE,
    EXTRA_NOTE_PENALTY,
    MIN_PARTIAL_COVERAGE,
    N_PITCH_CLASSES,
    SCORE_TIE_TOLERANCE,
)
from chordie.data.notes import pitch_class_vector
from chordie.theory.templates import CHORD_TEMPLATES, ChordTemplate


@dataclass(frozen=True)
class ChordMatch:
    """A template placed on a root and scored against the input.

    Parameters
    ----------
    root : int
        Candidate root pitch class.
    template : ChordTemplate
        The template being tested.
    matched_intervals : tuple[int, ...]
        Template intervals whose pitch class is sounding.
    coverage : float
        ``len(matched_intervals) / template.size``.
    exactness : float
        ``max(0, 1 - 0.2 * extra)`` where *extra* counts sounding pitch
        classes the template does not explain.
    score : float
        ``coverage * template.priority * exactness``.
    bass_is_root : bool
        Whether *root* is the bass pitch class (final tie-break only).
    """

    root: int
    template: ChordTemplate
    matched_intervals: tuple[int, ...]
    coverage: float
    exactness: float
    score: float
    bass_is_root: bool = False

    @property
    def matched_pitch_classes(self) -> frozenset[int]:
        return frozenset(
            (self.root + i) % N_PITCH_CLASSES for i in self.matched_intervals
        )


def match_template(
    root: int,
    template: ChordTemplate,
    chroma: np.ndarray,
    bass_pitch_class: int,
) -> ChordMatch | None:
    """Score one (root, template) pair.

    Returns *None* when the pair fails the coverage policy: complete
    coverage for ``requires_all`` templates, ``MIN_PARTIAL_COVERAGE``
    otherwise.
    """
    matched = tuple(
        i for i in template.intervals if chroma[(root + i) % N_PITCH_CLASSES]
    )
    coverage = len(matched) / template.size

    if template.requires_all and coverage < 1.0:
        return None
    if not template.requires_all and coverage < MIN_PARTIAL_COVERAGE:
        return None

    extra = int(chroma.sum()) - len(matched)
    exactness = max(0.0, 1.0 - extra * EXTRA_NOTE_PENALTY)
    return ChordMatch(
        root=root,
        template=template,
        matched_intervals=matched,
        coverage=coverage,
        exactness=exactness,
        score=coverage * template.priority * exactness,
        bass_is_root=root == bass_pitch_class,
    )


def compare_matches(a: ChordMatch, b: ChordMatch) -> int:
    """Three-way comparator; negative means *a* ranks ahead of *b*."""
    if abs(a.score - b.score) >= SCORE_TIE_TOLERANCE:
        return -1 if a.score > b.score else 1
    if abs(a.coverage - b.coverage) >= COVERAGE_TIE_TOLERANCE:
        return -1 if a.coverage > b.coverage else 1
    if a.template.priority != b.template.priority:
        return -1 if a.template.priority > b.template.priority else 1
    if a.bass_is_root != b.bass_is_root:
        return -1 if a.bass_is_root else 1
    return 0


def rank_matches(matches: Iterable[ChordMatch]) -> List[ChordMatch]:
    """Stable sort of *matches*, best first."""
    return sorted(matches, key=functools.cmp_to_key(compare_matches))


def analyze(
    pitch_classes: Sequence[int],
    enforce_root: bool,
    bass_pitch_class: int,
    templates: Sequence[ChordTemplate] = CHORD_TEMPLATES,
) -> List[ChordMatch]:
    """Score every template at every candidate root.

    Parameters
    ----------
    pitch_classes : Sequence[int]
        Sounding pitch classes (any order, duplicates ignored).
    enforce_root : bool
        If *True*, only *bass_pitch_class* is tried as a root.
    bass_pitch_class : int
        Pitch class of the lowest held note.
    templates : Sequence[ChordTemplate]
        Template database (default: :data:`CHORD_TEMPLATES`).

    Returns
    -------
    list[ChordMatch]
        Accepted matches, best first.  Empty if nothing passes the
        coverage policy.
    """
    chroma = pitch_class_vector(pitch_classes)
    bass_pitch_class = int(bass_pitch_class) % N_PITCH_CLASSES
    if enforce_root:
        roots = [bass_pitch_class]
    else:
        roots = [int(pc) for pc in np.flatnonzero(chroma)]

    matches: List[ChordMatch] = []
    for root in roots:
        for template in templates:
            match = match_template(root, template, chroma, bass_pitch_class)
            if match is not None:
                matches.append(match)

    return rank_matches(matches)
