"""
chordie.data.notes
~~~~~~~~~~~~~~~~~~

Input normalisation: raw held-note numbers → the structures the
analyzer works on.

No range validation happens here.  Note numbers outside 0–127 are the
ingestion layer's problem; ``mod 12`` is well defined for any integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from chordie.config import N_PITCH_CLASSES


@dataclass(frozen=True)
class NoteSet:
    """Deduplicated, ascending MIDI note numbers for one resolver call."""

    notes: tuple[int, ...]

    @classmethod
    def from_notes(cls, notes: Iterable[int]) -> "NoteSet":
        return cls(tuple(sorted({int(n) for n in notes})))

    def __len__(self) -> int:
        return len(self.notes)

    def __bool__(self) -> bool:
        return bool(self.notes)

    @property
    def bass(self) -> int:
        """Lowest held note.

        Raises
        ------
        IndexError
            If the set is empty.
        """
        return self.notes[0]

    @property
    def bass_pitch_class(self) -> int:
        return self.bass % N_PITCH_CLASSES

    @property
    def pitch_classes(self) -> tuple[int, ...]:
        """Distinct pitch classes, ascending."""
        return tuple(sorted({n % N_PITCH_CLASSES for n in self.notes}))


def pitch_class_vector(pitch_classes: Iterable[int]) -> np.ndarray:
    """Binary ``(12,)`` boolean vector with *pitch_classes* switched on."""
    vec = np.zeros(N_PITCH_CLASSES, dtype=bool)
    idx = [int(pc) % N_PITCH_CLASSES for pc in pitch_classes]
    vec[idx] = True
    return vec
