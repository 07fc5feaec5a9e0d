"""
chordie.theory.intervals
~~~~~~~~~~~~~~~~~~~~~~~~

Semitone-distance lookups shared by the name builder and the
fallback strategies.
"""

from __future__ import annotations

from typing import Final, Optional

import numpy as np

from chordie.config import N_PITCH_CLASSES

# ── Extension symbols ────────────────────────────────────────────────
# Distances 0, 4 and 7 are chord tones and never render as extensions.
EXTENSION_SYMBOLS: Final[dict[int, str]] = {
    1: "b9",
    2: "9",
    3: "#9",
    5: "11",
    6: "#11",
    8: "b13",
    9: "13",
    10: "7",
    11: "maj7",
}
"""Semitones above the root → parenthesised extension symbol."""

# ── Interval names ───────────────────────────────────────────────────
INTERVAL_NAMES: Final[tuple[str, ...]] = (
    "R", "b2", "2", "b3", "3", "4",
    "b5", "5", "#5", "6", "b7", "7",
)
"""Interval label for every semitone distance 0–11."""

# ── Root importance ──────────────────────────────────────────────────
ROOT_WEIGHTS: Final[np.ndarray] = np.array(
    [10, 1, 4, 8, 8, 3, 1, 9, 1, 4, 6, 6], dtype=np.int64
)
"""How strongly a pitch class at each distance supports a candidate root."""
ROOT_WEIGHTS.setflags(write=False)


def semitones_above(pitch_class: int, root: int) -> int:
    """Distance from *root* up to *pitch_class*, in ``0..11``."""
    return (int(pitch_class) - int(root)) % N_PITCH_CLASSES


def extension_symbol(distance: int) -> Optional[str]:
    """Return the extension symbol for *distance*, or *None* if it has none."""
    return EXTENSION_SYMBOLS.get(distance % N_PITCH_CLASSES)


def interval_name(distance: int) -> str:
    return INTERVAL_NAMES[distance % N_PITCH_CLASSES]
