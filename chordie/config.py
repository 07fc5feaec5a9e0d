"""
chordie.config
~~~~~~~~~~~~~~

Global constants for chord resolution.
Centralises all magic numbers so they can be imported once and
shared across every submodule.
"""

from typing import Final

# ── Pitch space ──────────────────────────────────────────────────────
N_PITCH_CLASSES: Final[int] = 12
"""Number of pitch classes per octave (0 = C … 11 = B)."""

# ── Template matching ───────────────────────────────────────────────
MIN_PARTIAL_COVERAGE: Final[float] = 0.6
"""Lowest coverage at which a partial (9th/11th/13th) template is kept."""

EXTRA_NOTE_PENALTY: Final[float] = 0.2
"""Exactness lost for every input pitch class a template leaves unexplained."""

# ── Ranking ──────────────────────────────────────────────────────────
SCORE_TIE_TOLERANCE: Final[float] = 1.0
"""Scores closer than this are ranked as tied."""

COVERAGE_TIE_TOLERANCE: Final[float] = 0.1
"""Coverages closer than this are ranked as tied."""

# ── Acceptance gate ──────────────────────────────────────────────────
ACCEPT_SCORE: Final[float] = 500.0
"""A best match scoring strictly above this is named directly."""

ACCEPT_COVERAGE: Final[float] = 0.8
"""A best match with at least this coverage is named directly."""

# ── Fallback ─────────────────────────────────────────────────────────
BASS_ROOT_BONUS: Final[int] = 5
"""Bonus added to the bass pitch class when guessing a fallback root."""
