"""chordie.analysis — Candidate ranking, chord naming and fallback strategies."""

from chordie.analysis.analyzer import (
    ChordMatch,
    analyze,
    compare_matches,
    match_template,
    rank_matches,
)
from chordie.analysis.fallback import (
    build_interval_analysis,
    find_best_root,
    find_overlapping_triads,
    resolve_fallback,
)
from chordie.analysis.naming import absorb_ninth, build_chord_name, collect_extensions

__all__: list[str] = [
    "ChordMatch",
    "analyze",
    "compare_matches",
    "match_template",
    "rank_matches",
    "build_interval_analysis",
    "find_best_root",
    "find_overlapping_triads",
    "resolve_fallback",
    "absorb_ninth",
    "build_chord_name",
    "collect_extensions",
]
