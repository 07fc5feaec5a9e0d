"""
chordie.data.batch
~~~~~~~~~~~~~~~~~~

Label whole tables of held-note snapshots at once.

A table is any CSV / DataFrame with a column of note lists.  Cells may
hold MIDI numbers or note names separated by spaces or commas, e.g.
``"60 64 67"`` or ``"C4,E4,G4"``.  Empty cells resolve to ``''``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

import pandas as pd

from chordie.core import detect_chord
from chordie.theory.spelling import note_name_to_midi

_SEPARATOR_RE = re.compile(r"[\s,;]+")


def parse_note_token(token: str) -> int:
    """Parse a single MIDI number (``'61'``) or note name (``'C#4'``).

    Raises
    ------
    ValueError
        If *token* is neither.
    """
    token = token.strip()
    if re.fullmatch(r"-?\d+", token):
        return int(token)
    return note_name_to_midi(token)


def parse_note_list(cell) -> List[int]:
    """Split a table cell into MIDI note numbers.

    ``NaN`` / ``None`` / blank cells give an empty list.
    """
    if cell is None or (isinstance(cell, float) and pd.isna(cell)):
        return []
    return [parse_note_token(tok) for tok in _SEPARATOR_RE.split(str(cell)) if tok]


def load_note_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV of note snapshots as strings (no numeric coercion)."""
    return pd.read_csv(path, dtype=str, keep_default_na=True)


def label_note_table(
    frame: pd.DataFrame,
    column: str = "notes",
    enforce_root_note: bool = False,
    key: Optional[str] = None,
) -> pd.DataFrame:
    """Return a copy of *frame* with a ``chord`` column appended.

    Parameters
    ----------
    frame : pd.DataFrame
        Table with one snapshot per row.
    column : str
        Name of the column holding the note lists.
    enforce_root_note : bool
        Passed through to :func:`~chordie.core.detect_chord`.
    key : str, optional
        Key-signature token for spelling.

    Raises
    ------
    KeyError
        If *column* is missing.
    ValueError
        If a cell contains an unparseable token.
    """
    if column not in frame.columns:
        raise KeyError(f"Column {column!r} not found; have {list(frame.columns)}")

    labelled = frame.copy()
    labelled["chord"] = [
        detect_chord(parse_note_list(cell), enforce_root_note, key)
        for cell in frame[column]
    ]
    return labelled
