"""chordie.data — Input normalisation.

Batch labelling lives in :mod:`chordie.data.batch`, which depends on the
resolver and is therefore not imported here.
"""

from chordie.data.notes import NoteSet, pitch_class_vector

__all__: list[str] = [
    "NoteSet",
    "pitch_class_vector",
]
