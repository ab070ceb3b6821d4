"""Analysis layer - pitch collections as sets and rotations."""

from .sequence import rotate, compact, unique, sort_notes
from .pcset import (
    PitchClassSetEncoder,
    EMPTY_FINGERPRINT,
    is_chroma,
    chroma,
    modes,
    to_vector,
    to_number,
    intervals,
    is_equal,
    is_subset_of,
    is_superset_of,
    includes,
    filter_notes,
)

__all__ = [
    # Sequences
    "rotate",
    "compact",
    "unique",
    "sort_notes",
    # Pitch class sets
    "PitchClassSetEncoder",
    "EMPTY_FINGERPRINT",
    "is_chroma",
    "chroma",
    "modes",
    "to_vector",
    "to_number",
    "intervals",
    "is_equal",
    "is_subset_of",
    "is_superset_of",
    "includes",
    "filter_notes",
]
