"""Inference layer - naming note collections.

- Dictionaries of scales and chords indexed by pitch class set
- Detection of every scale/chord a collection of notes can form

Pipeline: Notes -> Pitch classes -> Fingerprint rotations -> Dictionary -> Names
"""

from .dictionary import (
    NameSource,
    Dictionary,
    DictionaryEntry,
    CombinedDictionary,
    combine,
    load_scale_dictionary,
    load_chord_dictionary,
    load_pcset_dictionary,
)
from .detect import (
    Detector,
    detect,
    chord,
    scale,
    pcset,
    chord_formatter,
    scale_formatter,
    pair_formatter,
)

__all__ = [
    # Dictionaries
    "NameSource",
    "Dictionary",
    "DictionaryEntry",
    "CombinedDictionary",
    "combine",
    "load_scale_dictionary",
    "load_chord_dictionary",
    "load_pcset_dictionary",
    # Detection
    "Detector",
    "detect",
    "chord",
    "scale",
    "pcset",
    "chord_formatter",
    "scale_formatter",
    "pair_formatter",
]
