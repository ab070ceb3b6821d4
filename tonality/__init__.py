"""tonality - Symbolic music theory: notes, intervals, pitch class sets and name detection.

Architecture Layers:
    1. core/      - Note and interval parsing (memoized, never raising)
    2. analysis/  - Rotations and pitch class set fingerprints
    3. data/      - Static scale and chord name tables
    4. inference/ - Name dictionaries and scale/chord detection
"""

import logging

__version__ = "0.1.0"

# Core types
from .core import (
    Note,
    NO_NOTE,
    NoteParser,
    NoteName,
    MidiNumber,
    Interval,
    NO_INTERVAL,
    IntervalType,
    IntervalParser,
    ParseCache,
    TuningConfig,
    parse_note,
    parse_interval,
)

# Analysis layer
from .analysis import PitchClassSetEncoder, rotate, chroma, modes

# Inference layer
from .inference import (
    NameSource,
    Dictionary,
    CombinedDictionary,
    combine,
    Detector,
    detect,
    chord,
    scale,
    pcset,
    load_scale_dictionary,
    load_chord_dictionary,
    load_pcset_dictionary,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Note",
    "NO_NOTE",
    "NoteParser",
    "NoteName",
    "MidiNumber",
    "Interval",
    "NO_INTERVAL",
    "IntervalType",
    "IntervalParser",
    "ParseCache",
    "TuningConfig",
    "parse_note",
    "parse_interval",
    # Analysis
    "PitchClassSetEncoder",
    "rotate",
    "chroma",
    "modes",
    # Inference
    "NameSource",
    "Dictionary",
    "CombinedDictionary",
    "combine",
    "Detector",
    "detect",
    "chord",
    "scale",
    "pcset",
    "load_scale_dictionary",
    "load_chord_dictionary",
    "load_pcset_dictionary",
]
