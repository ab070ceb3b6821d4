"""Core types and constants for tonality."""

from .note import (
    Note,
    NO_NOTE,
    NoteParser,
    NoteName,
    MidiNumber,
    parse_note,
)
from .interval import (
    Interval,
    NO_INTERVAL,
    IntervalType,
    IntervalParser,
    parse_interval,
)
from .cache import ParseCache
from .config import TuningConfig
from .constants import (
    PITCH_NAMES,
    SEMITONES,
    DEFAULT_CACHE_SIZE,
    FINGERPRINT_PATTERN,
)

__all__ = [
    # Notes
    "Note",
    "NO_NOTE",
    "NoteParser",
    "NoteName",
    "MidiNumber",
    "parse_note",
    # Intervals
    "Interval",
    "NO_INTERVAL",
    "IntervalType",
    "IntervalParser",
    "parse_interval",
    # Configuration
    "ParseCache",
    "TuningConfig",
    "PITCH_NAMES",
    "SEMITONES",
    "DEFAULT_CACHE_SIZE",
    "FINGERPRINT_PATTERN",
]
