"""Global constants for tonality."""

import re

# Letter order used for diatonic steps (C=0 ... B=6)
STEP_LETTERS = "CDEFGAB"

# Semitone size of each diatonic step from C
SEMITONES = [0, 2, 4, 5, 7, 9, 11]

# Interval type per diatonic step: P = perfectable, M = majorable
STEP_TYPES = "PMMPPMM"

# Pitch names within an octave, both spellings mixed
PITCH_NAMES = "C C# Db D D# Eb E F F# Gb G G# Ab A A# Bb B".split(" ")
SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
FLAT_NAMES = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

# Interval names for each chroma of a pitch class set
CHROMATIC_INTERVALS = "1P 2m 2M 3m 3M 4P 5d 5P 6m 6M 7m 7M".split(" ")

# Tuning defaults
DEFAULT_REFERENCE_FREQUENCY = 440.0  # A4
DEFAULT_REFERENCE_MIDI = 69

# MIDI range
MIDI_MIN = 0
MIDI_MAX = 127

# Octave assigned to bare pitch classes when comparing heights
PITCH_CLASS_OCTAVE = -100

# Parse cache size for the module-level parsers
DEFAULT_CACHE_SIZE = 4096

# Pitch class set fingerprint: 12 binary digits, position k = chroma k
FINGERPRINT_LENGTH = 12
FINGERPRINT_PATTERN = re.compile(r"^[01]{12}\Z")
