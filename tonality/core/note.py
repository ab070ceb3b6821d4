"""Note parsing - scientific pitch notation to canonical note values.

A note string is a letter (A-G, any case), an optional homogeneous run of
accidentals (``#``, ``b`` or ``x`` where each ``x`` is a double sharp), an
optional signed octave, and nothing else. Anything that does not parse gives
``NO_NOTE``, whose fields are all None.

    >>> parse_note("bb2").pc
    'Bb'
    >>> parse_note("fx-3").name
    'F##-3'
    >>> parse_note("a4").frequency
    440.0
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from .cache import ParseCache
from .config import TuningConfig
from .constants import (
    DEFAULT_CACHE_SIZE,
    FLAT_NAMES,
    MIDI_MAX,
    MIDI_MIN,
    PITCH_CLASS_OCTAVE,
    PITCH_NAMES,
    SEMITONES,
    SHARP_NAMES,
    STEP_LETTERS,
)

logger = logging.getLogger(__name__)

NOTE_REGEX = re.compile(r"^([a-gA-G]?)(#+|b+|x+|)(-?\d+)?\s*(.*)\Z", re.DOTALL)


@dataclass(frozen=True)
class Note:
    """A parsed note. Every field is None for the invalid note.

    ``name`` spells the octave as a plain integer: "C04" is named "C4".
    A note too high to have a float frequency gets ``inf``.
    """

    letter: Optional[str] = None  # Uppercase letter (e.g., "C")
    accidental: Optional[str] = None  # "#"/"b" run, "" for natural
    octave: Optional[int] = None
    pc: Optional[str] = None  # Pitch class (e.g., "Db")
    name: Optional[str] = None  # Canonical name, octave without leading zeros (e.g., "Db3")
    step: Optional[int] = None  # Diatonic step (C=0 ... B=6)
    alteration: Optional[int] = None  # Sharps positive, flats negative
    chroma: Optional[int] = None  # 0-11, C=0
    midi: Optional[int] = None
    frequency: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        return self.letter is not None


NO_NOTE = Note()


def tokenize(text: str) -> List[str]:
    """
    Split a string into ``[letter, accidental, octave, modifier]`` tokens.

    Always returns four strings. The letter is uppercased and ``x`` is
    expanded to ``##``.

    Examples:
        tokenize("C#2") -> ["C", "#", "2", ""]
        tokenize("Db3 major") -> ["D", "b", "3", "major"]
        tokenize("major") -> ["", "", "", "major"]
    """
    if not isinstance(text, str):
        text = ""
    letter, accidental, octave, modifier = NOTE_REGEX.match(text).groups()
    return [letter.upper(), accidental.replace("x", "##"), octave or "", modifier]


class NoteParser:
    """Parse note names into memoized ``Note`` values."""

    def __init__(
        self,
        cache: Optional[ParseCache] = None,
        tuning: Optional[TuningConfig] = None,
    ):
        """
        Initialize NoteParser.

        Args:
            cache: Cache for parsed notes (default: unbounded ParseCache)
            tuning: Reference pitch used for frequencies (default: A4 = 440 Hz)
        """
        self.cache = cache if cache is not None else ParseCache()
        self.tuning = tuning if tuning is not None else TuningConfig()

    def parse(self, text: str) -> Note:
        """
        Parse a note string.

        Args:
            text: Note in scientific notation (e.g., "C#4", "eb", "fx-1")

        Returns:
            The parsed Note, or NO_NOTE if the text is not a note
        """
        if not isinstance(text, str):
            return NO_NOTE
        return self.cache.get_or_compute(text, self._properties)

    def _properties(self, text: str) -> Note:
        letter, accidental, octave_str, modifier = tokenize(text)
        if letter == "" or modifier != "":
            logger.debug("Not a note: %r", text)
            return NO_NOTE

        step = STEP_LETTERS.index(letter)
        if accidental.startswith("b"):
            alteration = -len(accidental)
        else:
            alteration = len(accidental)
        try:
            octave = int(octave_str) if octave_str else None
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            logger.debug("Octave too long: %r", text)
            return NO_NOTE
        pc = letter + accidental

        midi = None
        frequency = None
        if octave is not None:
            midi = SEMITONES[step] + alteration + 12 * (octave + 1)
            frequency = self.tuning.midi_to_freq(midi)

        return Note(
            letter=letter,
            accidental=accidental,
            octave=octave,
            pc=pc,
            name=pc if octave is None else f"{pc}{octave}",
            step=step,
            alteration=alteration,
            chroma=(SEMITONES[step] + alteration + 120) % 12,
            midi=midi,
            frequency=frequency,
        )

    def height(self, text: str) -> Optional[int]:
        """
        Get a comparable height for a note or pitch class.

        Notes with octave use their MIDI number. Pitch classes are measured
        as if they were in a very low octave, so they sort below any real
        note but keep their relative order (Cb < C < B#).
        """
        note = self.parse(text)
        if not note.is_valid:
            return None
        if note.midi is not None:
            return note.midi
        return self.parse(f"{note.pc}{PITCH_CLASS_OCTAVE}").midi


@dataclass(frozen=True)
class NoteName:
    """A note given by name, for ``midi()``."""

    name: str


@dataclass(frozen=True)
class MidiNumber:
    """A note given by MIDI number, for ``midi()``."""

    number: int


MidiInput = Union[NoteName, MidiNumber]


DEFAULT_NOTE_PARSER = NoteParser(cache=ParseCache(maxsize=DEFAULT_CACHE_SIZE))


def parse_note(text: str) -> Note:
    """Parse a note with the default parser."""
    return DEFAULT_NOTE_PARSER.parse(text)


def note_names(acc_types: str = " b#") -> List[str]:
    """
    Get the pitch class names within an octave.

    Args:
        acc_types: Accidentals to include: " " naturals, "#" sharps, "b" flats

    Returns:
        List of names (e.g., note_names(" b") -> ["C", "Db", "D", ...])
    """
    if not isinstance(acc_types, str):
        return list(PITCH_NAMES)
    return [n for n in PITCH_NAMES if (n[1:] or " ") in acc_types]


def name(text: str) -> Optional[str]:
    """Get the canonical note name, or None if not a note."""
    return parse_note(text).name


def pc(text: str) -> Optional[str]:
    """Get the pitch class (e.g., "Db3" -> "Db")."""
    return parse_note(text).pc


def chroma(text: str) -> Optional[int]:
    return parse_note(text).chroma


def octave(text: str) -> Optional[int]:
    return parse_note(text).octave


def freq(text: str) -> Optional[float]:
    return parse_note(text).frequency


def midi(value: MidiInput) -> Optional[int]:
    """
    Get the MIDI number of a note.

    Args:
        value: NoteName("C4") or MidiNumber(60)

    Returns:
        MIDI number, or None for a pitch class, an invalid name or a number
        outside 0-127
    """
    if isinstance(value, MidiNumber):
        if MIDI_MIN <= value.number <= MIDI_MAX:
            return value.number
        return None
    if isinstance(value, NoteName):
        return parse_note(value.name).midi
    return None


def midi_to_freq(midi_number: float, tuning: Optional[TuningConfig] = None) -> float:
    """Convert MIDI number to frequency (Hz)."""
    tuning = tuning if tuning is not None else TuningConfig()
    return tuning.midi_to_freq(midi_number)


def from_midi(midi_number: int, sharps: bool = False) -> str:
    """
    Get the note name of a MIDI number.

    Args:
        midi_number: MIDI number (rounded to the nearest integer)
        sharps: Spell black keys with sharps instead of flats

    Returns:
        Note name with octave (e.g., 61 -> "Db4")
    """
    midi_number = int(round(midi_number))
    names = SHARP_NAMES if sharps else FLAT_NAMES
    return f"{names[midi_number % 12]}{midi_number // 12 - 1}"
