"""Name detection - find the scales and chords formed by a collection of notes.

Detection works on pitch classes:

1. Notes are reduced to pitch classes and sorted by height
2. Repeated pitch classes (including enharmonics) are dropped
3. The fingerprint of the set is rotated to start on each pitch class
4. Each rotation is looked up in the dictionary; the pitch class it
   starts on is the tonic of the names found

Results come in ascending tonic order and are built by a formatter:

    chord(["C", "E", "G", "A"])  ->  ["CM6", "Am7"]
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..analysis import PitchClassSetEncoder, unique
from ..analysis.pcset import DEFAULT_ENCODER
from ..core import NoteParser
from .dictionary import (
    NameSource,
    load_chord_dictionary,
    load_pcset_dictionary,
    load_scale_dictionary,
)

logger = logging.getLogger(__name__)

Formatter = Callable[[str, List[str]], Any]


def chord_formatter(tonic: str, names: List[str]) -> str:
    """Root and first chord symbol (e.g., "Am7")."""
    return tonic + names[0]


def scale_formatter(tonic: str, names: List[str]) -> str:
    """Tonic and first scale name (e.g., "D dorian")."""
    return f"{tonic} {names[0]}"


def pair_formatter(tonic: str, names: List[str]) -> tuple:
    """Tonic and every matching name (e.g., ("A", ["aeolian", "minor"]))."""
    return (tonic, names)


class Detector:
    """Detect names from a dictionary that match a collection of notes."""

    def __init__(
        self,
        dictionary: NameSource,
        formatter: Formatter = scale_formatter,
        encoder: Optional[PitchClassSetEncoder] = None,
    ):
        """
        Initialize Detector.

        Args:
            dictionary: Source of names to match
            formatter: Builds a result from (tonic, matching names)
            encoder: Pitch class set encoder (its note parser is used too)
        """
        self.dictionary = dictionary
        self.formatter = formatter
        self.encoder = encoder if encoder is not None else DEFAULT_ENCODER

    @property
    def note_parser(self) -> NoteParser:
        return self.encoder.note_parser

    def tonics(self, notes: Sequence[str]) -> List[str]:
        """
        Get the candidate tonics of a collection of notes.

        Returns:
            Distinct pitch classes sorted by height; of two enharmonic
            pitch classes only the lowest is kept
        """
        parser = self.note_parser
        pitch_classes = [parser.parse(n).pc for n in notes]
        pitch_classes = [p for p in pitch_classes if p is not None]
        pitch_classes.sort(key=parser.height)
        return unique(pitch_classes, key=lambda p: parser.parse(p).chroma)

    def detect(self, notes: Sequence[str], formatter: Optional[Formatter] = None) -> List[Any]:
        """
        Detect the names formed by a collection of notes.

        Args:
            notes: Note names, with or without octave, in any order
            formatter: Overrides the detector's formatter

        Returns:
            One result per tonic with matching names, in ascending tonic
            order. Empty if nothing matches or no note is valid.
        """
        formatter = formatter if formatter is not None else self.formatter
        tonics = self.tonics(notes)
        if not tonics:
            logger.debug("No valid notes in %r", notes)
            return []

        fingerprint = self.encoder.encode(tonics)
        present = [i for i, bit in enumerate(fingerprint) if bit == "1"]
        # Normalized modes come in ascending chroma order of their first pitch
        mode_by_chroma: Dict[int, str] = dict(zip(present, self.encoder.modes(fingerprint)))

        results = []
        for tonic in tonics:
            mode = mode_by_chroma[self.note_parser.parse(tonic).chroma]
            names = self.dictionary.names(mode)
            if names:
                results.append(formatter(tonic, names))
        return results


def detect(
    dictionary: NameSource,
    notes: Sequence[str],
    formatter: Formatter = scale_formatter,
) -> List[Any]:
    """Detect names from any dictionary."""
    return Detector(dictionary, formatter).detect(notes)


def chord(notes: Sequence[str], formatter: Formatter = chord_formatter) -> List[Any]:
    """
    Detect chord names.

    Examples:
        chord(["C", "E", "G", "A"]) -> ["CM6", "Am7"]
    """
    return detect(load_chord_dictionary(), notes, formatter)


def scale(notes: Sequence[str], formatter: Formatter = scale_formatter) -> List[Any]:
    """
    Detect scale names.

    Examples:
        scale(["f3", "a", "c5", "e2", "d", "g2", "b6"])
        -> ["C major", "D dorian", "E phrygian", "F lydian",
            "G mixolydian", "A aeolian", "B locrian"]
    """
    return detect(load_scale_dictionary(), notes, formatter)


def pcset(notes: Sequence[str], formatter: Formatter = scale_formatter) -> List[Any]:
    """Detect scale and chord names together, scales first for each tonic."""
    return detect(load_pcset_dictionary(), notes, formatter)
