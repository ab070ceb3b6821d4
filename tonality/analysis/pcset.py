"""Pitch class sets - order and duplicate independent pitch collections.

A pitch class set is encoded as a 12 character binary string (its
fingerprint, or "chroma"), where position k is "1" if chroma k is present:

    C E G  ->  "100010010000"

Tokens can be notes (with or without octave) or intervals, so a chord
spelled as notes and the same chord spelled as intervals from C share a
fingerprint. A fingerprint is itself accepted wherever tokens are.
"""

import logging
from collections.abc import Iterable
from typing import List, Optional, Sequence, Union

import numpy as np

from ..core import IntervalParser, NoteParser
from ..core.constants import CHROMATIC_INTERVALS, FINGERPRINT_LENGTH, FINGERPRINT_PATTERN
from ..core.interval import DEFAULT_INTERVAL_PARSER
from ..core.note import DEFAULT_NOTE_PARSER
from .sequence import rotate

logger = logging.getLogger(__name__)

PitchSet = Union[str, Sequence[str]]

EMPTY_FINGERPRINT = "0" * FINGERPRINT_LENGTH


def is_chroma(value) -> bool:
    """
    Test if a value is a pitch class set fingerprint.

    Examples:
        is_chroma("101010101010") -> True
        is_chroma("101001") -> False
    """
    return isinstance(value, str) and FINGERPRINT_PATTERN.match(value) is not None


class PitchClassSetEncoder:
    """Encode notes and intervals into pitch class set fingerprints."""

    def __init__(
        self,
        note_parser: Optional[NoteParser] = None,
        interval_parser: Optional[IntervalParser] = None,
    ):
        self.note_parser = note_parser if note_parser is not None else DEFAULT_NOTE_PARSER
        self.interval_parser = (
            interval_parser if interval_parser is not None else DEFAULT_INTERVAL_PARSER
        )

    def token_chroma(self, token: str) -> int:
        """
        Get the chroma of a note or interval token.

        Notes are tried first, so "A4" is the note A, not an augmented fourth.
        Tokens that are neither map to 0.
        """
        note = self.note_parser.parse(token)
        if note.is_valid:
            return note.chroma
        interval = self.interval_parser.parse(token)
        if interval.is_valid:
            return interval.chroma
        logger.debug("Token %r is neither note nor interval, using chroma 0", token)
        return 0

    def encode(self, tokens: PitchSet) -> str:
        """
        Get the fingerprint of a pitch class set.

        Args:
            tokens: Fingerprint, whitespace separated string, or sequence of
                    note/interval names

        Returns:
            12 character binary string (unchanged if already a fingerprint)
        """
        if is_chroma(tokens):
            return tokens
        if isinstance(tokens, str):
            tokens = tokens.split()
        elif not isinstance(tokens, Iterable):
            return EMPTY_FINGERPRINT

        bits = np.zeros(FINGERPRINT_LENGTH, dtype=np.int8)
        chromas = [self.token_chroma(token) for token in tokens]
        if chromas:
            bits[chromas] = 1
        return "".join(str(b) for b in bits)

    def modes(self, tokens: PitchSet, normalize: bool = True) -> List[str]:
        """
        Get the rotations of a pitch class set.

        Args:
            tokens: Fingerprint or notes/intervals
            normalize: Drop rotations that don't start on a present pitch

        Returns:
            Rotations in ascending rotation order (12 if not normalized,
            one per present pitch class otherwise)
        """
        fingerprint = self.encode(tokens)
        rotations = [rotate(i, fingerprint) for i in range(FINGERPRINT_LENGTH)]
        if normalize:
            return [r for r in rotations if r[0] == "1"]
        return rotations


DEFAULT_ENCODER = PitchClassSetEncoder()


def chroma(tokens: PitchSet) -> str:
    """
    Get the fingerprint of a pitch class set with the default encoder.

    Examples:
        chroma(["C", "D", "E"]) -> "101010000000"
        chroma("c2 e5 g3") -> "100010010000"
    """
    return DEFAULT_ENCODER.encode(tokens)


def modes(tokens: PitchSet, normalize: bool = True) -> List[str]:
    return DEFAULT_ENCODER.modes(tokens, normalize)


def to_vector(tokens: PitchSet) -> np.ndarray:
    """Get the pitch class set as a 12 element 0/1 array."""
    return np.array([int(b) for b in chroma(tokens)], dtype=np.int8)


def to_number(tokens: PitchSet) -> int:
    """Get the pitch class set as the integer value of its fingerprint."""
    return int(chroma(tokens), 2)


def intervals(tokens: PitchSet) -> List[str]:
    """
    Get the intervals from C of each pitch class in the set.

    Examples:
        intervals(["C", "E", "G"]) -> ["1P", "3M", "5P"]
    """
    return [
        CHROMATIC_INTERVALS[i]
        for i, bit in enumerate(chroma(tokens))
        if bit == "1"
    ]


def is_equal(a: PitchSet, b: PitchSet) -> bool:
    """Test if two collections have the same pitch classes."""
    return chroma(a) == chroma(b)


def is_subset_of(pitch_set: PitchSet, notes: PitchSet) -> bool:
    """Test if notes form a proper subset of the pitch class set."""
    container = to_number(pitch_set)
    candidate = to_number(notes)
    return candidate != container and (candidate & container) == candidate


def is_superset_of(pitch_set: PitchSet, notes: PitchSet) -> bool:
    """Test if notes form a proper superset of the pitch class set."""
    contained = to_number(pitch_set)
    candidate = to_number(notes)
    return candidate != contained and (candidate | contained) == candidate


def includes(pitch_set: PitchSet, note: str) -> bool:
    """Test if the pitch class of a note is in the set."""
    parsed = DEFAULT_NOTE_PARSER.parse(note)
    if not parsed.is_valid:
        return False
    return chroma(pitch_set)[parsed.chroma] == "1"


def filter_notes(pitch_set: PitchSet, notes: Sequence[str]) -> List[str]:
    """
    Keep the notes whose pitch class is in the set.

    Examples:
        filter_notes(["C", "D", "E"], ["c2", "c#2", "d2", "c3"]) -> ["c2", "d2", "c3"]
    """
    return [n for n in notes if includes(pitch_set, n)]
