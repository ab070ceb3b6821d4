"""Sequence utilities - rotation, compaction and note sorting.

``rotate`` knows nothing about music: the same function turns a pitch class
set fingerprint into its modes and a list of notes into its inversions.
"""

from typing import Callable, Hashable, List, Optional, Sequence, TypeVar

from ..core import NoteParser
from ..core.note import DEFAULT_NOTE_PARSER

T = TypeVar("T")


def rotate(times: int, seq: Sequence[T]) -> Sequence[T]:
    """
    Rotate a sequence to the left.

    The first ``times`` elements (modulo the length) move to the end. Strings,
    lists and tuples come back as the same type; an empty sequence is
    returned unchanged.

    Examples:
        rotate(1, [1, 2, 3]) -> [2, 3, 1]
        rotate(-1, "abc") -> "cab"
    """
    length = len(seq)
    if length == 0:
        return seq
    n = times % length
    return seq[n:] + seq[:n]


def compact(seq: Sequence[T]) -> List[T]:
    """Remove None and empty strings, keeping zeros (e.g., [0, None, "a", ""] -> [0, "a"])."""
    return [x for x in seq if x is not None and x != ""]


def unique(seq: Sequence[T], key: Optional[Callable[[T], Hashable]] = None) -> List[T]:
    """Remove duplicates keeping the first occurrence of each element (or key)."""
    seen = set()
    result = []
    for item in seq:
        marker = key(item) if key is not None else item
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def sort_notes(notes: Sequence[str], parser: Optional[NoteParser] = None) -> List[str]:
    """
    Sort notes by pitch height, ascending.

    Invalid notes are dropped and the rest are returned as canonical names.
    Pitch classes sort below notes with octave.

    Examples:
        sort_notes(["f", "a", "c"]) -> ["C", "F", "A"]
        sort_notes(["c5", "d", "c2"]) -> ["D", "C2", "C5"]
    """
    parser = parser if parser is not None else DEFAULT_NOTE_PARSER
    names = compact([parser.parse(n).name for n in notes])
    return sorted(names, key=parser.height)
