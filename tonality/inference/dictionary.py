"""Name dictionaries - scales and chords indexed by interval content.

A dictionary is built once from a static table mapping a canonical name to
its intervals and alternative names:

    {"major": ("1P 2M 3M 4P 5P 6M 7M", ("ionian",)), ...}

Every name is indexed under the pitch class set fingerprint of its
intervals, so a collection of notes can be named by looking up the
fingerprint of one of its rotations.

Dictionaries are read-only after ``build``. Several of them can be searched
together with ``combine``; names are not deduplicated across sources.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..analysis import PitchClassSetEncoder, is_chroma
from ..analysis.pcset import DEFAULT_ENCODER
from ..data import CHORDS, SCALES

logger = logging.getLogger(__name__)

# Table value: (space separated intervals, alias names)
TableEntry = Tuple[str, Sequence[str]]
NameFilter = Union[str, bool, None]


@dataclass(frozen=True)
class DictionaryEntry:
    """A named interval collection."""

    name: str
    intervals: Tuple[str, ...]
    fingerprint: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)


class NameSource(ABC):
    """Something that names interval collections."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[Tuple[str, ...]]:
        """Get the intervals of a name, or None if unknown."""

    @abstractmethod
    def names(self, query: NameFilter = None) -> List[str]:
        """
        Get names.

        Args:
            query: A fingerprint to get the names sharing it, True for all
                   names including aliases, or None for canonical names

        Returns:
            A new list of names
        """

    def __call__(self, name: str) -> Optional[Tuple[str, ...]]:
        return self.lookup(name)


class Dictionary(NameSource):
    """Read-only dictionary of named interval collections."""

    def __init__(
        self,
        entries: Mapping[str, DictionaryEntry],
        intervals_by_name: Mapping[str, Tuple[str, ...]],
        names_by_fingerprint: Mapping[str, List[str]],
    ):
        self._entries = dict(entries)
        self._intervals = dict(intervals_by_name)
        self._index = {k: list(v) for k, v in names_by_fingerprint.items()}
        self._canonical = sorted(self._entries)
        self._all = sorted(self._intervals)

    @classmethod
    def build(
        cls,
        table: Mapping[str, TableEntry],
        encoder: Optional[PitchClassSetEncoder] = None,
    ) -> "Dictionary":
        """
        Build a dictionary from a name table.

        Args:
            table: Canonical name -> (intervals string, alias names)
            encoder: Encoder used to fingerprint the intervals

        Returns:
            Dictionary with every canonical name and alias indexed
        """
        encoder = encoder if encoder is not None else DEFAULT_ENCODER
        entries: Dict[str, DictionaryEntry] = {}
        intervals_by_name: Dict[str, Tuple[str, ...]] = {}
        names_by_fingerprint: Dict[str, List[str]] = {}

        for name in sorted(table):
            intervals, aliases = _unpack(name, table[name])
            for token in intervals:
                if not encoder.interval_parser.parse(token).is_valid:
                    logger.warning("Entry %r has an invalid interval %r", name, token)
            fingerprint = encoder.encode(intervals)
            entries[name] = DictionaryEntry(name, intervals, fingerprint, aliases)
            for key in (name,) + aliases:
                intervals_by_name[key] = intervals
                names_by_fingerprint.setdefault(fingerprint, []).append(key)

        logger.info(
            "Built dictionary: %d entries, %d names, %d fingerprints",
            len(entries), len(intervals_by_name), len(names_by_fingerprint),
        )
        return cls(entries, intervals_by_name, names_by_fingerprint)

    def lookup(self, name: str) -> Optional[Tuple[str, ...]]:
        return self._intervals.get(name)

    def names(self, query: NameFilter = None) -> List[str]:
        if isinstance(query, str):
            if not is_chroma(query):
                return []
            return list(self._index.get(query, []))
        if query is True:
            return list(self._all)
        return list(self._canonical)

    def entries(self) -> List[DictionaryEntry]:
        """Get the canonical entries sorted by name."""
        return [self._entries[name] for name in self._canonical]

    def __contains__(self, name: str) -> bool:
        return name in self._intervals

    def __len__(self) -> int:
        return len(self._entries)


class CombinedDictionary(NameSource):
    """Several name sources searched in priority order."""

    def __init__(self, *sources: NameSource):
        self.sources = sources

    def lookup(self, name: str) -> Optional[Tuple[str, ...]]:
        for source in self.sources:
            intervals = source.lookup(name)
            if intervals is not None:
                return intervals
        return None

    def names(self, query: NameFilter = None) -> List[str]:
        result: List[str] = []
        for source in self.sources:
            result.extend(source.names(query))
        return result


def combine(a: NameSource, b: NameSource) -> CombinedDictionary:
    """Search ``a`` first, then ``b``."""
    return CombinedDictionary(a, b)


def _unpack(name: str, value) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    if isinstance(value, str):
        intervals, aliases = value, ()
    elif isinstance(value, (list, tuple)) and len(value) in (1, 2) and isinstance(value[0], str):
        intervals = value[0]
        aliases = value[1] if len(value) == 2 and value[1] is not None else ()
    else:
        raise ValueError(f"Entry {name!r} must be (intervals, aliases), got {value!r}")
    if isinstance(aliases, str) or not all(isinstance(a, str) for a in aliases):
        raise ValueError(f"Aliases of {name!r} must be a list of names, got {aliases!r}")
    return tuple(intervals.split()), tuple(aliases)


@lru_cache(maxsize=1)
def load_scale_dictionary() -> Dictionary:
    return Dictionary.build(SCALES)


@lru_cache(maxsize=1)
def load_chord_dictionary() -> Dictionary:
    return Dictionary.build(CHORDS)


@lru_cache(maxsize=1)
def load_pcset_dictionary() -> CombinedDictionary:
    """Scales and chords together, scales first."""
    return combine(load_scale_dictionary(), load_chord_dictionary())
