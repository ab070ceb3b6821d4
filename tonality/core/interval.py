"""Interval parsing - shorthand interval notation to canonical interval values.

Two shorthand forms are accepted:

- number then quality: "3M", "-4d", "9m" (preferred, never ambiguous)
- quality then number: "M3", "d-4"

Qualities are P (perfect), M (major), m (minor), A..AAAA (augmented) and
d..dddd (diminished). Steps 1, 4 and 5 are perfectable; 2, 3, 6 and 7 are
majorable, so "3P" or "5M" are not intervals and parse to ``NO_INTERVAL``.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .cache import ParseCache
from .constants import CHROMATIC_INTERVALS, DEFAULT_CACHE_SIZE, SEMITONES, STEP_TYPES

logger = logging.getLogger(__name__)

_QUALITY = r"d{1,4}|m|M|P|A{1,4}"
_NUMBER = r"[-+]?\d+"
INTERVAL_REGEX = re.compile(
    rf"^(?:(?P<num>{_NUMBER})(?P<q>{_QUALITY})|(?P<q2>{_QUALITY})(?P<num2>{_NUMBER}))\Z"
)


class IntervalType(Enum):
    """Interval families by diatonic step."""
    PERFECTABLE = "P"
    MAJORABLE = "M"


@dataclass(frozen=True)
class Interval:
    """A parsed interval. Every field is None for the invalid interval."""

    name: Optional[str] = None  # Canonical name, number first (e.g., "-3m")
    number: Optional[int] = None  # Signed interval number (e.g., 9, -3)
    quality: Optional[str] = None
    step: Optional[int] = None  # Diatonic step (0-6)
    type: Optional[IntervalType] = None
    alteration: Optional[int] = None  # Semitones from the perfect/major interval
    direction: Optional[int] = None  # 1 ascending, -1 descending
    simple: Optional[int] = None  # Number folded into one octave (8 kept)
    octaves: Optional[int] = None
    semitones: Optional[int] = None
    chroma: Optional[int] = None  # 0-11

    @property
    def is_valid(self) -> bool:
        return self.number is not None

    @staticmethod
    def build(step: int, alteration: int, octaves: int = 0, direction: int = 1) -> Optional[str]:
        """
        Build an interval name from its parts.

        Args:
            step: Diatonic step (0-6)
            alteration: Semitones from the perfect/major interval
            octaves: Number of whole octaves
            direction: 1 ascending, -1 descending

        Returns:
            Interval name (e.g., build(2, -1) -> "3m"), or None if the
            alteration has no quality for that step
        """
        quality = _alteration_to_quality(IntervalType(STEP_TYPES[step]), alteration)
        if quality is None:
            return None
        number = direction * (step + 1 + 7 * octaves)
        return f"{number}{quality}"


NO_INTERVAL = Interval()


def _quality_to_alteration(interval_type: IntervalType, quality: str) -> Optional[int]:
    majorable = interval_type is IntervalType.MAJORABLE
    if quality == "M":
        return 0 if majorable else None
    if quality == "P":
        return None if majorable else 0
    if quality == "m":
        return -1 if majorable else None
    if quality[0] == "A":
        return len(quality)
    # Diminished: one extra semitone below the minor for majorable steps
    return -len(quality) - 1 if majorable else -len(quality)


def _alteration_to_quality(interval_type: IntervalType, alteration: int) -> Optional[str]:
    if interval_type is IntervalType.MAJORABLE:
        if alteration == 0:
            return "M"
        if alteration == -1:
            return "m"
        if alteration > 0:
            return "A" * alteration if alteration <= 4 else None
        count = -alteration - 1
    else:
        if alteration == 0:
            return "P"
        if alteration > 0:
            return "A" * alteration if alteration <= 4 else None
        count = -alteration
    return "d" * count if count <= 4 else None


class IntervalParser:
    """Parse interval names into memoized ``Interval`` values."""

    def __init__(self, cache: Optional[ParseCache] = None):
        self.cache = cache if cache is not None else ParseCache()

    def parse(self, text: str) -> Interval:
        """
        Parse an interval string.

        Args:
            text: Interval in shorthand notation (e.g., "3M", "P-5")

        Returns:
            The parsed Interval, or NO_INTERVAL if the text is not an interval
        """
        if not isinstance(text, str):
            return NO_INTERVAL
        return self.cache.get_or_compute(text, self._properties)

    def _properties(self, text: str) -> Interval:
        match = INTERVAL_REGEX.match(text)
        if match is None:
            logger.debug("Not an interval: %r", text)
            return NO_INTERVAL

        try:
            number = int(match.group("num") or match.group("num2"))
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            logger.debug("Interval number too long: %r", text)
            return NO_INTERVAL
        quality = match.group("q") or match.group("q2")
        if number == 0:
            logger.debug("Interval number can't be zero: %r", text)
            return NO_INTERVAL

        step = (abs(number) - 1) % 7
        interval_type = IntervalType(STEP_TYPES[step])
        alteration = _quality_to_alteration(interval_type, quality)
        if alteration is None:
            logger.debug("Quality %s is not valid for step %d: %r", quality, step + 1, text)
            return NO_INTERVAL

        direction = -1 if number < 0 else 1
        octaves = (abs(number) - 1) // 7
        size = SEMITONES[step] + alteration
        return Interval(
            name=f"{number}{quality}",
            number=number,
            quality=quality,
            step=step,
            type=interval_type,
            alteration=alteration,
            direction=direction,
            simple=number if abs(number) == 8 else direction * (step + 1),
            octaves=octaves,
            semitones=direction * (size + 12 * octaves),
            chroma=(direction * size) % 12,
        )


DEFAULT_INTERVAL_PARSER = IntervalParser(cache=ParseCache(maxsize=DEFAULT_CACHE_SIZE))


def parse_interval(text: str) -> Interval:
    """Parse an interval with the default parser."""
    return DEFAULT_INTERVAL_PARSER.parse(text)


def interval_names() -> List[str]:
    """Get the interval names of each chroma within an octave."""
    return list(CHROMATIC_INTERVALS)


def semitones(text: str) -> Optional[int]:
    """Get the size of an interval in semitones (e.g., "4P" -> 5)."""
    return parse_interval(text).semitones


def simplify(text: str) -> Optional[str]:
    """
    Reduce a compound interval to its simple form.

    Examples:
        simplify("9m") -> "2m"
        simplify("-10M") -> "-3M"
        simplify("8P") -> "8P"
    """
    interval = parse_interval(text)
    if not interval.is_valid:
        return None
    return f"{interval.simple}{interval.quality}"


def invert(text: str) -> Optional[str]:
    """
    Get the inversion of an interval. Compound intervals keep their octaves.

    Examples:
        invert("3m") -> "6M"
        invert("2A") -> "7d"
        invert("-5P") -> "-4P"
    """
    interval = parse_interval(text)
    if not interval.is_valid:
        return None
    step = (7 - interval.step) % 7
    if interval.type is IntervalType.PERFECTABLE:
        alteration = -interval.alteration
    else:
        alteration = -(interval.alteration + 1)
    return Interval.build(step, alteration, interval.octaves, interval.direction)
