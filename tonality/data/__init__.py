"""Static name tables for the scale and chord dictionaries."""

from .scales import SCALES
from .chords import CHORDS

__all__ = ["SCALES", "CHORDS"]
