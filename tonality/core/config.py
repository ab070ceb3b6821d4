"""Configuration objects for tonality."""

import math
from dataclasses import dataclass

from .constants import DEFAULT_REFERENCE_FREQUENCY, DEFAULT_REFERENCE_MIDI


@dataclass(frozen=True)
class TuningConfig:
    """Equal temperament tuning reference.

    Attributes:
        reference_frequency: Frequency in Hz of the reference note (default: 440.0)
        reference_midi: MIDI number of the reference note (default: 69, A4)
    """

    reference_frequency: float = DEFAULT_REFERENCE_FREQUENCY
    reference_midi: int = DEFAULT_REFERENCE_MIDI

    def __post_init__(self):
        if self.reference_frequency <= 0:
            raise ValueError(
                f"reference_frequency must be positive, got {self.reference_frequency}"
            )

    def midi_to_freq(self, midi: int) -> float:
        """Convert MIDI number to frequency (Hz). Too high to represent gives inf."""
        try:
            return self.reference_frequency * (2 ** ((midi - self.reference_midi) / 12.0))
        except OverflowError:
            return math.inf
