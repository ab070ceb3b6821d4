"""Tests for scale and chord detection.

Tests cover:
- Chord and scale naming of common collections
- Result ordering by tonic height
- Duplicate, enharmonic and invalid notes
- Custom dictionaries and formatters
"""

import itertools

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tonality.inference import (
    Detector,
    Dictionary,
    detect,
    chord,
    scale,
    pcset,
    chord_formatter,
    pair_formatter,
    load_chord_dictionary,
)


class TestChordDetection:
    """Test naming chords."""

    def test_sixth_chord(self):
        assert chord(["C", "E", "G", "A"]) == ["CM6", "Am7"]

    def test_dominant_seventh(self):
        assert chord(["D", "F#", "A", "C"]) == ["D7"]
        assert chord(["G", "B", "D", "F"]) == ["G7"]

    def test_major_triad(self):
        assert chord(["C", "E", "G"]) == ["C64", "Em#5"]

    def test_results_follow_tonic_height(self):
        assert chord(["Bb", "D", "F"]) == ["Dm#5", "Bb64"]

    def test_octaves_do_not_change_pitch_classes(self):
        assert chord(["A3", "C#4", "E4"]) == ["C#m#5", "A64"]

    def test_symmetric_chord_names_every_tonic(self):
        assert chord(["C", "Eb", "Gb", "A"]) == ["Co7", "Ebo7", "Gbo7", "Ao7"]

    def test_input_order_does_not_matter(self):
        for perm in itertools.permutations(["C", "E", "G", "A"]):
            assert chord(list(perm)) == ["CM6", "Am7"]

    def test_duplicate_notes(self):
        assert chord(["C", "C", "E", "G"]) == ["C64", "Em#5"]
        assert chord(["C4", "E", "C2", "G", "E5"]) == ["C64", "Em#5"]

    @pytest.mark.parametrize("notes", [
        ["C2000", "E", "G", "A"],
        ["C" + "9" * 400, "E-2000", "G", "A4"],
    ])
    def test_extreme_notes_still_named(self, notes):
        assert chord(notes) == ["CM6", "Am7"]

    def test_flat_tonic_sorts_first(self):
        # C-F-A has no chord name
        assert chord(["Cb", "Eb", "Gb"]) == ["Cb64", "Ebm#5"]

    def test_unnamed_collection(self):
        assert chord(["C", "E"]) == []

    def test_power_chord(self):
        assert chord(["C", "G"]) == ["C5"]

    def test_long_accidental_run_dedupes_with_enharmonic(self):
        # Thirteen sharps on B land on C
        assert chord(["C", "E", "G", "B" + "#" * 13]) == ["C64", "Em#5"]

    def test_custom_formatter(self):
        result = chord(["C", "E", "G"], formatter=lambda tonic, names: names[-1] + "@" + tonic)
        assert result == ["@C", "mb6@E"]


class TestScaleDetection:
    """Test naming scales."""

    def test_diatonic_modes(self):
        assert scale(["f3", "a", "c5", "e2", "d", "g2", "b6"]) == [
            "C major",
            "D dorian",
            "E phrygian",
            "F lydian",
            "G mixolydian",
            "A aeolian",
            "B locrian",
        ]

    def test_pentatonic(self):
        assert scale(["C", "D", "E", "G", "A"]) == [
            "C major pentatonic",
            "D egyptian",
            "E malkos raga",
            "G ritusen",
            "A minor pentatonic",
        ]

    def test_triad_is_not_a_scale(self):
        assert scale(["C", "E", "G"]) == []


class TestPcsetDetection:
    """Test naming scales and chords together."""

    def test_default_formatter(self):
        assert pcset(["C", "D", "E", "G", "A"]) == [
            "C major pentatonic",
            "D egyptian",
            "E malkos raga",
            "G ritusen",
            "A minor pentatonic",
        ]

    def test_chord_names_when_no_scale(self):
        assert pcset(["C", "E", "G"]) == ["C 64", "E m#5"]

    def test_pair_formatter_lists_scales_then_chords(self):
        assert pcset(["C", "D", "E", "G", "A"], formatter=pair_formatter) == [
            ("C", ["major pentatonic", "pentatonic", "M69", "69"]),
            ("D", ["egyptian", "11", "9sus4", "9sus"]),
            ("E", ["malkos raga"]),
            ("G", ["ritusen"]),
            ("A", ["minor pentatonic", "vietnamese 2", "m7add11", "m7add4"]),
        ]

    def test_pair_formatter_triad(self):
        assert pcset(["C", "E", "G"], formatter=pair_formatter) == [
            ("C", ["64", "M", "Major", ""]),
            ("E", ["m#5", "m+", "mb6"]),
        ]


class TestInvalidInput:
    """Test that bad input never raises."""

    @pytest.mark.parametrize("notes", [
        [],
        ["blah"],
        ["", "major", "3M"],
    ])
    def test_nothing_detected(self, notes):
        assert chord(notes) == []
        assert scale(notes) == []
        assert pcset(notes) == []

    def test_invalid_notes_are_ignored(self):
        assert chord(["C", "blah", "E", "G", "A", None]) == ["CM6", "Am7"]

    def test_notes_with_modifiers_are_ignored(self):
        assert chord(["C", "E", "G", "A major"]) == ["C64", "Em#5"]


class TestDetector:
    """Test the detector with custom dictionaries."""

    @pytest.fixture
    def triads(self):
        return Dictionary.build({
            "maj": ("1P 3M 5P", ("major",)),
            "min": ("1P 3m 5P", ()),
            "sus4": ("1P 4P 5P", ()),
        })

    def test_custom_dictionary(self, triads):
        detector = Detector(triads, formatter=chord_formatter)
        assert detector.detect(["A", "C", "E"]) == ["Amin"]
        assert detector.detect(["G", "B", "D"]) == ["Gmaj"]

    def test_sus_chord_inversions(self, triads):
        # C-F-G is Csus4; the F rotation is F-G-C, not a triad
        detector = Detector(triads, formatter=chord_formatter)
        assert detector.detect(["C", "F", "G"]) == ["Csus4"]

    def test_default_formatter_is_scale_style(self, triads):
        assert Detector(triads).detect(["E", "G#", "B"]) == ["E maj"]

    def test_formatter_override(self, triads):
        detector = Detector(triads, formatter=chord_formatter)
        assert detector.detect(["C", "E", "G"], formatter=pair_formatter) == [("C", ["maj", "major"])]

    def test_detect_function(self, triads):
        assert detect(triads, ["D", "F", "A"]) == ["D min"]
        assert detect(load_chord_dictionary(), ["C", "E", "G", "A"], chord_formatter) == ["CM6", "Am7"]

    def test_tonics_sorted_and_deduplicated(self, triads):
        detector = Detector(triads)
        assert detector.tonics(["g4", "e", "c2", "C", "blah"]) == ["C", "E", "G"]

    def test_tonics_keep_lowest_enharmonic(self, triads):
        detector = Detector(triads)
        assert detector.tonics(["B#", "C", "Cb", "B"]) == ["Cb", "C"]

    def test_tonics_drop_octaves(self, triads):
        assert Detector(triads).tonics(["Bb3", "D4", "F5"]) == ["D", "F", "Bb"]
