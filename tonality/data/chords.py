"""Chord name table.

Maps each chord type (the symbol after the root, e.g. "m7" in "Am7") to its
intervals from the root and its alternative symbols. Consumed by
``Dictionary.build``.
"""

CHORDS = {
    "4": ("1P 4P 7m 10m", ("quartal",)),
    "5": ("1P 5P", ()),
    "7": ("1P 3M 5P 7m", ("Dominant", "Dom")),
    "9": ("1P 3M 5P 7m 9M", ("79",)),
    "11": ("1P 5P 7m 9M 11P", ()),
    "13": ("1P 3M 5P 7m 9M 13M", ("13_",)),
    "64": ("5P 8P 10M", ()),
    "M": ("1P 3M 5P", ("Major", "")),
    "M#5": ("1P 3M 5A", ("augmented", "maj#5", "Maj#5", "+", "aug")),
    "M#5add9": ("1P 3M 5A 9M", ("+add9",)),
    "M13": ("1P 3M 5P 7M 9M 13M", ("maj13", "Maj13")),
    "M13#11": ("1P 3M 5P 7M 9M 11A 13M", ("maj13#11", "Maj13#11", "M13+4", "M13#4")),
    "M6": ("1P 3M 5P 13M", ("6",)),
    "M6#11": ("1P 3M 5P 6M 11A", ("M6b5", "6#11", "6b5")),
    "M69": ("1P 3M 5P 6M 9M", ("69",)),
    "M69#11": ("1P 3M 5P 6M 9M 11A", ()),
    "M7#11": ("1P 3M 5P 7M 11A", ("maj7#11", "Maj7#11", "M7+4", "M7#4")),
    "M7#5": ("1P 3M 5A 7M", ("maj7#5", "Maj7#5", "maj9#5", "M7+")),
    "M7#5sus4": ("1P 4P 5A 7M", ()),
    "M7#9#11": ("1P 3M 5P 7M 9A 11A", ()),
    "M7add13": ("1P 3M 5P 6M 7M 9M", ()),
    "M7b5": ("1P 3M 5d 7M", ()),
    "M7b6": ("1P 3M 6m 7M", ()),
    "M7b9": ("1P 3M 5P 7M 9m", ()),
    "M7sus4": ("1P 4P 5P 7M", ()),
    "M9": ("1P 3M 5P 7M 9M", ("maj9", "Maj9")),
    "M9#11": ("1P 3M 5P 7M 9M 11A", ("maj9#11", "Maj9#11", "M9+4", "M9#4")),
    "M9#5": ("1P 3M 5A 7M 9M", ("Maj9#5",)),
    "M9#5sus4": ("1P 4P 5A 7M 9M", ()),
    "M9b5": ("1P 3M 5d 7M 9M", ()),
    "M9sus4": ("1P 4P 5P 7M 9M", ()),
    "Madd9": ("1P 3M 5P 9M", ("2", "add9", "add2")),
    "Maj7": ("1P 3M 5P 7M", ("maj7", "M7")),
    "Mb5": ("1P 3M 5d", ()),
    "Mb6": ("1P 3M 13m", ()),
    "Msus2": ("1P 2M 5P", ("add9no3", "sus2")),
    "Msus4": ("1P 4P 5P", ("sus", "sus4")),
    "Maddb9": ("1P 3M 5P 9m", ()),
    "11b9": ("1P 5P 7m 9m 11P", ()),
    "13#11": ("1P 3M 5P 7m 9M 11A 13M", ("13+4", "13#4")),
    "13#9": ("1P 3M 5P 7m 9A 13M", ("13#9_",)),
    "13#9#11": ("1P 3M 5P 7m 9A 11A 13M", ()),
    "13b5": ("1P 3M 5d 6M 7m 9M", ()),
    "13b9": ("1P 3M 5P 7m 9m 13M", ()),
    "13b9#11": ("1P 3M 5P 7m 9m 11A 13M", ()),
    "13no5": ("1P 3M 7m 9M 13M", ()),
    "13sus4": ("1P 4P 5P 7m 9M 13M", ("13sus",)),
    "69#11": ("1P 3M 5P 6M 9M 11A", ()),
    "7#11": ("1P 3M 5P 7m 11A", ("7+4", "7#4", "7#11_", "7#4_")),
    "7#11b13": ("1P 3M 5P 7m 11A 13m", ("7b5b13",)),
    "7#5": ("1P 3M 5A 7m", ("+7", "7aug", "aug7")),
    "7#5#9": ("1P 3M 5A 7m 9A", ("7alt", "7#5#9_", "7#9b13_")),
    "7#5b9": ("1P 3M 5A 7m 9m", ()),
    "7#5b9#11": ("1P 3M 5A 7m 9m 11A", ()),
    "7#5sus4": ("1P 4P 5A 7m", ()),
    "7#9": ("1P 3M 5P 7m 9A", ("7#9_",)),
    "7#9#11": ("1P 3M 5P 7m 9A 11A", ("7b5#9",)),
    "7#9#11b13": ("1P 3M 5P 7m 9A 11A 13m", ()),
    "7#9b13": ("1P 3M 5P 7m 9A 13m", ()),
    "7add6": ("1P 3M 5P 7m 13M", ("67", "7add13")),
    "7b13": ("1P 3M 7m 13m", ()),
    "7b5": ("1P 3M 5d 7m", ()),
    "7b6": ("1P 3M 5P 6m 7m", ()),
    "7b9": ("1P 3M 5P 7m 9m", ()),
    "7b9#11": ("1P 3M 5P 7m 9m 11A", ("7b5b9",)),
    "7b9#9": ("1P 3M 5P 7m 9m 9A", ()),
    "7b9b13": ("1P 3M 5P 7m 9m 13m", ()),
    "7b9b13#11": ("1P 3M 5P 7m 9m 11A 13m", ("7b9#11b13", "7b5b9b13")),
    "7no5": ("1P 3M 7m", ()),
    "7sus4": ("1P 4P 5P 7m", ("7sus",)),
    "7sus4b9": ("1P 4P 5P 7m 9m", ("susb9", "7susb9", "7b9sus", "7b9sus4", "phryg")),
    "7sus4b9b13": ("1P 4P 5P 7m 9m 13m", ("7b9b13sus4",)),
    "9#11": ("1P 3M 5P 7m 9M 11A", ("9+4", "9#4", "9#11_", "9#4_")),
    "9#11b13": ("1P 3M 5P 7m 9M 11A 13m", ("9b5b13",)),
    "9#5": ("1P 3M 5A 7m 9M", ("9+",)),
    "9#5#11": ("1P 3M 5A 7m 9M 11A", ()),
    "9b13": ("1P 3M 7m 9M 13m", ()),
    "9b5": ("1P 3M 5d 7m 9M", ()),
    "9no5": ("1P 3M 7m 9M", ()),
    "9sus4": ("1P 4P 5P 7m 9M", ("9sus",)),
    "m": ("1P 3m 5P", ()),
    "m#5": ("1P 3m 5A", ("m+", "mb6")),
    "m11": ("1P 3m 5P 7m 9M 11P", ("_11",)),
    "m11A 5": ("1P 3m 6m 7m 9M 11P", ()),
    "m11b5": ("1P 3m 7m 12d 2M 4P", ("h11", "_11b5")),
    "m13": ("1P 3m 5P 7m 9M 11P 13M", ("_13",)),
    "m6": ("1P 3m 4P 5P 13M", ("_6",)),
    "m69": ("1P 3m 5P 6M 9M", ("_69",)),
    "m7": ("1P 3m 5P 7m", ("minor7", "_", "_7")),
    "m7#5": ("1P 3m 6m 7m", ()),
    "m7add11": ("1P 3m 5P 7m 11P", ("m7add4",)),
    "m7b5": ("1P 3m 5d 7m", ("half-diminished", "h7", "_7b5")),
    "m9": ("1P 3m 5P 7m 9M", ("_9",)),
    "m9#5": ("1P 3m 6m 7m 9M", ()),
    "m9b5": ("1P 3m 7m 12d 2M", ("h9", "-9b5")),
    "mMaj7": ("1P 3m 5P 7M", ("mM7", "_M7")),
    "mMaj7b6": ("1P 3m 5P 6m 7M", ("mM7b6",)),
    "mM9": ("1P 3m 5P 7M 9M", ("mMaj9", "-M9")),
    "mM9b6": ("1P 3m 5P 6m 7M 9M", ("mMaj9b6",)),
    "mb6M7": ("1P 3m 6m 7M", ()),
    "mb6b9": ("1P 3m 6m 9m", ()),
    "o": ("1P 3m 5d", ("mb5", "dim")),
    "o7": ("1P 3m 5d 13M", ("diminished", "m6b5", "dim7")),
    "o7M7": ("1P 3m 5d 6M 7M", ()),
    "oM7": ("1P 3m 5d 7M", ()),
    "sus24": ("1P 2M 4P 5P", ("sus4add9",)),
    "+add#9": ("1P 3M 5A 9A", ()),
    "madd4": ("1P 3m 4P 5P", ()),
    "madd9": ("1P 3m 5P 9M", ()),
}
