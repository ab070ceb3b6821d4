"""Scale name table.

Maps each scale name to its intervals from the tonic and its alternative
names. Consumed by ``Dictionary.build``; swap or extend it to change which
scales can be detected.
"""

SCALES = {
    "chromatic": ("1P 2m 2M 3m 3M 4P 4A 5P 6m 6M 7m 7M", ()),
    "lydian": ("1P 2M 3M 4A 5P 6M 7M", ()),
    "major": ("1P 2M 3M 4P 5P 6M 7M", ("ionian",)),
    "mixolydian": ("1P 2M 3M 4P 5P 6M 7m", ("dominant",)),
    "dorian": ("1P 2M 3m 4P 5P 6M 7m", ()),
    "aeolian": ("1P 2M 3m 4P 5P 6m 7m", ("minor",)),
    "phrygian": ("1P 2m 3m 4P 5P 6m 7m", ()),
    "locrian": ("1P 2m 3m 4P 5d 6m 7m", ()),
    "melodic minor": ("1P 2M 3m 4P 5P 6M 7M", ()),
    "melodic minor second mode": ("1P 2m 3m 4P 5P 6M 7m", ()),
    "lydian augmented": ("1P 2M 3M 4A 5A 6M 7M", ()),
    "lydian dominant": ("1P 2M 3M 4A 5P 6M 7m", ("lydian b7",)),
    "melodic minor fifth mode": ("1P 2M 3M 4P 5P 6m 7m", ("hindu", "mixolydian b6M")),
    "locrian #2": ("1P 2M 3m 4P 5d 6m 7m", ()),
    "locrian major": ("1P 2M 3M 4P 5d 6m 7m", ("arabian",)),
    "altered": ("1P 2m 3m 3M 5d 6m 7m", ("super locrian", "diminished whole tone", "pomeroy")),
    "major pentatonic": ("1P 2M 3M 5P 6M", ("pentatonic",)),
    "lydian pentatonic": ("1P 3M 4A 5P 7M", ("chinese",)),
    "mixolydian pentatonic": ("1P 3M 4P 5P 7m", ("indian",)),
    "locrian pentatonic": ("1P 3m 4P 5d 7m", ("minor seven flat five pentatonic",)),
    "minor pentatonic": ("1P 3m 4P 5P 7m", ()),
    "minor six pentatonic": ("1P 3m 4P 5P 6M", ()),
    "minor hexatonic": ("1P 2M 3m 4P 5P 7M", ()),
    "flat three pentatonic": ("1P 2M 3m 5P 6M", ("kumoi",)),
    "flat six pentatonic": ("1P 2M 3M 5P 6m", ()),
    "major flat two pentatonic": ("1P 2m 3M 5P 6M", ()),
    "whole tone pentatonic": ("1P 3M 5d 6m 7m", ()),
    "ionian pentatonic": ("1P 3M 4P 5P 7M", ()),
    "lydian #5P pentatonic": ("1P 3M 4A 5A 7M", ()),
    "lydian dominant pentatonic": ("1P 3M 4A 5P 7m", ()),
    "minor #7M pentatonic": ("1P 3m 4P 5P 7M", ()),
    "super locrian pentatonic": ("1P 3m 4d 5d 7m", ()),
    "in-sen": ("1P 2m 4P 5P 7m", ()),
    "iwato": ("1P 2m 4P 5d 7m", ()),
    "hirajoshi": ("1P 2M 3m 5P 6m", ()),
    "kumoijoshi": ("1P 2m 4P 5P 6m", ()),
    "pelog": ("1P 2m 3m 5P 6m", ()),
    "vietnamese 1": ("1P 3m 4P 5P 6m", ()),
    "vietnamese 2": ("1P 3m 4P 5P 7m", ()),
    "prometheus": ("1P 2M 3M 4A 6M 7m", ()),
    "prometheus neopolitan": ("1P 2m 3M 4A 6M 7m", ()),
    "ritusen": ("1P 2M 4P 5P 6M", ()),
    "scriabin": ("1P 2m 3M 5P 6M", ()),
    "piongio": ("1P 2M 4P 5P 6M 7m", ()),
    "major blues": ("1P 2M 3m 3M 5P 6M", ()),
    "minor blues": ("1P 3m 4P 5d 5P 7m", ("blues",)),
    "composite blues": ("1P 2M 3m 3M 4P 5d 5P 6M 7m", ()),
    "augmented": ("1P 2A 3M 5P 5A 7M", ()),
    "augmented heptatonic": ("1P 2A 3M 4P 5P 5A 7M", ()),
    "dorian #4": ("1P 2M 3m 4A 5P 6M 7m", ()),
    "lydian diminished": ("1P 2M 3m 4A 5P 6M 7M", ()),
    "whole tone": ("1P 2M 3M 4A 5A 7m", ()),
    "leading whole tone": ("1P 2M 3M 4A 5A 7m 7M", ()),
    "harmonic minor": ("1P 2M 3m 4P 5P 6m 7M", ()),
    "lydian minor": ("1P 2M 3M 4A 5P 6m 7m", ()),
    "neopolitan": ("1P 2m 3m 4P 5P 6m 7M", ()),
    "neopolitan minor": ("1P 2m 3m 4P 5P 6m 7M", ()),
    "neopolitan major": ("1P 2m 3m 4P 5P 6M 7M", ("dorian b2",)),
    "neopolitan major pentatonic": ("1P 3M 4P 5d 7m", ()),
    "romanian minor": ("1P 2M 3m 5d 5P 6M 7m", ()),
    "double harmonic lydian": ("1P 2m 3M 4A 5P 6m 7M", ()),
    "diminished": ("1P 2M 3m 4P 5d 6m 6M 7M", ()),
    "harmonic major": ("1P 2M 3M 4P 5P 6m 7M", ()),
    "double harmonic major": ("1P 2m 3M 4P 5P 6m 7M", ("gypsy",)),
    "egyptian": ("1P 2M 4P 5P 7m", ()),
    "hungarian minor": ("1P 2M 3m 4A 5P 6m 7M", ()),
    "hungarian major": ("1P 2A 3M 4A 5P 6M 7m", ()),
    "oriental": ("1P 2m 3M 4P 5d 6M 7m", ()),
    "spanish": ("1P 2m 3M 4P 5P 6m 7m", ("phrygian major",)),
    "spanish heptatonic": ("1P 2m 3m 3M 4P 5P 6m 7m", ()),
    "flamenco": ("1P 2m 3m 3M 4A 5P 7m", ()),
    "balinese": ("1P 2m 3m 4P 5P 6m 7M", ()),
    "todi raga": ("1P 2m 3m 4A 5P 6m 7M", ()),
    "malkos raga": ("1P 3m 4P 6m 7m", ()),
    "kafi raga": ("1P 3m 3M 4P 5P 6M 7m 7M", ()),
    "purvi raga": ("1P 2m 3M 4P 4A 5P 6m 7M", ()),
    "persian": ("1P 2m 3M 4P 5d 6m 7M", ()),
    "bebop": ("1P 2M 3M 4P 5P 6M 7m 7M", ()),
    "bebop dominant": ("1P 2M 3M 4P 5P 6M 7m 7M", ()),
    "bebop minor": ("1P 2M 3m 3M 4P 5P 6M 7m", ()),
    "bebop major": ("1P 2M 3M 4P 5P 5A 6M 7M", ()),
    "bebop locrian": ("1P 2m 3m 4P 5d 5P 6m 7m", ()),
    "minor bebop": ("1P 2M 3m 4P 5P 6m 7m 7M", ()),
    "mystery #1": ("1P 2m 3M 5d 6m 7m", ()),
    "enigmatic": ("1P 2m 3M 5d 6m 7m 7M", ()),
    "minor six diminished": ("1P 2M 3m 4P 5P 6m 6M 7M", ()),
    "ionian augmented": ("1P 2M 3M 4P 5A 6M 7M", ()),
    "lydian #9": ("1P 2m 3M 4A 5P 6M 7M", ()),
    "ichikosucho": ("1P 2M 3M 4P 5d 5P 6M 7M", ()),
    "six tone symmetric": ("1P 2m 3M 4P 5A 6M", ()),
}
