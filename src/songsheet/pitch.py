"""
Pitch model - the twelve pitch classes and their spellings

Both spelling tables share the same indices, so a sharp name and its flat
enharmonic resolve to the same pitch class. Output is always sharp-spelled.
"""

from typing import List


NOTES_SHARP: List[str] = ['A', 'A#', 'B', 'C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#']
NOTES_FLAT: List[str] = ['A', 'Bb', 'B', 'C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab']

# Sentinel for a spelling found in neither table (not transposable)
UNKNOWN = -1


def resolve_note(name: str) -> int:
    """Resolve a note spelling to its pitch class (0-11), or UNKNOWN.

    Exact, case-sensitive lookup: sharp table first, then flat table.
    """
    if name in NOTES_SHARP:
        return NOTES_SHARP.index(name)
    if name in NOTES_FLAT:
        return NOTES_FLAT.index(name)
    return UNKNOWN


def spell(pitch_class: int) -> str:
    """Sharp spelling of a pitch class. Any integer is reduced mod 12."""
    return NOTES_SHARP[pitch_class % 12]


def shift(pitch_class: int, amount: int) -> int:
    """Move a pitch class by a signed number of semitones."""
    return (pitch_class + amount + 12) % 12
