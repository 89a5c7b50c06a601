"""Pitch-class arithmetic and enharmonic spelling.

Pitch classes are integers 0-11 with C = 0.  All arithmetic is modulo 12.
Spelling a pitch class as text is a separate step: the same pitch class is
``C#`` in a sharp key and ``Db`` in a flat key.
"""

import math
import re

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

SHARP_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Tonics whose key signatures are written with flats.
#   major: F, Bb, Eb, Ab, Db, Gb
#   minor: D, G, C, F, Bb, Eb  (relative minors of the above)
FLAT_MAJOR_TONICS = frozenset({5, 10, 3, 8, 1, 6})
FLAT_MINOR_TONICS = frozenset({2, 7, 0, 5, 10, 3})

# Root letter plus optional accidental, longest match first.
NOTE_PREFIX_RE = re.compile(r"^[A-G][#b]?")


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Raises:
        ValueError: If the note name is not recognized.
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    raise ValueError(f"Unknown note: {note}")


def split_note(text: str) -> tuple[int, str] | None:
    """Split a leading note name off *text*.

    Returns ``(pitch_class, remainder)`` or ``None`` when *text* does not
    start with ``A``-``G``.
    """
    m = NOTE_PREFIX_RE.match(text)
    if not m:
        return None
    return NOTE_TO_PC[m.group()], text[m.end():]


def shift(pc: int, semitones: int) -> int:
    """Return *pc* moved by *semitones*, wrapped into 0-11."""
    return (pc + semitones) % 12


def normalize_semitones(semitones: int) -> int:
    """Reduce *semitones* into [-11, 11] keeping its sign.

    ``14 -> 2``, ``-14 -> -2``, ``12 -> 0``.
    """
    return int(math.fmod(semitones, 12))


def uses_flats(tonic: int, minor: bool = False) -> bool:
    """True when the key on *tonic* is conventionally written with flats."""
    if minor:
        return tonic in FLAT_MINOR_TONICS
    return tonic in FLAT_MAJOR_TONICS


def spell(pc: int, flats: bool = False) -> str:
    names = FLAT_NAMES if flats else SHARP_NAMES
    return names[pc % 12]
