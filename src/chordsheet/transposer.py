"""Chord transposition.

:func:`transpose` never modifies its input; it returns a new song whose
chords are shifted and whose ``transposition`` records the total shift.
Callers that offer a "reset" keep the parsed original and always
transpose from it.
"""

from dataclasses import replace

from .models import Key, LyricLine, Segment, Song
from .parser import parse, parse_chord
from .pitch import SHARP_NAMES, normalize_semitones

# Keys offered when creating or editing a song.
KEYS = [*SHARP_NAMES, *(f"{name}m" for name in SHARP_NAMES)]


def _transpose_line(line, semitones: int):
    if not isinstance(line, LyricLine):
        return line
    segments = tuple(
        Segment(chord=s.chord.transposed(semitones) if s.chord else None, lyrics=s.lyrics)
        for s in line.segments
    )
    return LyricLine(segments=segments)


def transpose(song: Song, semitones: int) -> Song:
    """Return a copy of *song* with every chord moved by *semitones*.

    Any integer is accepted; ``14`` and ``2`` shift chords identically.
    Root-less chords, suffixes, lyrics and directives are left alone, so
    ``{key: G}`` still reads ``G`` afterwards.  Use ``song.current_key``
    for the shifted key.
    """
    step = normalize_semitones(semitones)
    lines = tuple(_transpose_line(line, step) for line in song.lines)
    total = normalize_semitones(song.transposition + step)
    return replace(song, lines=lines, transposition=total)


def transpose_chord(chord: str, semitones: int, key: str | None = None) -> str:
    """Transpose a single chord name, e.g. ``transpose_chord("Am7", 3) == "Cm7"``.

    Spelling follows *key* (already transposed) when given, else sharps.
    Text that is not a chord is returned unchanged.
    """
    parsed = parse_chord(chord)
    if parsed.root is None:
        return chord
    target = Key.parse(key) if key else None
    flats = target.flats if target is not None else False
    return parsed.transposed(semitones).spelled(flats)


def get_transpose_interval(from_key: str, to_key: str) -> int:
    """Semitones up from *from_key* to *to_key*, in 0-11.

    Unknown keys give 0.
    """
    src = Key.parse(from_key) if from_key else None
    dst = Key.parse(to_key) if to_key else None
    if src is None or dst is None:
        return 0
    return (dst.tonic - src.tonic) % 12


def detect_key(text: str) -> str | None:
    """Return the ``{key: ...}`` value from markup, or ``None``."""
    return parse(text).get("key") or None


def format_shift(semitones: int) -> str:
    """Label a transposition amount: ``"+3"``, ``"-2"``, ``"0"``."""
    step = normalize_semitones(semitones)
    return f"{step:+d}" if step else "0"


def key_label(song: Song) -> str | None:
    """Describe the song's key before and after transposition.

    ``"G"`` when untransposed, ``"G -> A (+2)"`` otherwise.
    """
    key = song.key
    if key is None:
        return None
    if not song.transposition:
        return str(key)
    return f"{key} -> {song.current_key} ({format_shift(song.transposition)})"

