from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .pitch import shift, spell, split_note, uses_flats


@dataclass(frozen=True)
class Chord:
    """A chord symbol: root pitch class, suffix and optional slash bass.

    ``root`` is ``None`` for bracketed text that is not a chord, e.g.
    ``[instrumental break]``; the text then lives in ``suffix`` verbatim.

    ``text`` is the spelling the chord was written with.  It is kept only
    until the chord is transposed and takes no part in equality.
    """

    root: int | None
    suffix: str = ""
    bass: int | None = None
    text: str | None = field(default=None, compare=False)

    def spelled(self, flats: bool = False) -> str:
        if self.text is not None:
            return self.text
        if self.root is None:
            return self.suffix
        name = spell(self.root, flats) + self.suffix
        if self.bass is not None:
            name += "/" + spell(self.bass, flats)
        return name

    def transposed(self, semitones: int) -> "Chord":
        if self.root is None or semitones % 12 == 0:
            return self
        bass = shift(self.bass, semitones) if self.bass is not None else None
        return Chord(root=shift(self.root, semitones), suffix=self.suffix, bass=bass)

    def __str__(self) -> str:
        return self.spelled()


@dataclass(frozen=True)
class Key:
    """A tonic pitch class plus mode, used to choose sharp or flat spelling."""

    tonic: int
    minor: bool = False

    @classmethod
    def parse(cls, text: str) -> "Key | None":
        """Parse ``"G"``, ``"Bb"``, ``"F#m"`` or ``"C minor"``; ``None`` if unreadable."""
        split = split_note(text.strip())
        if split is None:
            return None
        tonic, rest = split
        rest = rest.strip().lower()
        minor = rest.startswith("m") and not rest.startswith("maj")
        return cls(tonic=tonic, minor=minor)

    @property
    def flats(self) -> bool:
        return uses_flats(self.tonic, self.minor)

    def transposed(self, semitones: int) -> "Key":
        return Key(tonic=shift(self.tonic, semitones), minor=self.minor)

    def __str__(self) -> str:
        return spell(self.tonic, self.flats) + ("m" if self.minor else "")


@dataclass(frozen=True)
class Segment:
    """A chord (or none) paired with the lyric fragment that follows it."""

    chord: Chord | None
    lyrics: str = ""


@dataclass(frozen=True)
class LyricLine:
    """A line of lyrics with inline chords.

    Example: ``[G]Amazing [C]grace`` is two segments,
    ``(G, "Amazing ")`` and ``(C, "grace")``.
    """

    segments: tuple[Segment, ...]

    @property
    def lyrics(self) -> str:
        return "".join(s.lyrics for s in self.segments)

    @property
    def chords(self) -> tuple[Chord, ...]:
        return tuple(s.chord for s in self.segments if s.chord is not None)


# Directive names that render as a visible annotation line.
COMMENT_DIRECTIVES = frozenset({"comment", "comment_italic", "comment_box"})


@dataclass(frozen=True)
class DirectiveLine:
    """A ``{key: value}`` line.

    ``key`` is the canonical lower-case directive name.  ``value`` is
    ``None`` for bare directives such as ``{start_of_chorus}``.  ``source``
    is the line exactly as written and is re-emitted verbatim in markup.
    """

    key: str
    value: str | None = None
    source: str | None = None

    @property
    def is_comment(self) -> bool:
        return self.key in COMMENT_DIRECTIVES


@dataclass(frozen=True)
class BlankLine:
    """An empty or whitespace-only line separating stanzas."""


Line = LyricLine | DirectiveLine | BlankLine


@dataclass(frozen=True)
class Song:
    """A parsed chord sheet.

    ``transposition`` is the shift in semitones relative to the text the
    song was parsed from.  Songs are never modified in place; see
    :func:`chordsheet.transposer.transpose`.
    """

    lines: tuple[Line, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)
    transposition: int = 0

    def __post_init__(self):
        frozen = MappingProxyType({k.lower(): v for k, v in self.metadata.items()})
        object.__setattr__(self, "metadata", frozen)
        object.__setattr__(self, "lines", tuple(self.lines))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive metadata lookup."""
        return self.metadata.get(name.lower(), default)

    @property
    def title(self) -> str | None:
        return self.get("title")

    @property
    def declared_key(self) -> Key | None:
        """The key from ``{key: ...}`` metadata, if present and readable."""
        value = self.get("key")
        return Key.parse(value) if value else None

    @property
    def key(self) -> Key | None:
        """The key as written: metadata first, else the first chord's root."""
        declared = self.declared_key
        if declared is not None:
            return declared
        for chord in self.chords:
            if chord.root is not None:
                # chords are already shifted, undo it to get the written key
                return Key.parse(chord.spelled()).transposed(-self.transposition)
        return None

    @property
    def current_key(self) -> Key | None:
        """The key after transposition, for display next to the song."""
        key = self.key
        return key.transposed(self.transposition) if key is not None else None

    @property
    def flats(self) -> bool:
        """Whether chords are spelled with flats.

        Only declared key metadata biases spelling; without it chords are
        spelled with sharps.
        """
        declared = self.declared_key
        if declared is None:
            return False
        return declared.transposed(self.transposition).flats

    @property
    def chords(self) -> tuple[Chord, ...]:
        return tuple(c for line in self.lines if isinstance(line, LyricLine) for c in line.chords)

    @property
    def lyric_lines(self) -> tuple[LyricLine, ...]:
        return tuple(line for line in self.lines if isinstance(line, LyricLine))
