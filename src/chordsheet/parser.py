"""ChordPro-style markup parser.

Turns chord-annotated text into a :class:`~chordsheet.models.Song`::

    {title: Amazing Grace}
    {key: G}
    [G]Amazing [C]grace how [G]sweet

Every source line becomes exactly one line of the song, in order:

  BLANK      empty or whitespace only       -> BlankLine
  DIRECTIVE  starts with ``{``               -> DirectiveLine
  LYRIC      everything else                 -> LyricLine of Segments

Bracketed text that is not a chord (``[instrumental break]``, ``[Chorus]``)
is kept as a root-less chord so it survives transposition untouched.
Only an unterminated directive is an error.
"""

import logging
import re
from enum import Enum, auto

from .exceptions import ParseError
from .models import BlankLine, Chord, DirectiveLine, LyricLine, Segment, Song
from .pitch import split_note

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

# Any [token] group on a lyric line
CHORD_MARKER_RE = re.compile(r"\[([^\]]*)\]")

# What may follow the root of a chord: Am7, Csus4, G7b9, Cm(maj7), D6/9, Bø7
CHORD_SUFFIX_RE = re.compile(
    r"^(?:maj|min|mi|m|M|dim|aug|sus|add|alt|no|omit"
    r"|[0-9#b+\-°øΔ^(),./])*$"
)

# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------

DIRECTIVE_ALIASES = {
    "t": "title",
    "st": "subtitle",
    "c": "comment",
    "ci": "comment_italic",
    "cb": "comment_box",
    "soc": "start_of_chorus",
    "eoc": "end_of_chorus",
    "sov": "start_of_verse",
    "eov": "end_of_verse",
    "sob": "start_of_bridge",
    "eob": "end_of_bridge",
}

KNOWN_DIRECTIVES = frozenset(
    {
        "title",
        "subtitle",
        "artist",
        "key",
        "capo",
        "tempo",
        "time",
        "comment",
        "comment_italic",
        "comment_box",
        "start_of_chorus",
        "end_of_chorus",
        "start_of_verse",
        "end_of_verse",
        "start_of_bridge",
        "end_of_bridge",
    }
)


# ---------------------------------------------------------------------------
# LineType
# ---------------------------------------------------------------------------


class LineType(Enum):
    BLANK = auto()  # empty or whitespace only
    DIRECTIVE = auto()  # {title: ...}, {c: ...}, {start_of_chorus}
    LYRIC = auto()  # everything else, with or without [chords]


def classify_line(line: str) -> LineType:
    stripped = line.strip()
    if not stripped:
        return LineType.BLANK
    if stripped.startswith("{"):
        return LineType.DIRECTIVE
    return LineType.LYRIC


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------


def _verbatim(text: str) -> Chord:
    logger.debug("Keeping non-chord bracket text verbatim: %r", text)
    return Chord(root=None, suffix=text, text=text)


def _parse_bass(text: str) -> int | None:
    # Lower-case bass notes (D/a, C/f#) show up in hand-typed sheets.
    split = split_note(text[:1].upper() + text[1:])
    if split is None or split[1]:
        return None
    return split[0]


def parse_chord(text: str) -> Chord:
    """Parse the text between ``[`` and ``]`` into a :class:`Chord`.

    Never raises: text that does not read as a chord comes back with
    ``root=None`` and the text in ``suffix``.
    """
    split = split_note(text)
    if split is None:
        return _verbatim(text)
    root, rest = split

    suffix, bass = rest, None
    head, slash, tail = rest.rpartition("/")
    if slash:
        bass = _parse_bass(tail)
        if bass is not None:
            suffix = head

    if not CHORD_SUFFIX_RE.match(suffix):
        return _verbatim(text)
    return Chord(root=root, suffix=suffix, bass=bass, text=text)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def parse_directive(line: str, line_number: int | None = None) -> DirectiveLine:
    """Parse a ``{key: value}`` line.

    The first ``}`` closes the directive; directives never span lines.

    Raises:
        ParseError: If the line has no closing ``}``.
    """
    stripped = line.strip()
    close = stripped.find("}")
    if close == -1:
        raise ParseError("unterminated directive, missing '}'", line_number)
    if stripped[close + 1:].strip():
        logger.debug("Ignoring text after directive on line %s: %r", line_number, line)

    name, colon, value = stripped[1:close].partition(":")
    key = name.strip().lower()
    key = DIRECTIVE_ALIASES.get(key, key)
    if key not in KNOWN_DIRECTIVES:
        logger.debug("Unknown directive %r on line %s", key, line_number)
    return DirectiveLine(key=key, value=value.strip() if colon else None, source=line)


def parse_lyric_line(line: str) -> LyricLine:
    """Split a lyric line into segments at each ``[chord]`` marker.

    Text before the first marker becomes a chord-less segment.
    """
    segments: list[Segment] = []
    chord = None
    pos = 0

    for m in CHORD_MARKER_RE.finditer(line):
        lyrics = line[pos:m.start()]
        if chord is not None or lyrics:
            segments.append(Segment(chord=chord, lyrics=lyrics))
        chord = parse_chord(m.group(1))
        pos = m.end()

    lyrics = line[pos:]
    if chord is not None or lyrics or not segments:
        segments.append(Segment(chord=chord, lyrics=lyrics))

    return LyricLine(segments=tuple(segments))


# ---------------------------------------------------------------------------
# Full parser
# ---------------------------------------------------------------------------


def parse(text: str) -> Song:
    """Parse chord-sheet markup into a :class:`~chordsheet.models.Song`.

    Metadata is collected from directive lines that carry a value; when a
    key repeats, the first value wins.  Empty text gives a song with no
    lines.

    Raises:
        ParseError: If a directive is not closed on its own line.
    """
    if not text:
        return Song()

    lines = []
    metadata: dict[str, str] = {}

    for number, raw in enumerate(text.split("\n"), start=1):
        line = raw.rstrip("\r")
        lt = classify_line(line)

        if lt == LineType.BLANK:
            lines.append(BlankLine())
            continue

        if lt == LineType.DIRECTIVE:
            directive = parse_directive(line, number)
            if directive.value is not None:
                metadata.setdefault(directive.key, directive.value)
            lines.append(directive)
            continue

        lines.append(parse_lyric_line(line))

    return Song(lines=tuple(lines), metadata=metadata)
