"""Plain-text display formatters.

Three ways to show ``[G]Amazing [C]grace``::

    ChordsAboveFormatter     G       C
                             Amazing grace

    ChordsInlineFormatter    Amazing grace  G C

    LyricsOnlyFormatter      Amazing grace

All three print each blank line once, print comment directives as
``(text)`` and skip every other directive.
"""

from ..models import DirectiveLine, LyricLine
from .base import SongFormatter


class _DisplayFormatter(SongFormatter):
    comment_template = "({})"

    def render_directive_line(self, line: DirectiveLine) -> list[str]:
        if line.is_comment and line.value:
            return [self.comment_template.format(line.value)]
        return []

    def render_blank_line(self) -> list[str]:
        return [""]


class ChordsAboveFormatter(_DisplayFormatter):
    """Chords on their own row, each starting over its first lyric character.

    A lyric fragment shorter than its chord is padded with spaces so the
    next chord cannot run into it.
    """

    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        if not line.chords:
            return [line.lyrics]

        chord_row, lyric_row = [], []
        last = len(line.segments) - 1
        for i, segment in enumerate(line.segments):
            name = segment.chord.spelled(flats) if segment.chord else ""
            width = len(segment.lyrics)
            if name:
                width = max(width, len(name) + (1 if i < last else 0))
            chord_row.append(name.ljust(width))
            lyric_row.append(segment.lyrics.ljust(width))

        chords = "".join(chord_row).rstrip()
        lyrics = "".join(lyric_row).rstrip()
        if not lyrics:
            # chord-only line, e.g. an intro
            return [chords]
        return [chords, lyrics]


class ChordsInlineFormatter(_DisplayFormatter):
    """Lyrics first, then the line's chords to the right."""

    separator = "  "

    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        chords = " ".join(c.spelled(flats) for c in line.chords)
        lyrics = line.lyrics.rstrip()
        if not chords:
            return [line.lyrics]
        if not lyrics.strip():
            return [chords]
        return [f"{lyrics}{self.separator}{chords}"]


class LyricsOnlyFormatter(_DisplayFormatter):
    """Lyrics with every chord removed.  Chord-only lines print as empty lines."""

    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        if not line.lyrics.strip():
            return [""]
        return [line.lyrics]
