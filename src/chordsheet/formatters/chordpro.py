"""ChordPro markup formatter.

Writes a :class:`~chordsheet.models.Song` back in the dialect it was parsed
from.  Directive lines are re-emitted exactly as written and chords are
substituted in place, so for canonical input::

    format_song(parse(text), Mode.MARKUP) == text
"""

from ..models import DirectiveLine, LyricLine
from .base import SongFormatter


class ChordProFormatter(SongFormatter):
    """Render a :class:`~chordsheet.models.Song` to ChordPro text."""

    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        parts = []
        for segment in line.segments:
            if segment.chord is not None:
                parts.append(f"[{segment.chord.spelled(flats)}]")
            parts.append(segment.lyrics)
        return ["".join(parts)]

    def render_directive_line(self, line: DirectiveLine) -> list[str]:
        if line.source is not None:
            return [line.source]
        if line.value is None:
            return [f"{{{line.key}}}"]
        return [f"{{{line.key}: {line.value}}}"]

    def render_blank_line(self) -> list[str]:
        return [""]
