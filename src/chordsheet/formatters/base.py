from abc import ABC, abstractmethod
from typing import assert_never

from ..models import BlankLine, DirectiveLine, LyricLine, Song


class SongFormatter(ABC):
    """Abstract base class for all output formats.

    Subclasses render one line kind at a time; each hook returns zero or
    more output lines.  Spelling (sharps or flats) is decided once per song
    from its key and passed to :meth:`render_lyric_line`.
    """

    @abstractmethod
    def render_lyric_line(self, line: LyricLine, flats: bool) -> list[str]:
        """Return output lines for a line of lyrics and chords."""

    @abstractmethod
    def render_directive_line(self, line: DirectiveLine) -> list[str]:
        """Return output lines for a ``{key: value}`` directive."""

    @abstractmethod
    def render_blank_line(self) -> list[str]:
        """Return output lines for a stanza break."""

    def join(self, parts: list[str]) -> str:
        return "\n".join(parts)

    def render(self, song: Song) -> str:
        """Return *song* as text.  A song with no lines renders as ``""``."""
        flats = song.flats
        parts: list[str] = []
        for line in song.lines:
            match line:
                case LyricLine():
                    parts.extend(self.render_lyric_line(line, flats))
                case DirectiveLine():
                    parts.extend(self.render_directive_line(line))
                case BlankLine():
                    parts.extend(self.render_blank_line())
                case _:
                    assert_never(line)
        return self.join(parts)
