from enum import Enum

from .exceptions import UnsupportedModeError
from .formatters.base import SongFormatter
from .formatters.chordpro import ChordProFormatter
from .formatters.html import HtmlFormatter
from .formatters.text import ChordsAboveFormatter, ChordsInlineFormatter, LyricsOnlyFormatter
from .models import Song


class Mode(str, Enum):
    MARKUP = "markup"
    ABOVE = "display-above"
    INLINE = "display-inline"
    HIDDEN = "display-hidden"
    HTML = "html"


_FORMATTERS: dict[Mode, type[SongFormatter]] = {
    Mode.MARKUP: ChordProFormatter,
    Mode.ABOVE: ChordsAboveFormatter,
    Mode.INLINE: ChordsInlineFormatter,
    Mode.HIDDEN: LyricsOnlyFormatter,
    Mode.HTML: HtmlFormatter,
}


def get_formatter(mode: Mode | str) -> SongFormatter:
    """Return an instantiated formatter for *mode*.

    Raises UnsupportedModeError if no formatter matches.
    """
    try:
        return _FORMATTERS[Mode(mode)]()
    except ValueError:
        raise UnsupportedModeError(str(mode)) from None


def format_song(song: Song, mode: Mode | str = Mode.MARKUP) -> str:
    """Render *song* in the given mode."""
    return get_formatter(mode).render(song)
