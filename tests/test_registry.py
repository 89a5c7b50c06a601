import pytest

from chordsheet.exceptions import UnsupportedModeError
from chordsheet.formatters.chordpro import ChordProFormatter
from chordsheet.formatters.html import HtmlFormatter
from chordsheet.formatters.text import (
    ChordsAboveFormatter,
    ChordsInlineFormatter,
    LyricsOnlyFormatter,
)
from chordsheet.parser import parse
from chordsheet.registry import Mode, format_song, get_formatter


@pytest.mark.parametrize(
    "mode, cls",
    [
        ("markup", ChordProFormatter),
        ("display-above", ChordsAboveFormatter),
        ("display-inline", ChordsInlineFormatter),
        ("display-hidden", LyricsOnlyFormatter),
        ("html", HtmlFormatter),
    ],
)
def test_get_formatter_by_name(mode, cls):
    assert isinstance(get_formatter(mode), cls)


def test_get_formatter_by_enum():
    assert isinstance(get_formatter(Mode.ABOVE), ChordsAboveFormatter)


def test_get_formatter_unknown_mode():
    with pytest.raises(UnsupportedModeError, match="chords-right"):
        get_formatter("chords-right")


def test_format_song_defaults_to_markup():
    assert format_song(parse("[G]la")) == "[G]la"


@pytest.mark.parametrize("mode", list(Mode))
def test_format_song_empty_in_every_mode(mode):
    assert format_song(parse(""), mode) == ""
