from pathlib import Path

from chordsheet.formatters.text import (
    ChordsAboveFormatter,
    ChordsInlineFormatter,
    LyricsOnlyFormatter,
)
from chordsheet.models import Song
from chordsheet.parser import parse
from chordsheet.transposer import transpose

FIXTURE = Path(__file__).parent / "fixtures" / "amazing-grace.cho"


def _fixture_song() -> Song:
    return parse(FIXTURE.read_text(encoding="utf-8"))


def _above(text: str) -> list[str]:
    return ChordsAboveFormatter().render(parse(text)).split("\n")


# ---------------------------------------------------------------------------
# Chords above
# ---------------------------------------------------------------------------


def test_above_aligns_chords_with_segments():
    chords, lyrics = _above("[G]Amazing [C]grace how [G]sweet")
    assert lyrics == "Amazing grace how sweet"
    assert chords == "G       C         G"
    assert chords.index("C") == lyrics.index("grace")


def test_above_leading_text_without_chord():
    chords, lyrics = _above("That [G]saved a [D]wretch")
    assert lyrics == "That saved a wretch"
    assert chords.index("G") == lyrics.index("saved")
    assert chords.index("D") == lyrics.index("wretch")


def test_above_pads_lyrics_under_long_chord():
    chords, lyrics = _above("[Cmaj7]A[G]men")
    assert chords == "Cmaj7 G"
    assert lyrics == "A     men"


def test_above_chord_only_line():
    assert _above("[G] [C] [G]") == ["G C G"]


def test_above_line_without_chords():
    assert _above("just words") == ["just words"]


def test_above_uses_key_spelling():
    song = transpose(parse("{key: G}\n[G]la [D]la"), 3)
    assert ChordsAboveFormatter().render(song).split("\n")[0] == "Bb F"


def test_above_fixture_layout():
    out = ChordsAboveFormatter().render(_fixture_song()).split("\n")
    assert out == [
        "",
        "(Verse 1)",
        "G       C         G",
        "Amazing grace how sweet the sound",
        "     G       D           G",
        "That saved a wretch like me",
        "",
        "G C G",
        "",
    ]


# ---------------------------------------------------------------------------
# Chords inline
# ---------------------------------------------------------------------------


def test_inline_chords_after_lyrics():
    out = ChordsInlineFormatter().render(parse("[G]Amazing [C]grace how [G]sweet"))
    assert out == "Amazing grace how sweet  G C G"


def test_inline_chord_only_line():
    assert ChordsInlineFormatter().render(parse("[G] [C]")) == "G C"


def test_inline_line_without_chords():
    assert ChordsInlineFormatter().render(parse("just words")) == "just words"


def test_inline_rootless_chord_text():
    out = ChordsInlineFormatter().render(parse("[instrumental break]"))
    assert out == "instrumental break"


# ---------------------------------------------------------------------------
# Lyrics only
# ---------------------------------------------------------------------------


def test_hidden_fixture():
    out = LyricsOnlyFormatter().render(_fixture_song())
    assert out == (
        "\n"
        "(Verse 1)\n"
        "Amazing grace how sweet the sound\n"
        "That saved a wretch like me\n"
        "\n"
        "\n"  # chord-only line
    )


def test_hidden_contains_no_chord_text():
    song = parse("[Am7]hello [Dsus4]world [F#m/E]yo")
    out = LyricsOnlyFormatter().render(song)
    for chord in song.chords:
        assert chord.spelled() not in out


def test_hidden_keeps_chord_only_lines_as_empty():
    assert LyricsOnlyFormatter().render(parse("[G] [C]\nla la")) == "\nla la"


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------


def test_display_modes_skip_non_comment_directives():
    text = "{title: Amazing Grace}\n{key: G}\n{start_of_chorus}\nla"
    for formatter in (ChordsAboveFormatter(), ChordsInlineFormatter(), LyricsOnlyFormatter()):
        assert formatter.render(parse(text)) == "la"


def test_display_modes_render_comment_aliases():
    for formatter in (ChordsAboveFormatter(), ChordsInlineFormatter(), LyricsOnlyFormatter()):
        assert formatter.render(parse("{c: Chorus}\n{ci: softly}")) == "(Chorus)\n(softly)"


def test_display_modes_keep_each_blank_line():
    for formatter in (ChordsAboveFormatter(), ChordsInlineFormatter(), LyricsOnlyFormatter()):
        assert formatter.render(parse("a\n\nb\n\n\nc")) == "a\n\nb\n\n\nc"


def test_display_modes_empty_song():
    for formatter in (ChordsAboveFormatter(), ChordsInlineFormatter(), LyricsOnlyFormatter()):
        assert formatter.render(Song()) == ""


def test_display_modes_preserve_lyrics():
    song = _fixture_song()
    expected = "".join(line.lyrics for line in song.lyric_lines).replace(" ", "")
    chord_names = {c.spelled() for c in song.chords}
    for formatter in (ChordsAboveFormatter(), ChordsInlineFormatter(), LyricsOnlyFormatter()):
        words = [
            w
            for w in formatter.render(song).split()
            if w not in chord_names and not w.startswith("(")
            and not w.endswith(")")
        ]
        assert "".join(words) == expected
